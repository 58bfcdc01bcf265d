"""Analytics services: read a window through the repositories, then build."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List

from mindscape.core.analytics import engine
from mindscape.core.analytics.schemas import (
    DistributionSlice,
    EffectivenessPoint,
    TrendPoint,
    VariationBand,
)
from mindscape.core.repositories import EntryKind, entries_in_range
from mindscape.domains.exercises.repository import ExerciseRepository
from mindscape.domains.moods.repository import MoodRepository


def trend_series(start: datetime, end: datetime) -> List[TrendPoint]:
    entries = entries_in_range(EntryKind.MOOD, start, end)
    if not entries:
        return []
    return engine.build_trend_series(entries, MoodRepository().mood_names())


def effectiveness_series(start: datetime, end: datetime) -> List[EffectivenessPoint]:
    entries = entries_in_range(EntryKind.EXERCISE, start, end)
    if not entries:
        return []
    return engine.build_effectiveness_series(entries, ExerciseRepository().exercise_names())


def distribution_series(start: datetime, end: datetime) -> List[DistributionSlice]:
    entries = entries_in_range(EntryKind.MOOD, start, end)
    if not entries:
        return []
    return engine.build_distribution_series(entries, MoodRepository().mood_names())


def variation_series(start: datetime, end: datetime) -> List[VariationBand]:
    entries = entries_in_range(EntryKind.MOOD, start, end)
    if not entries:
        return []
    return engine.build_variation_series(entries, MoodRepository().mood_names())


def top_moods(limit: int) -> Dict[str, int]:
    """Most frequently logged moods, most common first."""
    return MoodRepository().frequency_ranking(limit)
