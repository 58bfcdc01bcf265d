"""Series builders behind the analytics views.

Builders are pure: they take entries already fetched for a window plus the
id -> name lookups and return schema objects. An empty window yields an empty
series.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from mindscape.core.analytics.schemas import (
    DistributionSlice,
    EffectivenessPoint,
    TrendPoint,
    VariationBand,
)

TREND_LABEL_FORMAT = "%m/%d"
UNKNOWN_MOOD = "Unknown"
UNKNOWN_EXERCISE = "Unknown Exercise"

# Ordinal mood bands over ids 1..15.
MOOD_BANDS = (
    ("low", tuple(range(1, 6))),
    ("mid", tuple(range(6, 11))),
    ("high", tuple(range(11, 16))),
)

# Day is [DAY_START_HOUR, DAY_END_HOUR) local time; everything else is night.
DAY_START_HOUR = 6
DAY_END_HOUR = 18


def band_for(mood_id: int) -> Optional[str]:
    for band, mood_ids in MOOD_BANDS:
        if mood_id in mood_ids:
            return band
    return None


def is_daytime(hour: int) -> bool:
    return DAY_START_HOUR <= hour < DAY_END_HOUR


def build_trend_series(entries: Iterable, mood_names: Dict[int, str]) -> List[TrendPoint]:
    """One point per mood entry, in the order given (chronological)."""
    return [
        TrendPoint(
            label=entry.timestamp.strftime(TREND_LABEL_FORMAT),
            timestamp=entry.timestamp,
            mood_id=entry.mood_id,
            mood_name=mood_names.get(entry.mood_id, UNKNOWN_MOOD),
        )
        for entry in entries
    ]


def build_effectiveness_series(entries: Iterable, exercise_names: Dict[int, str]) -> List[EffectivenessPoint]:
    """Mean before/after mood id per exercise.

    Mood ids are averaged as plain numbers. Sessions still open are left out,
    and an exercise with no closed sessions in the window gets no point.
    """
    groups: Dict[int, list] = defaultdict(list)
    for entry in entries:
        if getattr(entry, "is_open", False):
            continue
        groups[entry.exercise_id].append(entry)

    series = []
    for exercise_id in sorted(groups):
        group = groups[exercise_id]
        series.append(
            EffectivenessPoint(
                exercise_id=exercise_id,
                exercise_name=exercise_names.get(exercise_id, UNKNOWN_EXERCISE),
                sessions=len(group),
                mean_mood_before=_mean(e.mood_before_id for e in group),
                mean_mood_after=_mean(e.mood_after_id for e in group),
            )
        )
    return series


def build_distribution_series(entries: Sequence, mood_names: Dict[int, str]) -> List[DistributionSlice]:
    total = len(entries)
    if not total:
        return []
    counts = Counter(entry.mood_id for entry in entries)
    return [
        DistributionSlice(
            mood_id=mood_id,
            mood_name=mood_names.get(mood_id, UNKNOWN_MOOD),
            count=count,
            percentage=count / total * 100,
        )
        for mood_id, count in sorted(counts.items())
    ]


def build_variation_series(entries: Sequence, mood_names: Dict[int, str]) -> List[VariationBand]:
    """Day versus night counts per mood band.

    Percentages are taken over every entry in the window, so the six values
    across all bands sum to 100 when every entry falls in a band.
    """
    total = len(entries)
    if not total:
        return []
    day = Counter()
    night = Counter()
    for entry in entries:
        band = band_for(entry.mood_id)
        if band is None:
            continue
        if is_daytime(entry.timestamp.hour):
            day[band] += 1
        else:
            night[band] += 1

    series = []
    for band, mood_ids in MOOD_BANDS:
        series.append(
            VariationBand(
                band=band,
                label=_band_label(mood_ids, mood_names),
                mood_ids=list(mood_ids),
                day_count=day[band],
                night_count=night[band],
                day_percentage=day[band] / total * 100,
                night_percentage=night[band] / total * 100,
            )
        )
    return series


def _band_label(mood_ids: Sequence[int], mood_names: Dict[int, str]) -> str:
    first = mood_names.get(mood_ids[0], UNKNOWN_MOOD)
    last = mood_names.get(mood_ids[-1], UNKNOWN_MOOD)
    return f"{first} - {last}"


def _mean(values: Iterable[Optional[int]]) -> Optional[float]:
    """Mean of the non-null ids. Nulls are skipped rather than counted as 0, so an all-null group gives None."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present) / len(present)


__all__ = [
    "DAY_END_HOUR",
    "DAY_START_HOUR",
    "MOOD_BANDS",
    "band_for",
    "build_distribution_series",
    "build_effectiveness_series",
    "build_trend_series",
    "build_variation_series",
    "is_daytime",
]
