"""Pydantic schemas for analytics series and query parameters."""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from mindscape.core.analytics.windows import WINDOW_PRESETS


class TrendPoint(BaseModel):
    label: str
    timestamp: dt.datetime
    mood_id: int
    mood_name: str


class EffectivenessPoint(BaseModel):
    exercise_id: int
    exercise_name: str
    sessions: int
    mean_mood_before: Optional[float]
    mean_mood_after: Optional[float]


class DistributionSlice(BaseModel):
    mood_id: int
    mood_name: str
    count: int
    percentage: float


class VariationBand(BaseModel):
    band: str
    label: str
    mood_ids: List[int]
    day_count: int
    night_count: int
    day_percentage: float
    night_percentage: float


class WindowQuery(BaseModel):
    """Query params shared by the analytics endpoints.

    ``start``/``end`` take precedence over ``range`` when both are given.
    """

    range: Optional[str] = Field(default=None, description="One of 1W, 1M, 3M, 6M.")
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None

    @field_validator("range", mode="before")
    @classmethod
    def _normalize_range(cls, value: Optional[str]):
        if value is None:
            return None
        normalized = str(value).strip().upper()
        if not normalized:
            return None
        if normalized not in WINDOW_PRESETS:
            raise ValueError("invalid_range")
        return normalized

    @field_validator("start", "end", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
