"""Mood request/response schemas."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from mindscape.domains.moods.constants import TAG_MAX_LENGTH


class Pagination(BaseModel):
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=50, ge=1, le=200)


class MoodEntryCreate(BaseModel):
    mood_id: int = Field(ge=1)
    tag: Optional[str] = Field(default=None, max_length=TAG_MAX_LENGTH)
    timestamp: Optional[dt.datetime] = None


class MoodEntryUpdate(BaseModel):
    mood_id: Optional[int] = Field(default=None, ge=1)
    tag: Optional[str] = Field(default=None, max_length=TAG_MAX_LENGTH)


class MoodEntryListFilter(Pagination):
    pass


class TopMoodsQuery(BaseModel):
    limit: Optional[int] = Field(default=None, ge=0, le=100)


class MoodResponse(BaseModel):
    id: int
    name: str


class MoodEntryResponse(BaseModel):
    id: int
    mood_id: int
    mood_name: Optional[str]
    tag: Optional[str]
    timestamp: str
