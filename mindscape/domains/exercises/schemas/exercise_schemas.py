"""Exercise request/response schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=50, ge=1, le=200)


class SessionStart(BaseModel):
    exercise_id: int = Field(ge=1)
    mood_before_id: int = Field(ge=1)


class SessionStop(BaseModel):
    mood_after_id: int = Field(ge=1)


class MoodBeforeUpdate(BaseModel):
    mood_before_id: int = Field(ge=1)


class ExerciseResponse(BaseModel):
    id: int
    name: str
    description: str


class ExerciseEntryResponse(BaseModel):
    id: int
    exercise_id: int
    mood_before_id: Optional[int]
    mood_after_id: Optional[int]
    start_time: str
    end_time: str
    is_open: bool
    duration_seconds: int


class SessionHandleResponse(BaseModel):
    entry_id: int
    exercise_id: int
    mood_before_id: int
    started_at: str
