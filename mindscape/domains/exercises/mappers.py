"""DTO mappers for the exercise domain."""

from __future__ import annotations

from mindscape.domains.exercises.models import Exercise, ExerciseEntry
from mindscape.domains.exercises.schemas.exercise_schemas import (
    ExerciseEntryResponse,
    ExerciseResponse,
    SessionHandleResponse,
)
from mindscape.domains.exercises.services.session_manager import SessionHandle


def map_exercise(exercise: Exercise) -> dict:
    return ExerciseResponse(id=exercise.id, name=exercise.name, description=exercise.description or "").model_dump()


def map_exercise_entry(entry: ExerciseEntry) -> dict:
    return ExerciseEntryResponse(
        id=entry.id,
        exercise_id=entry.exercise_id,
        mood_before_id=entry.mood_before_id,
        mood_after_id=entry.mood_after_id,
        start_time=entry.start_time.isoformat(),
        end_time=entry.end_time.isoformat(),
        is_open=entry.is_open,
        duration_seconds=entry.duration_seconds,
    ).model_dump()


def map_session_handle(handle: SessionHandle) -> dict:
    return SessionHandleResponse(
        entry_id=handle.entry_id,
        exercise_id=handle.exercise_id,
        mood_before_id=handle.mood_before_id,
        started_at=handle.started_at.isoformat(),
    ).model_dump()
