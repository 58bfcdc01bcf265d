"""Typed accessors over the exercise tables."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from mindscape.core.utils.dates import to_local_naive
from mindscape.core.utils.decorators import translate_store_errors
from mindscape.core.utils.pagination import paginate
from mindscape.domains.exercises.models import Exercise, ExerciseEntry
from mindscape.extensions import db


class ExerciseRepository:
    """Repository for exercises and exercise entries.

    Update and delete helpers return the number of affected rows so callers can
    tell a missing row apart from a store failure (which raises ``StoreError``).
    Nothing here commits on its own.
    """

    def __init__(self, session=None):
        self._session = session or db.session

    @translate_store_errors
    def list_exercises(self) -> List[Exercise]:
        return self._session.query(Exercise).order_by(Exercise.id).all()

    @translate_store_errors
    def get_exercise(self, exercise_id: int) -> Optional[Exercise]:
        return self._session.get(Exercise, exercise_id)

    @translate_store_errors
    def exercise_names(self) -> Dict[int, str]:
        return {ex_id: name for ex_id, name in self._session.query(Exercise.id, Exercise.name).all()}

    @translate_store_errors
    def get_entry(self, entry_id: int) -> Optional[ExerciseEntry]:
        return self._session.get(ExerciseEntry, entry_id, populate_existing=True)

    @translate_store_errors
    def list_entries(self, page: int = 1, per_page: int = 50) -> Tuple[List[ExerciseEntry], int]:
        query = self._session.query(ExerciseEntry).order_by(ExerciseEntry.start_time.desc(), ExerciseEntry.id.desc())
        return paginate(query, page, per_page)

    @translate_store_errors
    def entries_in_range(self, start: datetime, end: datetime) -> List[ExerciseEntry]:
        """Entries whose start time falls in ``[start, end]``, oldest first."""
        return (
            self._session.query(ExerciseEntry)
            .filter(
                ExerciseEntry.start_time >= to_local_naive(start),
                ExerciseEntry.start_time <= to_local_naive(end),
            )
            .order_by(ExerciseEntry.start_time.asc(), ExerciseEntry.id.asc())
            .all()
        )

    @translate_store_errors
    def insert_entry(
        self,
        *,
        exercise_id: int,
        mood_before_id: int | None,
        mood_after_id: int | None,
        start_time: datetime,
        end_time: datetime,
        is_open: bool = False,
    ) -> ExerciseEntry:
        entry = ExerciseEntry(
            exercise_id=exercise_id,
            mood_before_id=mood_before_id,
            mood_after_id=mood_after_id,
            start_time=to_local_naive(start_time),
            end_time=to_local_naive(end_time),
            is_open=is_open,
        )
        self._session.add(entry)
        self._session.flush()
        return entry

    @translate_store_errors
    def update_mood_before(self, entry_id: int, mood_id: int) -> int:
        return self._update(entry_id, {ExerciseEntry.mood_before_id: mood_id})

    @translate_store_errors
    def update_mood_after(self, entry_id: int, mood_id: int) -> int:
        return self._update(entry_id, {ExerciseEntry.mood_after_id: mood_id})

    @translate_store_errors
    def update_end_time(self, entry_id: int, end_time: datetime, *, close: bool = True) -> int:
        values = {ExerciseEntry.end_time: to_local_naive(end_time)}
        if close:
            values[ExerciseEntry.is_open] = False
        return self._update(entry_id, values)

    @translate_store_errors
    def delete_entry(self, entry_id: int) -> int:
        return (
            self._session.query(ExerciseEntry)
            .filter(ExerciseEntry.id == entry_id)
            .delete(synchronize_session="fetch")
        )

    @translate_store_errors
    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()

    def _update(self, entry_id: int, values: dict) -> int:
        return (
            self._session.query(ExerciseEntry)
            .filter(ExerciseEntry.id == entry_id)
            .update(values, synchronize_session="fetch")
        )


__all__ = ["ExerciseRepository"]
