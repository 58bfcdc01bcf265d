"""Exercise services: reference listing and after-the-fact corrections."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from mindscape.core.errors import IllegalStateError, PersistenceError
from mindscape.core.events import publish
from mindscape.domains.exercises.events import EXERCISES_ENTRY_DELETED, EXERCISES_ENTRY_UPDATED
from mindscape.domains.exercises.models import Exercise, ExerciseEntry
from mindscape.domains.exercises.repository import ExerciseRepository
from mindscape.domains.moods.repository import MoodRepository

logger = logging.getLogger(__name__)


def list_exercises(repository: ExerciseRepository | None = None) -> List[Exercise]:
    return (repository or ExerciseRepository()).list_exercises()


def get_exercise_entry(entry_id: int, repository: ExerciseRepository | None = None) -> Optional[ExerciseEntry]:
    return (repository or ExerciseRepository()).get_entry(entry_id)


def list_exercise_entries(
    page: int = 1, per_page: int = 50, repository: ExerciseRepository | None = None
) -> Tuple[List[ExerciseEntry], int]:
    return (repository or ExerciseRepository()).list_entries(page, per_page)


def update_mood_before(
    entry_id: int,
    mood_before_id: int,
    *,
    repository: ExerciseRepository | None = None,
    moods: MoodRepository | None = None,
) -> Optional[ExerciseEntry]:
    """Fill in or correct the before-mood of a logged session."""
    repo = repository or ExerciseRepository()
    if repo.get_entry(entry_id) is None:
        return None
    if (moods or MoodRepository()).get_mood(mood_before_id) is None:
        raise ValueError("unknown_mood")
    if repo.update_mood_before(entry_id, mood_before_id) == 0:
        repo.rollback()
        raise PersistenceError("exercise_entry_update_failed")
    repo.commit()
    publish(EXERCISES_ENTRY_UPDATED, {"entry_id": entry_id, "fields": {"mood_before_id": mood_before_id}})
    return repo.get_entry(entry_id)


def delete_exercise_entry(
    entry_id: int,
    repository: ExerciseRepository | None = None,
    *,
    active_entry_id: int | None = None,
) -> bool:
    """Delete one entry. The provisional entry of the running session is refused."""
    if active_entry_id is not None and entry_id == active_entry_id:
        raise IllegalStateError("session_in_progress")
    repo = repository or ExerciseRepository()
    if repo.delete_entry(entry_id) == 0:
        repo.rollback()
        return False
    repo.commit()
    logger.info("Deleted exercise entry %s", entry_id)
    publish(EXERCISES_ENTRY_DELETED, {"entry_id": entry_id})
    return True
