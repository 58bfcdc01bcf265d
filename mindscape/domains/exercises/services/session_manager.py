"""Lifecycle of the single in-flight guided-exercise session.

The manager is a two-state machine, ``Idle`` or ``Active(handle)``. Opening a
session writes a provisional entry (after-mood mirrors the before-mood, end
time equals start time, ``is_open`` set); closing it finalises the after-mood
and end time. Every transition runs under one lock, so concurrent callers
cannot open two sessions from the same manager.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Union

from mindscape.core.errors import IllegalStateError, PersistenceError
from mindscape.core.events import publish
from mindscape.core.utils.dates import now_local
from mindscape.domains.exercises.events import (
    EXERCISES_SESSION_STARTED,
    EXERCISES_SESSION_STOPPED,
)
from mindscape.domains.exercises.repository import ExerciseRepository
from mindscape.domains.moods.repository import MoodRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionHandle:
    entry_id: int
    exercise_id: int
    mood_before_id: int
    started_at: datetime


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Active:
    handle: SessionHandle


SessionState = Union[Idle, Active]


class ExerciseSessionManager:
    def __init__(
        self,
        exercises: ExerciseRepository | None = None,
        moods: MoodRepository | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._exercises = exercises
        self._moods = moods
        self._clock = clock or now_local
        self._lock = threading.Lock()
        self._state: SessionState = Idle()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return isinstance(self._state, Active)

    def current(self) -> Optional[SessionHandle]:
        state = self._state
        return state.handle if isinstance(state, Active) else None

    def start_session(self, exercise_id: int, mood_before_id: int) -> SessionHandle:
        """Open a session. Valid only while Idle; the state stays Idle on any failure."""
        with self._lock:
            if isinstance(self._state, Active):
                raise IllegalStateError("session_in_progress")
            exercises = self._exercise_repo()
            if exercises.get_exercise(exercise_id) is None:
                raise ValueError("unknown_exercise")
            self._require_mood(mood_before_id)

            started_at = self._clock()
            entry = exercises.insert_entry(
                exercise_id=exercise_id,
                mood_before_id=mood_before_id,
                mood_after_id=mood_before_id,
                start_time=started_at,
                end_time=started_at,
                is_open=True,
            )
            if entry.id is None:
                exercises.rollback()
                raise PersistenceError("session_start_failed")
            exercises.commit()

            handle = SessionHandle(
                entry_id=entry.id,
                exercise_id=exercise_id,
                mood_before_id=mood_before_id,
                started_at=entry.start_time,
            )
            self._state = Active(handle)

        logger.info("Exercise session %s started (exercise %s)", handle.entry_id, exercise_id)
        publish(
            EXERCISES_SESSION_STARTED,
            {
                "entry_id": handle.entry_id,
                "exercise_id": exercise_id,
                "mood_before_id": mood_before_id,
                "start_time": handle.started_at.isoformat(),
            },
        )
        return handle

    def stop_session(self, mood_after_id: int) -> bool:
        """Close the active session.

        Both the after-mood and the end time must be written. If either write
        fails the transaction is rolled back, the error propagates and the
        manager stays Active so the same call can be retried.
        """
        with self._lock:
            state = self._state
            if not isinstance(state, Active):
                raise IllegalStateError("no_session_in_progress")
            handle = state.handle
            self._require_mood(mood_after_id)

            exercises = self._exercise_repo()
            ended_at = max(self._clock(), handle.started_at)
            mood_rows = exercises.update_mood_after(handle.entry_id, mood_after_id)
            time_rows = exercises.update_end_time(handle.entry_id, ended_at, close=True)
            if not mood_rows or not time_rows:
                exercises.rollback()
                logger.warning(
                    "Exercise session %s not closed (mood rows=%s, end-time rows=%s)",
                    handle.entry_id,
                    mood_rows,
                    time_rows,
                )
                raise PersistenceError("session_stop_failed")
            exercises.commit()
            self._state = Idle()

        logger.info("Exercise session %s stopped", handle.entry_id)
        publish(
            EXERCISES_SESSION_STOPPED,
            {
                "entry_id": handle.entry_id,
                "exercise_id": handle.exercise_id,
                "mood_before_id": handle.mood_before_id,
                "mood_after_id": mood_after_id,
                "start_time": handle.started_at.isoformat(),
                "end_time": ended_at.isoformat(),
            },
        )
        return True

    def _exercise_repo(self) -> ExerciseRepository:
        return self._exercises or ExerciseRepository()

    def _require_mood(self, mood_id: int) -> None:
        moods = self._moods or MoodRepository()
        if moods.get_mood(mood_id) is None:
            raise ValueError("unknown_mood")


__all__ = ["ExerciseSessionManager", "SessionHandle", "SessionState", "Idle", "Active"]
