"""Exercise service tests: listing, before-mood correction and deletion."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from mindscape.core.errors import IllegalStateError
from mindscape.domains.exercises import services
from mindscape.domains.exercises.repository import ExerciseRepository

pytestmark = pytest.mark.integration

START = datetime(2026, 6, 2, 18, 45, 0)


def _session_row(exercise_id: int = 1, before: int | None = 4, after: int | None = 6, offset_days: int = 0):
    repo = ExerciseRepository()
    start = START + timedelta(days=offset_days)
    entry = repo.insert_entry(
        exercise_id=exercise_id,
        mood_before_id=before,
        mood_after_id=after,
        start_time=start,
        end_time=start + timedelta(minutes=12),
    )
    repo.commit()
    return entry


def test_reference_exercises_seeded(app):
    names = [e.name for e in services.list_exercises()]
    assert names == ["Deep Breathing", "Progressive Muscle Relaxation", "Box Breathing"]


def test_list_entries_newest_first(app):
    old = _session_row(offset_days=0)
    new = _session_row(offset_days=2)
    items, total = services.list_exercise_entries()
    assert total == 2
    assert [e.id for e in items] == [new.id, old.id]


def test_entries_in_range_on_start_time(app):
    inside = _session_row(offset_days=1)
    _session_row(offset_days=10)
    rows = ExerciseRepository().entries_in_range(START, START + timedelta(days=2))
    assert [r.id for r in rows] == [inside.id]


def test_update_mood_before(app):
    entry = _session_row(before=None)
    updated = services.update_mood_before(entry.id, 8)
    assert updated.mood_before_id == 8
    assert updated.mood_after_id == 6


def test_update_mood_before_missing_entry(app):
    assert services.update_mood_before(999, 8) is None


def test_update_mood_before_unknown_mood(app):
    entry = _session_row()
    with pytest.raises(ValueError, match="unknown_mood"):
        services.update_mood_before(entry.id, 77)


def test_delete_exercise_entry(app):
    entry = _session_row()
    assert services.delete_exercise_entry(entry.id) is True
    assert services.get_exercise_entry(entry.id) is None
    assert services.delete_exercise_entry(entry.id) is False


def test_delete_exercise_entry_refuses_active_session_entry(app):
    entry = _session_row()
    with pytest.raises(IllegalStateError, match="session_in_progress"):
        services.delete_exercise_entry(entry.id, active_entry_id=entry.id)
    assert services.get_exercise_entry(entry.id) is not None
