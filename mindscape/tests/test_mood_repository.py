"""Mood repository tests: range queries, ranking and store failure translation."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from mindscape.core.errors import StoreError
from mindscape.core.repositories import EntryKind, entries_in_range
from mindscape.domains.moods.repository import MoodRepository

pytestmark = pytest.mark.integration

BASE = datetime(2026, 5, 1, 8, 0, 0)


def _log(repo: MoodRepository, mood_id: int, when: datetime, tag: str | None = None):
    entry = repo.insert_entry(mood_id=mood_id, tag=tag, timestamp=when)
    repo.commit()
    return entry


def test_reference_moods_seeded(app):
    repo = MoodRepository()
    moods = repo.list_moods()
    assert len(moods) == 15
    assert moods[0].name == "Relaxed"
    assert repo.get_mood(10).name == "Anxious"
    assert repo.get_mood(15).name == "Bored"
    assert repo.get_mood_by_name("Happy").id == 3
    assert repo.get_mood_by_name("happy") is None


def test_lookup_missing_returns_none(app):
    repo = MoodRepository()
    assert repo.get_mood(99) is None
    assert repo.get_entry(12345) is None


def test_entries_in_range_ascending_and_inclusive(app):
    repo = MoodRepository()
    later = _log(repo, 3, BASE + timedelta(hours=2))
    earlier = _log(repo, 1, BASE)
    _log(repo, 5, BASE + timedelta(days=3))

    rows = repo.entries_in_range(BASE, BASE + timedelta(hours=2))
    assert [r.id for r in rows] == [earlier.id, later.id]


def test_entries_in_range_ties_broken_by_id(app):
    repo = MoodRepository()
    first = _log(repo, 4, BASE)
    second = _log(repo, 2, BASE)
    rows = repo.entries_in_range(BASE, BASE)
    assert [r.id for r in rows] == [first.id, second.id]


def test_entries_in_range_empty_and_inverted(app):
    repo = MoodRepository()
    _log(repo, 1, BASE)
    assert repo.entries_in_range(BASE + timedelta(days=1), BASE + timedelta(days=2)) == []
    assert repo.entries_in_range(BASE + timedelta(days=1), BASE) == []


def test_aware_bounds_are_compared_in_local_time(app):
    repo = MoodRepository()
    entry = _log(repo, 6, BASE)
    aware = BASE.astimezone(timezone.utc)
    rows = repo.entries_in_range(aware, aware)
    assert [r.id for r in rows] == [entry.id]


def test_entries_in_range_dispatches_by_kind(app):
    repo = MoodRepository()
    entry = _log(repo, 7, BASE)
    assert [r.id for r in entries_in_range(EntryKind.MOOD, BASE, BASE)] == [entry.id]
    assert [r.id for r in entries_in_range("mood", BASE, BASE)] == [entry.id]
    assert entries_in_range(EntryKind.EXERCISE, BASE, BASE) == []
    with pytest.raises(ValueError):
        entries_in_range("journal", BASE, BASE)


def test_list_entries_newest_first(app):
    repo = MoodRepository()
    old = _log(repo, 1, BASE)
    new = _log(repo, 2, BASE + timedelta(minutes=1))
    items, total = repo.list_entries()
    assert total == 2
    assert [e.id for e in items] == [new.id, old.id]


def test_frequency_ranking_scenario(app):
    repo = MoodRepository()
    for i in range(5):
        _log(repo, 1, BASE + timedelta(minutes=i))
    for i in range(3):
        _log(repo, 10, BASE + timedelta(hours=1, minutes=i))
    _log(repo, 15, BASE + timedelta(hours=2))

    ranking = repo.frequency_ranking(3)
    assert list(ranking.items()) == [("Relaxed", 5), ("Anxious", 3), ("Bored", 1)]


def test_frequency_ranking_limit_and_ties(app):
    repo = MoodRepository()
    for mood_id in (9, 4, 4, 9, 2):
        _log(repo, mood_id, BASE)

    ranking = repo.frequency_ranking(2)
    assert list(ranking.items()) == [("Excited", 2), ("Stressed", 2)]
    assert len(repo.frequency_ranking(10)) == 3
    counts = list(repo.frequency_ranking(10).values())
    assert counts == sorted(counts, reverse=True)


def test_frequency_ranking_zero_and_negative(app):
    repo = MoodRepository()
    _log(repo, 1, BASE)
    assert repo.frequency_ranking(0) == {}
    with pytest.raises(ValueError):
        repo.frequency_ranking(-1)


def test_frequency_ranking_empty_store(app):
    assert MoodRepository().frequency_ranking(5) == {}


def test_update_and_delete_report_rowcount(app):
    repo = MoodRepository()
    entry = _log(repo, 1, BASE, tag="Work")
    assert repo.update_entry(entry.id, mood_id=2, tag=None) == 1
    repo.commit()
    assert repo.get_entry(entry.id).mood_id == 2
    assert repo.update_entry(9999, mood_id=2, tag=None) == 0
    assert repo.delete_entry(entry.id) == 1
    repo.commit()
    assert repo.delete_entry(entry.id) == 0


@pytest.mark.unit
def test_store_failure_becomes_store_error():
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT 1", {}, Exception("database is locked"))
    repo = MoodRepository(session=session)

    with pytest.raises(StoreError) as excinfo:
        repo.entries_in_range(BASE, BASE)
    assert excinfo.value.message == "entries_in_range_failed"
    session.rollback.assert_called_once()
