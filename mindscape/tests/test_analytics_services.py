"""Analytics services against the store."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from mindscape.core.analytics import services
from mindscape.domains.exercises.repository import ExerciseRepository
from mindscape.domains.moods import services as mood_services

pytestmark = pytest.mark.integration

DAY = datetime(2026, 9, 10)
WINDOW = (DAY, DAY + timedelta(days=1))


def _seed_moods():
    for mood_id, hour in ((1, 7), (1, 9), (10, 20), (15, 13), (6, 2)):
        mood_services.log_mood(mood_id, timestamp=DAY.replace(hour=hour))
    mood_services.log_mood(3, timestamp=DAY - timedelta(days=5))


def test_trend_series_chronological(app):
    _seed_moods()
    series = services.trend_series(*WINDOW)
    assert [p.mood_id for p in series] == [6, 1, 1, 15, 10]
    assert {p.label for p in series} == {"09/10"}
    assert series[0].mood_name == "Hopeful"


def test_distribution_series(app):
    _seed_moods()
    series = services.distribution_series(*WINDOW)
    assert [(s.mood_id, s.count) for s in series] == [(1, 2), (6, 1), (10, 1), (15, 1)]
    assert sum(s.percentage for s in series) == pytest.approx(100.0)


def test_variation_series(app):
    _seed_moods()
    by_band = {b.band: b for b in services.variation_series(*WINDOW)}
    assert (by_band["low"].day_count, by_band["low"].night_count) == (2, 0)
    assert (by_band["mid"].day_count, by_band["mid"].night_count) == (0, 2)
    assert (by_band["high"].day_count, by_band["high"].night_count) == (1, 0)


def test_effectiveness_series_excludes_open_sessions(app):
    repo = ExerciseRepository()
    start = DAY.replace(hour=8)
    repo.insert_entry(exercise_id=1, mood_before_id=2, mood_after_id=6, start_time=start, end_time=start + timedelta(minutes=10))
    repo.insert_entry(exercise_id=1, mood_before_id=4, mood_after_id=8, start_time=start, end_time=start + timedelta(minutes=20))
    repo.insert_entry(exercise_id=3, mood_before_id=9, mood_after_id=9, start_time=start, end_time=start, is_open=True)
    repo.commit()

    series = services.effectiveness_series(*WINDOW)
    assert len(series) == 1
    point = series[0]
    assert point.exercise_name == "Deep Breathing"
    assert (point.sessions, point.mean_mood_before, point.mean_mood_after) == (2, 3.0, 7.0)


def test_empty_window_yields_empty_series(app):
    _seed_moods()
    empty = (DAY + timedelta(days=30), DAY + timedelta(days=31))
    assert services.trend_series(*empty) == []
    assert services.distribution_series(*empty) == []
    assert services.variation_series(*empty) == []
    assert services.effectiveness_series(*empty) == []


def test_top_moods(app):
    _seed_moods()
    assert list(services.top_moods(2).items()) == [("Relaxed", 2), ("Happy", 1)]
