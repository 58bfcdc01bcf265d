from __future__ import annotations

from datetime import timedelta

import pytest

from mindscape.core.utils.dates import now_local
from mindscape.domains.moods import services as mood_services

pytestmark = pytest.mark.integration


def test_series_default_window(client, app):
    recent = now_local() - timedelta(days=2)
    mood_services.log_mood(2, timestamp=recent)
    mood_services.log_mood(2, timestamp=recent + timedelta(minutes=1))
    mood_services.log_mood(14, timestamp=now_local() - timedelta(days=200))

    data = client.get("/api/analytics/distribution").get_json()
    assert data["ok"] is True
    assert [(s["mood_name"], s["count"]) for s in data["items"]] == [("Content", 2)]
    assert data["items"][0]["percentage"] == pytest.approx(100.0)

    data = client.get("/api/analytics/distribution?range=6M").get_json()
    assert len(data["items"]) == 1
    data = client.get("/api/analytics/trend?range=1W").get_json()
    assert [p["mood_id"] for p in data["items"]] == [2, 2]


def test_explicit_start_end_override_range(client):
    mood_services.log_mood(9, timestamp=now_local().replace(year=2025, month=1, day=15, hour=20))
    resp = client.get(
        "/api/analytics/variation?range=1W&start=2025-01-01T00:00:00&end=2025-01-31T23:59:59"
    )
    data = resp.get_json()
    assert resp.status_code == 200
    assert data["start"] == "2025-01-01T00:00:00"
    mid = next(b for b in data["items"] if b["band"] == "mid")
    assert mid["night_count"] == 1
    assert mid["night_percentage"] == pytest.approx(100.0)


def test_effectiveness_endpoint(client):
    client.post("/api/exercises/sessions", json={"exercise_id": 2, "mood_before_id": 11})
    client.post("/api/exercises/sessions/stop", json={"mood_after_id": 4})
    data = client.get("/api/analytics/effectiveness?range=1W").get_json()
    assert data["items"] == [
        {
            "exercise_id": 2,
            "exercise_name": "Progressive Muscle Relaxation",
            "sessions": 1,
            "mean_mood_before": 11.0,
            "mean_mood_after": 4.0,
        }
    ]


def test_empty_window_and_bad_params(client):
    data = client.get("/api/analytics/trend?start=2020-01-01T00:00:00&end=2020-01-02T00:00:00").get_json()
    assert data["items"] == []
    assert client.get("/api/analytics/trend?range=2Y").status_code == 400
    assert client.get("/api/analytics/trend?start=yesterday").status_code == 400


def test_health(client):
    assert client.get("/health").get_json() == {"ok": True}
