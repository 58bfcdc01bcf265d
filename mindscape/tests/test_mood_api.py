"""Mood API tests.

- GET /api/moods
- GET/POST /api/moods/entries
- GET/PATCH/DELETE /api/moods/entries/<id>
- GET /api/moods/top
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from mindscape.core.errors import StoreError

pytestmark = pytest.mark.integration


def _create(client, mood_id, **extra):
    resp = client.post("/api/moods/entries", json={"mood_id": mood_id, **extra})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()["entry"]


def test_list_reference_moods(client):
    resp = client.get("/api/moods")
    data = resp.get_json()
    assert resp.status_code == 200
    assert len(data["items"]) == 15
    assert data["items"][9] == {"id": 10, "name": "Anxious"}


def test_create_and_get_entry(client):
    entry = _create(client, 4, tag="Hobby", timestamp="2026-04-01T10:11:12")
    assert entry["mood_name"] == "Excited"
    assert entry["timestamp"] == "2026-04-01T10:11:12"

    resp = client.get(f"/api/moods/entries/{entry['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["entry"]["tag"] == "Hobby"


def test_create_validation_errors(client):
    assert client.post("/api/moods/entries", json={}).status_code == 400
    assert client.post("/api/moods/entries", json={"mood_id": 0}).status_code == 400
    resp = client.post("/api/moods/entries", json={"mood_id": 99})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "unknown_mood"
    resp = client.post("/api/moods/entries", json={"mood_id": 1, "tag": "x" * 65})
    assert resp.status_code == 400


def test_list_entries_paginated(client):
    for mood_id, day in ((1, 1), (2, 2), (3, 3)):
        _create(client, mood_id, timestamp=f"2026-04-0{day}T09:00:00")
    resp = client.get("/api/moods/entries?per_page=2")
    data = resp.get_json()
    assert data["total"] == 3
    assert data["pages"] == 2
    assert [e["mood_id"] for e in data["items"]] == [3, 2]
    assert client.get("/api/moods/entries?page=0").status_code == 400


def test_patch_and_delete_entry(client):
    entry = _create(client, 1, tag="Work")
    resp = client.patch(f"/api/moods/entries/{entry['id']}", json={"mood_id": 12})
    assert resp.status_code == 200
    assert resp.get_json()["entry"]["mood_name"] == "Angry"
    assert resp.get_json()["entry"]["tag"] == "Work"

    assert client.delete(f"/api/moods/entries/{entry['id']}").status_code == 200
    assert client.get(f"/api/moods/entries/{entry['id']}").status_code == 404
    assert client.delete(f"/api/moods/entries/{entry['id']}").status_code == 404
    assert client.patch("/api/moods/entries/999", json={"tag": "x"}).status_code == 404


def test_top_moods(client, app):
    for mood_id in (1, 1, 1, 1, 1, 10, 10, 10, 15):
        _create(client, mood_id)
    resp = client.get("/api/moods/top?limit=3")
    assert resp.get_json()["items"] == [
        {"mood": "Relaxed", "count": 5},
        {"mood": "Anxious", "count": 3},
        {"mood": "Bored", "count": 1},
    ]
    app.config["FREQUENCY_RANKING_DEFAULT"] = 1
    assert len(client.get("/api/moods/top").get_json()["items"]) == 1
    assert client.get("/api/moods/top?limit=0").get_json()["items"] == []
    assert client.get("/api/moods/top?limit=-1").status_code == 400


def test_store_failure_maps_to_503(client):
    with patch(
        "mindscape.domains.moods.controllers.mood_api.services.list_mood_entries",
        side_effect=StoreError("list_entries_failed"),
    ):
        resp = client.get("/api/moods/entries")
    assert resp.status_code == 503
    assert resp.get_json()["error"] == "store_unavailable"
