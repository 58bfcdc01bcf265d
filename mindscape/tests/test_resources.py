"""Favorite resource services and API tests."""

from __future__ import annotations

import pytest

from mindscape.domains.resources.services import resource_service

pytestmark = pytest.mark.integration


def _add(name="Riverside Clinic", address="12 Mill Lane", **extra):
    return resource_service.add_favorite(name=name, address=address, **extra)


def test_add_and_duplicate(app):
    resource = _add(phone_number=" 555-0100 ", website="")
    assert resource.phone_number == "555-0100"
    assert resource.website is None
    assert resource_service.is_favorited("Riverside Clinic", "12 Mill Lane") is True
    assert resource_service.is_favorited("Riverside Clinic", "99 Elsewhere") is False
    with pytest.raises(ValueError, match="duplicate"):
        _add()


def test_list_ordered_by_name_and_search(app):
    _add(name="Zen Centre", address="1 Quiet Road")
    _add(name="Anchor Helpline", address="PO Box 4")
    _add(name="Mill Counselling", address="3 Mill Lane")

    assert [r.name for r in resource_service.list_favorites()] == ["Anchor Helpline", "Mill Counselling", "Zen Centre"]
    assert [r.name for r in resource_service.search_favorites("mill")] == ["Mill Counselling"]
    assert [r.name for r in resource_service.search_favorites("quiet")] == ["Zen Centre"]


def test_update_and_delete(app):
    resource = _add()
    other = _add(name="Other", address="2 Side St")
    updated = resource_service.update_favorite(resource.id, website="https://riverside.example")
    assert updated.website == "https://riverside.example"
    with pytest.raises(ValueError, match="duplicate"):
        resource_service.update_favorite(other.id, name="Riverside Clinic", address="12 Mill Lane")
    assert resource_service.update_favorite(999, name="x") is None

    assert resource_service.delete_favorite(resource.id) is True
    assert resource_service.get_favorite(resource.id) is None
    assert resource_service.delete_favorite(resource.id) is False


def test_resources_api(client):
    payload = {"name": "Harbour House", "address": "8 Quay St", "phone_number": "555-0199"}
    resp = client.post("/api/resources", json=payload)
    assert resp.status_code == 201
    resource_id = resp.get_json()["resource"]["id"]

    assert client.post("/api/resources", json=payload).status_code == 409
    assert client.post("/api/resources", json={"name": "No address"}).status_code == 400

    check = client.get("/api/resources/check", query_string={"name": "Harbour House", "address": "8 Quay St"}).get_json()
    assert check["favorited"] is True
    assert len(client.get("/api/resources?q=quay").get_json()["items"]) == 1

    resp = client.patch(f"/api/resources/{resource_id}", json={"website": "https://harbour.example"})
    assert resp.get_json()["resource"]["website"] == "https://harbour.example"

    assert client.delete(f"/api/resources/{resource_id}").status_code == 200
    assert client.get(f"/api/resources/{resource_id}").status_code == 404
