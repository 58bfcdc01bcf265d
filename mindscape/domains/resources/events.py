"""Favorite resource event catalog."""

from __future__ import annotations

RESOURCES_FAVORITE_ADDED = "resources.favorite.added"
RESOURCES_FAVORITE_UPDATED = "resources.favorite.updated"
RESOURCES_FAVORITE_DELETED = "resources.favorite.deleted"

EVENT_CATALOG = {
    RESOURCES_FAVORITE_ADDED: {
        "version": "v1",
        "payload": {"resource_id": "int", "name": "str", "address": "str"},
    },
    RESOURCES_FAVORITE_UPDATED: {
        "version": "v1",
        "payload": {"resource_id": "int", "fields": "dict"},
    },
    RESOURCES_FAVORITE_DELETED: {
        "version": "v1",
        "payload": {"resource_id": "int"},
    },
}

__all__ = [
    "EVENT_CATALOG",
    "RESOURCES_FAVORITE_ADDED",
    "RESOURCES_FAVORITE_UPDATED",
    "RESOURCES_FAVORITE_DELETED",
]
