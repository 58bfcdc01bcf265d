"""Mood domain event catalog."""

from __future__ import annotations

MOODS_ENTRY_LOGGED = "moods.entry.logged"
MOODS_ENTRY_UPDATED = "moods.entry.updated"
MOODS_ENTRY_DELETED = "moods.entry.deleted"

EVENT_CATALOG = {
    MOODS_ENTRY_LOGGED: {
        "version": "v1",
        "payload": {
            "entry_id": "int",
            "mood_id": "int",
            "tag": "str?",
            "timestamp": "datetime",
        },
    },
    MOODS_ENTRY_UPDATED: {
        "version": "v1",
        "payload": {
            "entry_id": "int",
            "mood_id": "int",
            "tag": "str?",
        },
    },
    MOODS_ENTRY_DELETED: {
        "version": "v1",
        "payload": {
            "entry_id": "int",
        },
    },
}

__all__ = [
    "EVENT_CATALOG",
    "MOODS_ENTRY_LOGGED",
    "MOODS_ENTRY_UPDATED",
    "MOODS_ENTRY_DELETED",
]
