"""Exercise domain event catalog."""

from __future__ import annotations

EXERCISES_SESSION_STARTED = "exercises.session.started"
EXERCISES_SESSION_STOPPED = "exercises.session.stopped"
EXERCISES_ENTRY_UPDATED = "exercises.entry.updated"
EXERCISES_ENTRY_DELETED = "exercises.entry.deleted"

EVENT_CATALOG = {
    EXERCISES_SESSION_STARTED: {
        "version": "v1",
        "payload": {
            "entry_id": "int",
            "exercise_id": "int",
            "mood_before_id": "int",
            "start_time": "datetime",
        },
    },
    EXERCISES_SESSION_STOPPED: {
        "version": "v1",
        "payload": {
            "entry_id": "int",
            "exercise_id": "int",
            "mood_before_id": "int",
            "mood_after_id": "int",
            "start_time": "datetime",
            "end_time": "datetime",
        },
    },
    EXERCISES_ENTRY_UPDATED: {
        "version": "v1",
        "payload": {
            "entry_id": "int",
            "fields": "dict",
        },
    },
    EXERCISES_ENTRY_DELETED: {
        "version": "v1",
        "payload": {
            "entry_id": "int",
        },
    },
}

__all__ = [
    "EVENT_CATALOG",
    "EXERCISES_SESSION_STARTED",
    "EXERCISES_SESSION_STOPPED",
    "EXERCISES_ENTRY_UPDATED",
    "EXERCISES_ENTRY_DELETED",
]
