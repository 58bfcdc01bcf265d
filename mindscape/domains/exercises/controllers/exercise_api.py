"""Exercise and guided-session JSON API."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from mindscape.core.utils.pagination import page_count
from mindscape.domains.exercises import services
from mindscape.domains.exercises.mappers import map_exercise, map_exercise_entry, map_session_handle
from mindscape.domains.exercises.schemas.exercise_schemas import (
    MoodBeforeUpdate,
    Pagination,
    SessionStart,
    SessionStop,
)

exercise_api_bp = Blueprint("exercise_api", __name__)


def _session_manager() -> services.ExerciseSessionManager:
    return current_app.extensions["exercise_sessions"]


def _validation_error(exc: ValidationError):
    return jsonify({"ok": False, "error": "validation_error", "details": exc.errors(include_url=False, include_context=False)}), 400


@exercise_api_bp.get("")
def list_exercises():
    return jsonify({"ok": True, "items": [map_exercise(e) for e in services.list_exercises()]})


@exercise_api_bp.get("/entries")
def list_entries():
    try:
        params = Pagination.model_validate({k: v for k, v in request.args.items()})
    except ValidationError as exc:
        return _validation_error(exc)
    items, total = services.list_exercise_entries(params.page, params.per_page)
    return jsonify(
        {
            "ok": True,
            "items": [map_exercise_entry(e) for e in items],
            "page": params.page,
            "pages": page_count(total, params.per_page),
            "total": total,
        }
    )


@exercise_api_bp.get("/entries/<int:entry_id>")
def get_entry(entry_id: int):
    entry = services.get_exercise_entry(entry_id)
    if not entry:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "entry": map_exercise_entry(entry)})


@exercise_api_bp.patch("/entries/<int:entry_id>/mood-before")
def update_mood_before(entry_id: int):
    payload = request.get_json(silent=True) or {}
    try:
        data = MoodBeforeUpdate.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    try:
        entry = services.update_mood_before(entry_id, data.mood_before_id)
    except ValueError as exc:
        return jsonify({"ok": False, "error": str(exc)}), 400
    if not entry:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "entry": map_exercise_entry(entry)})


@exercise_api_bp.delete("/entries/<int:entry_id>")
def delete_entry(entry_id: int):
    handle = _session_manager().current()
    active_entry_id = handle.entry_id if handle else None
    if not services.delete_exercise_entry(entry_id, active_entry_id=active_entry_id):
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True})


@exercise_api_bp.get("/sessions/current")
def current_session():
    handle = _session_manager().current()
    return jsonify({"ok": True, "active": handle is not None, "session": map_session_handle(handle) if handle else None})


@exercise_api_bp.post("/sessions")
def start_session():
    payload = request.get_json(silent=True) or {}
    try:
        data = SessionStart.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    try:
        handle = _session_manager().start_session(data.exercise_id, data.mood_before_id)
    except ValueError as exc:
        return jsonify({"ok": False, "error": str(exc)}), 400
    return jsonify({"ok": True, "session": map_session_handle(handle)}), 201


@exercise_api_bp.post("/sessions/stop")
def stop_session():
    payload = request.get_json(silent=True) or {}
    try:
        data = SessionStop.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    manager = _session_manager()
    handle = manager.current()
    try:
        manager.stop_session(data.mood_after_id)
    except ValueError as exc:
        return jsonify({"ok": False, "error": str(exc)}), 400
    entry = services.get_exercise_entry(handle.entry_id)
    return jsonify({"ok": True, "entry": map_exercise_entry(entry) if entry else None})
