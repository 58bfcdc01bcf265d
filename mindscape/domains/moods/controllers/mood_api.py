"""Mood JSON API."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from mindscape.core.analytics import services as analytics
from mindscape.core.utils.pagination import page_count
from mindscape.domains.moods import services
from mindscape.domains.moods.mappers import map_mood, map_mood_entry
from mindscape.domains.moods.schemas.mood_schemas import (
    MoodEntryCreate,
    MoodEntryListFilter,
    MoodEntryUpdate,
    TopMoodsQuery,
)

mood_api_bp = Blueprint("mood_api", __name__)


def _parse_query(schema_cls):
    data = {k: v for k, v in request.args.items()}
    try:
        return schema_cls.model_validate(data), None
    except ValidationError as exc:
        return None, exc


def _validation_error(exc: ValidationError):
    return jsonify({"ok": False, "error": "validation_error", "details": exc.errors(include_url=False, include_context=False)}), 400


@mood_api_bp.get("")
def list_moods():
    return jsonify({"ok": True, "items": [map_mood(m) for m in services.list_moods()]})


@mood_api_bp.get("/entries")
def list_entries():
    params, err = _parse_query(MoodEntryListFilter)
    if err:
        return _validation_error(err)
    items, total = services.list_mood_entries(params.page, params.per_page)
    return jsonify(
        {
            "ok": True,
            "items": [map_mood_entry(e) for e in items],
            "page": params.page,
            "pages": page_count(total, params.per_page),
            "total": total,
        }
    )


@mood_api_bp.post("/entries")
def create_entry():
    payload = request.get_json(silent=True) or {}
    try:
        data = MoodEntryCreate.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    try:
        entry = services.log_mood(data.mood_id, tag=data.tag, timestamp=data.timestamp)
    except ValueError as exc:
        return jsonify({"ok": False, "error": str(exc)}), 400
    return jsonify({"ok": True, "entry": map_mood_entry(entry)}), 201


@mood_api_bp.get("/entries/<int:entry_id>")
def get_entry(entry_id: int):
    entry = services.get_mood_entry(entry_id)
    if not entry:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "entry": map_mood_entry(entry)})


@mood_api_bp.patch("/entries/<int:entry_id>")
def update_entry(entry_id: int):
    payload = request.get_json(silent=True) or {}
    try:
        data = MoodEntryUpdate.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    try:
        entry = services.update_mood_entry(entry_id, **data.model_dump(exclude_unset=True))
    except ValueError as exc:
        return jsonify({"ok": False, "error": str(exc)}), 400
    if not entry:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "entry": map_mood_entry(entry)})


@mood_api_bp.delete("/entries/<int:entry_id>")
def delete_entry(entry_id: int):
    if not services.delete_mood_entry(entry_id):
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True})


@mood_api_bp.get("/top")
def top_moods():
    params, err = _parse_query(TopMoodsQuery)
    if err:
        return _validation_error(err)
    limit = params.limit if params.limit is not None else current_app.config["FREQUENCY_RANKING_DEFAULT"]
    ranking = analytics.top_moods(limit)
    return jsonify({"ok": True, "items": [{"mood": name, "count": count} for name, count in ranking.items()]})
