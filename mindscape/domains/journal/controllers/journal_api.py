"""Journal JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from mindscape.core.utils.pagination import page_count
from mindscape.domains.journal.mappers import map_entry
from mindscape.domains.journal.schemas.journal_schemas import (
    JournalEntryCreate,
    JournalEntryListFilter,
    JournalEntryUpdate,
)
from mindscape.domains.journal.services import journal_service

journal_api_bp = Blueprint("journal_api", __name__)


@journal_api_bp.get("")
def list_journal():
    try:
        filters = JournalEntryListFilter.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return jsonify({"ok": False, "error": "validation_error", "details": exc.errors(include_url=False, include_context=False)}), 400
    entries, total = journal_service.list_entries(
        search_text=filters.q,
        page=filters.page,
        per_page=filters.per_page,
    )
    return jsonify(
        {
            "ok": True,
            "items": [map_entry(e) for e in entries],
            "page": filters.page,
            "pages": page_count(total, filters.per_page),
            "total": total,
        }
    )


@journal_api_bp.get("/<int:entry_id>")
def get_entry(entry_id: int):
    entry = journal_service.get_entry(entry_id)
    if not entry:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "entry": map_entry(entry)})


@journal_api_bp.post("")
def create_journal_entry():
    payload = request.get_json(silent=True) or {}
    try:
        data = JournalEntryCreate.model_validate(payload)
    except ValidationError as exc:
        return jsonify({"ok": False, "error": "validation_error", "details": exc.errors(include_url=False, include_context=False)}), 400
    try:
        entry = journal_service.create_entry(title=data.title, body=data.body, entry_time=data.entry_time)
    except ValueError:
        return jsonify({"ok": False, "error": "validation_error"}), 400
    return jsonify({"ok": True, "entry": map_entry(entry)}), 201


@journal_api_bp.patch("/<int:entry_id>")
def update_journal_entry(entry_id: int):
    payload = request.get_json(silent=True) or {}
    try:
        data = JournalEntryUpdate.model_validate(payload)
    except ValidationError as exc:
        return jsonify({"ok": False, "error": "validation_error", "details": exc.errors(include_url=False, include_context=False)}), 400
    try:
        entry = journal_service.update_entry(entry_id, **data.model_dump(exclude_none=True))
    except ValueError:
        return jsonify({"ok": False, "error": "validation_error"}), 400
    if not entry:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "entry": map_entry(entry)})


@journal_api_bp.delete("/<int:entry_id>")
def delete_journal_entry(entry_id: int):
    if not journal_service.delete_entry(entry_id):
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True})
