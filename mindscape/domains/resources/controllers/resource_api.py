"""Favorite resources JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from mindscape.domains.resources.mappers import map_favorite
from mindscape.domains.resources.schemas.resource_schemas import (
    FavoriteCheck,
    FavoriteCreate,
    FavoriteUpdate,
)
from mindscape.domains.resources.services import resource_service

resource_api_bp = Blueprint("resource_api", __name__)


def _validation_error(exc: ValidationError):
    return jsonify({"ok": False, "error": "validation_error", "details": exc.errors(include_url=False, include_context=False)}), 400


@resource_api_bp.get("")
def list_favorites():
    keyword = (request.args.get("q") or "").strip()
    if keyword:
        items = resource_service.search_favorites(keyword)
    else:
        items = resource_service.list_favorites()
    return jsonify({"ok": True, "items": [map_favorite(r) for r in items]})


@resource_api_bp.get("/check")
def check_favorite():
    try:
        params = FavoriteCheck.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_error(exc)
    return jsonify({"ok": True, "favorited": resource_service.is_favorited(params.name, params.address)})


@resource_api_bp.get("/<int:resource_id>")
def get_favorite(resource_id: int):
    resource = resource_service.get_favorite(resource_id)
    if not resource:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "resource": map_favorite(resource)})


@resource_api_bp.post("")
def add_favorite():
    payload = request.get_json(silent=True) or {}
    try:
        data = FavoriteCreate.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    try:
        resource = resource_service.add_favorite(**data.model_dump())
    except ValueError as exc:
        code = str(exc)
        return jsonify({"ok": False, "error": code}), 409 if code == "duplicate" else 400
    return jsonify({"ok": True, "resource": map_favorite(resource)}), 201


@resource_api_bp.patch("/<int:resource_id>")
def update_favorite(resource_id: int):
    payload = request.get_json(silent=True) or {}
    try:
        data = FavoriteUpdate.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    try:
        resource = resource_service.update_favorite(resource_id, **data.model_dump(exclude_unset=True))
    except ValueError as exc:
        code = str(exc)
        return jsonify({"ok": False, "error": code}), 409 if code == "duplicate" else 400
    if not resource:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "resource": map_favorite(resource)})


@resource_api_bp.delete("/<int:resource_id>")
def delete_favorite(resource_id: int):
    if not resource_service.delete_favorite(resource_id):
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True})
