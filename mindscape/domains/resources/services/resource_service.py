"""Favorite resource services."""

from __future__ import annotations

import logging
from typing import List, Optional

from mindscape.core.events import publish
from mindscape.core.utils.decorators import translate_session_errors
from mindscape.domains.resources.events import (
    RESOURCES_FAVORITE_ADDED,
    RESOURCES_FAVORITE_DELETED,
    RESOURCES_FAVORITE_UPDATED,
)
from mindscape.domains.resources.models import FavoriteResource
from mindscape.extensions import db

logger = logging.getLogger(__name__)


def list_favorites() -> List[FavoriteResource]:
    return FavoriteResource.query.order_by(FavoriteResource.name.asc(), FavoriteResource.id.asc()).all()


def get_favorite(resource_id: int) -> Optional[FavoriteResource]:
    return db.session.get(FavoriteResource, resource_id)


def search_favorites(keyword: str) -> List[FavoriteResource]:
    like = f"%{(keyword or '').strip()}%"
    return (
        FavoriteResource.query.filter(
            db.or_(
                FavoriteResource.name.ilike(like),
                FavoriteResource.address.ilike(like),
            )
        )
        .order_by(FavoriteResource.name.asc(), FavoriteResource.id.asc())
        .all()
    )


def is_favorited(name: str, address: str) -> bool:
    return (
        FavoriteResource.query.filter_by(name=(name or "").strip(), address=(address or "").strip()).count() > 0
    )


@translate_session_errors
def add_favorite(
    *,
    name: str,
    address: str,
    phone_number: str | None = None,
    website: str | None = None,
) -> FavoriteResource:
    name_norm = _required(name)
    address_norm = _required(address)
    if is_favorited(name_norm, address_norm):
        raise ValueError("duplicate")
    resource = FavoriteResource(
        name=name_norm,
        address=address_norm,
        phone_number=(phone_number or "").strip() or None,
        website=(website or "").strip() or None,
    )
    db.session.add(resource)
    db.session.commit()
    logger.info("Added favorite resource %s", resource.id)
    publish(
        RESOURCES_FAVORITE_ADDED,
        {"resource_id": resource.id, "name": resource.name, "address": resource.address},
    )
    return resource


@translate_session_errors
def update_favorite(resource_id: int, **fields) -> Optional[FavoriteResource]:
    resource = db.session.get(FavoriteResource, resource_id)
    if not resource:
        return None
    changed = {}
    for key in ("name", "address"):
        if fields.get(key) is not None:
            changed[key] = _required(fields[key])
    for key in ("phone_number", "website"):
        if key in fields:
            changed[key] = (fields[key] or "").strip() or None

    name = changed.get("name", resource.name)
    address = changed.get("address", resource.address)
    if (name, address) != (resource.name, resource.address) and is_favorited(name, address):
        raise ValueError("duplicate")
    for key, val in changed.items():
        setattr(resource, key, val)
    db.session.commit()
    publish(RESOURCES_FAVORITE_UPDATED, {"resource_id": resource.id, "fields": changed})
    return resource


@translate_session_errors
def delete_favorite(resource_id: int) -> bool:
    resource = db.session.get(FavoriteResource, resource_id)
    if not resource:
        return False
    db.session.delete(resource)
    db.session.commit()
    logger.info("Deleted favorite resource %s", resource_id)
    publish(RESOURCES_FAVORITE_DELETED, {"resource_id": resource_id})
    return True


def _required(value: str | None) -> str:
    text = (value or "").strip()
    if not text:
        raise ValueError("validation_error")
    return text
