"""Favorite resource mappers for DTO responses."""

from __future__ import annotations

from mindscape.domains.resources.models import FavoriteResource
from mindscape.domains.resources.schemas.resource_schemas import FavoriteResponse


def map_favorite(resource: FavoriteResource) -> dict:
    return FavoriteResponse(
        id=resource.id,
        name=resource.name,
        address=resource.address,
        phone_number=resource.phone_number,
        website=resource.website,
    ).model_dump()
