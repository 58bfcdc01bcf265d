from mindscape.domains.resources.services.resource_service import (
    add_favorite,
    delete_favorite,
    get_favorite,
    is_favorited,
    list_favorites,
    search_favorites,
    update_favorite,
)

__all__ = [
    "add_favorite",
    "delete_favorite",
    "get_favorite",
    "is_favorited",
    "list_favorites",
    "search_favorites",
    "update_favorite",
]
