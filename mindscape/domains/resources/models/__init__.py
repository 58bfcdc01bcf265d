from mindscape.domains.resources.models.favorite_resource import FavoriteResource

__all__ = ["FavoriteResource"]
