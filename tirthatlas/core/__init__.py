"""Core services: record store, projection, image resolution, favorites, catalog facade."""
from tirthatlas.core.catalog import CatalogFacade
from tirthatlas.core.errors import CatalogError, CatalogLoadError, PlaceNotFound
from tirthatlas.core.favorites import FavoritesService
from tirthatlas.core.record_store import RecordStore

__all__ = [
    "CatalogError",
    "CatalogFacade",
    "CatalogLoadError",
    "FavoritesService",
    "PlaceNotFound",
    "RecordStore",
]
