"""Catalog facade: the three read operations the presentation layer calls."""
import logging
from typing import List, Optional

from tirthatlas.core.errors import PlaceNotFound
from tirthatlas.core.favorites import FavoritesService, order_favorites_first
from tirthatlas.core.field_projector import FieldProjector
from tirthatlas.core.image_resolver import ImageResolver
from tirthatlas.core.place_catalog import PlaceCatalog
from tirthatlas.core.record_store import RecordStore
from tirthatlas.models.place import Place, PlaceSummary, StateEntry

logger = logging.getLogger(__name__)


class CatalogFacade:
    """Composes catalog, projector and image resolver over one loaded store.

    Results are recomputed per call from immutable tables, so repeated calls
    with the same arguments return equal results.
    """

    def __init__(self, store: RecordStore, favorites: Optional[FavoritesService] = None) -> None:
        self.store = store
        self.favorites = favorites or FavoritesService()
        self.catalog = PlaceCatalog(store)
        self.projector = FieldProjector(store)
        self.images = ImageResolver(store.image_mapping)

    def list_states(self) -> List[StateEntry]:
        return [
            StateEntry(name=name, cover_image=self.images.cover(name))
            for name in self.catalog.list_states()
        ]

    def list_places(self, state_name: str) -> List[PlaceSummary]:
        """Places of a state with their first image, favorites first."""
        favorites = self.favorites.snapshot()
        summaries = [
            PlaceSummary(
                name=name,
                preview_image=self.images.first_image(state_name, name),
                is_favorite=name in favorites,
            )
            for name in self.catalog.list_places(state_name)
        ]
        return order_favorites_first(summaries, favorites)

    def get_place_detail(self, place_name: str, state_name: Optional[str] = None) -> Place:
        """Canonical place detail. Raises PlaceNotFound when nothing describes the place."""
        if not self.catalog.has_place(place_name):
            raise PlaceNotFound(place_name)
        if not state_name:
            state_name = self.catalog.state_of(place_name)
            logger.debug("Inferred state %r for %s", state_name, place_name)
        fields, coordinates = self.projector.project_detail(place_name)
        return Place(
            name=place_name,
            state=state_name,
            fields=fields,
            images=self.images.resolve(state_name, place_name),
            coordinates=coordinates,
        )
