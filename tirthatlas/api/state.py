"""Shared application state (injected into routes)."""
import logging
import threading

from tirthatlas.config import ATTRIBUTES_PATH, IMAGE_MAPPING_PATH
from tirthatlas.core.catalog import CatalogFacade
from tirthatlas.core.errors import CatalogLoadError
from tirthatlas.core.favorites import FavoritesService
from tirthatlas.core.record_store import RecordStore

logger = logging.getLogger(__name__)


class AppState:
    def __init__(self) -> None:
        self.favorites = FavoritesService()
        self._lock = threading.Lock()
        self._catalog = CatalogFacade(RecordStore(), self.favorites)
        self.attributes_path = ATTRIBUTES_PATH
        self.image_mapping_path = IMAGE_MAPPING_PATH

    @property
    def catalog(self) -> CatalogFacade:
        with self._lock:
            return self._catalog

    def use_store(self, store: RecordStore) -> None:
        """Swap in a freshly loaded store; favorites survive the swap."""
        catalog = CatalogFacade(store, self.favorites)
        with self._lock:
            self._catalog = catalog

    def load_catalog(self) -> None:
        """Read both source tables from disk. Raises CatalogLoadError, keeping the old store."""
        store = RecordStore.from_files(self.attributes_path, self.image_mapping_path)
        self.use_store(store)
        logger.info("Catalog loaded: %d states", len(self.catalog.list_states()))

    def try_load_catalog(self) -> bool:
        try:
            self.load_catalog()
            return True
        except CatalogLoadError as e:
            logger.error("Catalog load failed: %s", e)
            return False


_state = AppState()


def get_state() -> AppState:
    return _state
