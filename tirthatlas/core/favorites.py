"""Favorite places: in-memory set and favorite-first ordering."""
import threading
from typing import Callable, Iterable, List, Set, TypeVar

T = TypeVar("T")


def _name_of(item) -> str:
    return item if isinstance(item, str) else item.name


def order_favorites_first(
    items: Iterable[T],
    favorites: Iterable[str],
    key: Callable[[T], str] = _name_of,
) -> List[T]:
    """Stable partition: favorites first, input order kept within each group."""
    favs = set(favorites)
    items = list(items)
    return [i for i in items if key(i) in favs] + [i for i in items if key(i) not in favs]


class InMemoryFavoritesStore:
    """Favorites store that keeps nothing across restarts."""

    def load(self) -> Set[str]:
        return set()

    def save(self, names: Set[str]) -> None:
        pass


class FavoritesService:
    """Process-lifetime favorite set, mutated by the presentation layer."""

    def __init__(self, store=None) -> None:
        """store: anything with load() -> set and save(set); defaults to in-memory."""
        self._store = store or InMemoryFavoritesStore()
        self._lock = threading.Lock()
        self._names: Set[str] = set(self._store.load())

    def toggle(self, place_name: str) -> bool:
        """Flip favorite state; returns True if the place is now a favorite."""
        with self._lock:
            if place_name in self._names:
                self._names.discard(place_name)
                now_favorite = False
            else:
                self._names.add(place_name)
                now_favorite = True
            self._store.save(set(self._names))
        return now_favorite

    def is_favorite(self, place_name: str) -> bool:
        with self._lock:
            return place_name in self._names

    def snapshot(self) -> frozenset:
        with self._lock:
            return frozenset(self._names)
