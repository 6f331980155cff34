"""Resolve (state, place) to ordered image references; drop slots that fail to load."""
import logging
from typing import List, Optional, Sequence, TypeVar

from tirthatlas.core.record_store import ImageMapping
from tirthatlas.models.images import ImageRef

logger = logging.getLogger(__name__)

T = TypeVar("T")


def remove_failed(images: Sequence[T], index: int) -> List[T]:
    """Return a new list without the slot at index; order of the rest is kept.

    The failed slot is dropped rather than retried or replaced by a placeholder.
    """
    if index < 0 or index >= len(images):
        raise IndexError(f"image index {index} out of range for {len(images)} images")
    return [img for i, img in enumerate(images) if i != index]


class ImageResolver:
    def __init__(self, mapping: ImageMapping) -> None:
        self._mapping = mapping

    def resolve(self, state_name: Optional[str], place_name: str) -> List[ImageRef]:
        """All images for a place. Unknown state, unknown place and empty list all give []."""
        images = self._mapping.images_for(state_name, place_name)
        if not images:
            logger.debug("No images for %s / %s", state_name, place_name)
        return images

    def first_image(self, state_name: Optional[str], place_name: str) -> Optional[ImageRef]:
        images = self.resolve(state_name, place_name)
        return images[0] if images else None

    def cover(self, state_name: str) -> Optional[ImageRef]:
        return self._mapping.cover_for(state_name)
