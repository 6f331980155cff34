"""Image references handed out to the presentation layer."""
from dataclasses import dataclass

KIND_URL = "url"
KIND_ASSET = "asset"


@dataclass(frozen=True)
class ImageRef:
    """A displayable image: remote URL or bundled asset handle."""
    ref: str
    kind: str = KIND_URL  # "url" | "asset"
