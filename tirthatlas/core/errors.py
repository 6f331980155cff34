"""Typed failures raised by the catalog engine."""


class CatalogError(Exception):
    """Base class for catalog failures surfaced to callers."""


class PlaceNotFound(CatalogError):
    """No attribute rows or structured record exist for the place name."""

    def __init__(self, place_name: str) -> None:
        super().__init__(f"Place not found: {place_name}")
        self.place_name = place_name


class CatalogLoadError(CatalogError):
    """A source table exists but could not be read or parsed."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Could not load {path}: {reason}")
        self.path = path
        self.reason = reason
