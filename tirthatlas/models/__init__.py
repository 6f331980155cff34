"""Data models for attribute rows, places, states and images."""
from tirthatlas.models.images import ImageRef
from tirthatlas.models.place import (
    AttributeRow,
    Coordinates,
    FieldList,
    FieldRecord,
    FieldValue,
    Place,
    PlaceSummary,
    Scalar,
    StateEntry,
)

__all__ = [
    "AttributeRow",
    "Coordinates",
    "FieldList",
    "FieldRecord",
    "FieldValue",
    "ImageRef",
    "Place",
    "PlaceSummary",
    "Scalar",
    "StateEntry",
]
