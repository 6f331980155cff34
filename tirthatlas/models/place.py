"""Attribute rows and the derived place views built from them."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from tirthatlas.models.images import ImageRef


@dataclass(frozen=True)
class AttributeRow:
    """One row of the attribute sheet: a single key/value for one place."""
    place_name: str
    key: str
    value: str
    translated_key: Optional[str] = None
    translated_value: Optional[str] = None
    state_name: Optional[str] = None

    @property
    def display_key(self) -> str:
        return self.translated_key or self.key

    @property
    def display_value(self) -> str:
        return self.translated_value or self.value


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def geo_uri(self) -> str:
        """Android-style map link."""
        return f"geo:{self.latitude},{self.longitude}?q={self.latitude},{self.longitude}"

    def maps_query(self) -> str:
        """iOS-style map link."""
        return f"maps:0,0?q={self.latitude},{self.longitude}"


@dataclass(frozen=True)
class Scalar:
    value: str


@dataclass(frozen=True)
class FieldList:
    items: List["FieldValue"] = field(default_factory=list)


@dataclass(frozen=True)
class FieldRecord:
    fields: Dict[str, "FieldValue"] = field(default_factory=dict)


FieldValue = Union[Scalar, FieldList, FieldRecord]


@dataclass
class Place:
    """Canonical place detail, rebuilt per request."""
    name: str
    state: Optional[str]
    fields: Dict[str, FieldValue]
    images: List[ImageRef]
    coordinates: Optional[Coordinates] = None


@dataclass
class PlaceSummary:
    """Entry in a state's place list: name plus first image only."""
    name: str
    preview_image: Optional[ImageRef]
    is_favorite: bool = False


@dataclass
class StateEntry:
    name: str
    cover_image: Optional[ImageRef] = None
