"""Load the attribute sheet and image lookup table (JSON), read-only after load."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from tirthatlas.config import (
    ATTRIBUTES_PATH,
    IMAGE_MAPPING_PATH,
    IMAGE_REF_KIND,
    STATE_COVER_KEY,
)
from tirthatlas.core.errors import CatalogLoadError
from tirthatlas.models.images import KIND_ASSET, KIND_URL, ImageRef
from tirthatlas.models.place import AttributeRow

logger = logging.getLogger(__name__)

# Column names in the exported sheet
COL_PLACE = "Name teerth"
COL_KEY = "Key"
COL_VALUE = "Original Value"
COL_TRANSLATED_KEY = "Translated Key"
COL_TRANSLATED_VALUE = "Translated Value"
COL_STATE = "State"


def _text(value: Any) -> str:
    """Cell value as stripped text; numbers are stringified, containers rejected."""
    if value is None:
        raise ValueError("empty cell")
    if isinstance(value, (dict, list)):
        raise TypeError(f"unexpected {type(value).__name__} cell")
    return str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _row_from_item(item: Mapping[str, Any]) -> AttributeRow:
    place_name = _text(item[COL_PLACE])
    key = _text(item[COL_KEY])
    value = _text(item[COL_VALUE] if COL_VALUE in item else item["Value"])
    if not place_name or not key:
        raise ValueError("blank place name or key")
    return AttributeRow(
        place_name=place_name,
        key=key,
        value=value,
        translated_key=_optional_text(item.get(COL_TRANSLATED_KEY)),
        translated_value=_optional_text(item.get(COL_TRANSLATED_VALUE)),
        state_name=_optional_text(item.get(COL_STATE)),
    )


def parse_attribute_rows(items: Iterable[Any]) -> List[AttributeRow]:
    """Parse sheet items in source order, skipping malformed ones."""
    out = []
    skipped = 0
    for i, item in enumerate(items):
        try:
            out.append(_row_from_item(item))
        except (KeyError, TypeError, ValueError) as e:
            skipped += 1
            logger.debug("Skipping attribute row %d: %s", i, e)
            continue
    if skipped:
        logger.warning("Skipped %d malformed attribute rows", skipped)
    return out


def _normalize_record(item: Any) -> Dict[str, Any]:
    """Bring a structured place document onto the canonical shape (name, state, location)."""
    if not isinstance(item, dict):
        raise TypeError(f"expected object, got {type(item).__name__}")
    record = dict(item)
    if "name" not in record and COL_PLACE in record:
        record["name"] = record.pop(COL_PLACE)
    name = _text(record["name"])
    if not name:
        raise ValueError("blank name")
    record["name"] = name
    if "location" not in record and "latitude" in record and "longitude" in record:
        record["location"] = {
            "latitude": record.pop("latitude"),
            "longitude": record.pop("longitude"),
        }
    state = _optional_text(record.get("state"))
    if state is not None:
        record["state"] = state
    elif record.pop("state", None) is not None:
        logger.warning("Place record %r has an unusable state; listed under no state", name)
    return record


def parse_place_records(items: Iterable[Any]) -> List[Dict[str, Any]]:
    """Parse structured place documents, skipping malformed ones."""
    out = []
    for i, item in enumerate(items):
        try:
            out.append(_normalize_record(item))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping place record %d: %s", i, e)
            continue
    return out


def parse_image_ref(value: Any, default_kind: str = IMAGE_REF_KIND) -> Optional[ImageRef]:
    """Plain strings take the deployment kind; {"uri": ...} / {"asset": ...} carry their own."""
    if isinstance(value, str):
        return ImageRef(ref=value.strip(), kind=default_kind) if value.strip() else None
    if isinstance(value, dict):
        if isinstance(value.get("uri"), str) and value["uri"].strip():
            return ImageRef(ref=value["uri"].strip(), kind=KIND_URL)
        if isinstance(value.get("asset"), str) and value["asset"].strip():
            return ImageRef(ref=value["asset"].strip(), kind=KIND_ASSET)
    return None


class ImageMapping:
    """Typed state -> place -> images lookup. Absent keys resolve to empty, never fail."""

    def __init__(
        self,
        images: Optional[Mapping[str, Mapping[str, Iterable[ImageRef]]]] = None,
        covers: Optional[Mapping[str, ImageRef]] = None,
    ) -> None:
        self._images: Dict[str, Dict[str, Tuple[ImageRef, ...]]] = {
            state: {place: tuple(refs) for place, refs in places.items()}
            for state, places in (images or {}).items()
        }
        self._covers: Dict[str, ImageRef] = dict(covers or {})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_kind: str = IMAGE_REF_KIND) -> "ImageMapping":
        images: Dict[str, Dict[str, List[ImageRef]]] = {}
        covers: Dict[str, ImageRef] = {}
        for state, places in data.items():
            if not isinstance(places, dict):
                logger.warning("Image mapping for %r is not an object; ignored", state)
                continue
            state_images: Dict[str, List[ImageRef]] = {}
            for place, refs in places.items():
                if place == STATE_COVER_KEY:
                    cover = parse_image_ref(refs, default_kind)
                    if cover is not None:
                        covers[state] = cover
                    continue
                if not isinstance(refs, list):
                    refs = [refs]
                parsed = [parse_image_ref(r, default_kind) for r in refs]
                state_images[place] = [r for r in parsed if r is not None]
            images[state] = state_images
        return cls(images, covers)

    def images_for(self, state_name: Optional[str], place_name: str) -> List[ImageRef]:
        if not state_name:
            return []
        return list(self._images.get(state_name, {}).get(place_name, ()))

    def cover_for(self, state_name: str) -> Optional[ImageRef]:
        return self._covers.get(state_name)

    def states(self) -> List[str]:
        return list(self._images)


class RecordStore:
    """Immutable holder of the attribute rows, structured records and image mapping."""

    def __init__(
        self,
        rows: Iterable[AttributeRow] = (),
        image_mapping: Optional[ImageMapping] = None,
        records: Iterable[Mapping[str, Any]] = (),
    ) -> None:
        self._rows: Tuple[AttributeRow, ...] = tuple(rows)
        self._records: Tuple[Dict[str, Any], ...] = tuple(dict(r) for r in records)
        self._image_mapping = image_mapping or ImageMapping()
        by_place: Dict[str, List[AttributeRow]] = {}
        for row in self._rows:
            by_place.setdefault(row.place_name, []).append(row)
        self._rows_by_place = {name: tuple(rows) for name, rows in by_place.items()}
        self._records_by_name: Dict[str, Dict[str, Any]] = {}
        for record in self._records:
            self._records_by_name.setdefault(record["name"], record)

    @property
    def rows(self) -> Tuple[AttributeRow, ...]:
        return self._rows

    @property
    def records(self) -> Tuple[Dict[str, Any], ...]:
        return self._records

    @property
    def image_mapping(self) -> ImageMapping:
        return self._image_mapping

    def rows_for(self, place_name: str) -> Tuple[AttributeRow, ...]:
        """All rows for a place, in source order."""
        return self._rows_by_place.get(place_name, ())

    def record_for(self, place_name: str) -> Optional[Dict[str, Any]]:
        return self._records_by_name.get(place_name)

    @classmethod
    def from_files(
        cls,
        attributes_path: Path = ATTRIBUTES_PATH,
        image_mapping_path: Path = IMAGE_MAPPING_PATH,
    ) -> "RecordStore":
        """Load both tables from disk. A missing file yields an empty table."""
        rows: List[AttributeRow] = []
        records: List[Dict[str, Any]] = []
        data = _read_json(attributes_path)
        if isinstance(data, list):
            rows = parse_attribute_rows(data)
        elif isinstance(data, dict):
            sheet = data.get("Sheet1", data.get("rows", []))
            rows = parse_attribute_rows(sheet if isinstance(sheet, list) else [])
            places = data.get("places", [])
            records = parse_place_records(places if isinstance(places, list) else [])
        elif data is not None:
            raise CatalogLoadError(attributes_path, "expected a list or object at top level")

        mapping_data = _read_json(image_mapping_path)
        if mapping_data is not None and not isinstance(mapping_data, dict):
            raise CatalogLoadError(image_mapping_path, "expected an object at top level")
        image_mapping = ImageMapping.from_dict(mapping_data or {})

        logger.info(
            "Loaded %d attribute rows, %d place records, %d image states",
            len(rows),
            len(records),
            len(image_mapping.states()),
        )
        return cls(rows, image_mapping, records)


def _read_json(path: Path) -> Any:
    p = Path(path)
    if not p.exists():
        logger.warning("Data file %s not found; using empty table", p)
        return None
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(p, str(e)) from e
