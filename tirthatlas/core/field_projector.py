"""Collapse a place's attribute rows (or structured record) into display fields."""
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from tirthatlas.config import (
    EXCLUDED_RECORD_KEYS,
    EXCLUDED_ROW_KEYS,
    LATITUDE_ROW_KEYS,
    LONGITUDE_ROW_KEYS,
)
from tirthatlas.core.errors import PlaceNotFound
from tirthatlas.core.record_store import RecordStore
from tirthatlas.models.place import (
    AttributeRow,
    Coordinates,
    FieldList,
    FieldRecord,
    FieldValue,
    Scalar,
)

logger = logging.getLogger(__name__)


def _is_coordinate_key(key: str) -> bool:
    k = key.strip().lower()
    return k in LATITUDE_ROW_KEYS or k in LONGITUDE_ROW_KEYS


def project_rows(
    rows: Iterable[AttributeRow],
    excluded_keys: frozenset = EXCLUDED_ROW_KEYS,
) -> Dict[str, str]:
    """Display key -> display value. The first row for a display key wins."""
    fields: Dict[str, str] = {}
    for row in rows:
        if row.key in excluded_keys or _is_coordinate_key(row.key):
            continue
        key = row.display_key
        if key not in fields:
            fields[key] = row.display_value
    return fields


def project_value(value: Any, excluded_keys: frozenset = EXCLUDED_RECORD_KEYS) -> Optional[FieldValue]:
    """Recursive projection of one structured value; None for empty values."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return project_record(value, excluded_keys)
    if isinstance(value, (list, tuple)):
        items = [project_value(v, excluded_keys) for v in value]
        return FieldList([item for item in items if item is not None])
    if isinstance(value, bool):
        return Scalar("Yes" if value else "No")
    return Scalar(str(value))


def project_record(record: Mapping[str, Any], excluded_keys: frozenset = EXCLUDED_RECORD_KEYS) -> FieldRecord:
    """Project a structured record; identity-like keys are dropped at every depth."""
    fields: Dict[str, FieldValue] = {}
    for key, value in record.items():
        if str(key).lower() in excluded_keys:
            continue
        projected = project_value(value, excluded_keys)
        if projected is not None:
            fields[str(key)] = projected
    return FieldRecord(fields)


def _parse_coordinate(value: Any, limit: float) -> Optional[float]:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    if number != number or abs(number) > limit:
        return None
    return number


def coordinates_from_rows(rows: Iterable[AttributeRow]) -> Optional[Coordinates]:
    """First valid latitude and longitude found among the rows."""
    latitude = longitude = None
    for row in rows:
        k = row.key.strip().lower()
        if latitude is None and k in LATITUDE_ROW_KEYS:
            latitude = _parse_coordinate(row.value, 90.0)
        elif longitude is None and k in LONGITUDE_ROW_KEYS:
            longitude = _parse_coordinate(row.value, 180.0)
    if latitude is None or longitude is None:
        return None
    return Coordinates(latitude=latitude, longitude=longitude)


def coordinates_from_record(record: Mapping[str, Any]) -> Optional[Coordinates]:
    location = record.get("location")
    if not isinstance(location, Mapping):
        return None
    latitude = _parse_coordinate(location.get("latitude", location.get("lat")), 90.0)
    longitude = _parse_coordinate(
        location.get("longitude", location.get("lng", location.get("lon"))), 180.0
    )
    if latitude is None or longitude is None:
        return None
    return Coordinates(latitude=latitude, longitude=longitude)


class FieldProjector:
    """Builds the display fields of a place from the store."""

    def __init__(self, store: RecordStore, excluded_keys: frozenset = EXCLUDED_ROW_KEYS) -> None:
        self._store = store
        self._excluded_keys = excluded_keys

    def project(self, place_name: str) -> Dict[str, str]:
        """Flat projection of the attribute rows for a place. Raises PlaceNotFound."""
        rows = self._store.rows_for(place_name)
        if not rows:
            raise PlaceNotFound(place_name)
        return project_rows(rows, self._excluded_keys)

    def project_detail(self, place_name: str) -> Tuple[Dict[str, FieldValue], Optional[Coordinates]]:
        """Fields and coordinates for a place, from rows if any, else its structured record."""
        rows = self._store.rows_for(place_name)
        if rows:
            fields = project_rows(rows, self._excluded_keys)
            return {k: Scalar(v) for k, v in fields.items()}, coordinates_from_rows(rows)
        record = self._store.record_for(place_name)
        if record is None:
            raise PlaceNotFound(place_name)
        logger.debug("Projecting structured record for %s", place_name)
        projected = project_record({k: v for k, v in record.items() if k != "state"})
        return dict(projected.fields), coordinates_from_record(record)
