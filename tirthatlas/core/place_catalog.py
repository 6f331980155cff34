"""State -> places index built from the attribute sheet, in first-seen order."""
from typing import Dict, List, Optional

from tirthatlas.config import STATE_ROW_KEYS
from tirthatlas.core.record_store import RecordStore
from tirthatlas.models.place import AttributeRow


def row_state(row: AttributeRow) -> Optional[str]:
    """State a row points at: its own state column, or the value of a State/Rajya row."""
    if row.state_name:
        return row.state_name
    if row.key in STATE_ROW_KEYS:
        return row.display_value or None
    return None


class PlaceCatalog:
    """Distinct places per state and the reverse place -> state lookup.

    Source order is the only stable tie-break the sheet offers, so both the
    state list and each state's place list keep first-occurrence order.
    """

    def __init__(self, store: RecordStore) -> None:
        place_order: Dict[str, int] = {}
        places_by_state: Dict[str, Dict[str, int]] = {}
        state_of: Dict[str, str] = {}

        for row in store.rows:
            place_order.setdefault(row.place_name, len(place_order))
            state = row_state(row)
            if state is None:
                continue
            places_by_state.setdefault(state, {})[row.place_name] = place_order[row.place_name]
            state_of.setdefault(row.place_name, state)

        for record in store.records:
            name = record["name"]
            place_order.setdefault(name, len(place_order))
            state = record.get("state")
            if not isinstance(state, str) or not state:
                continue
            places_by_state.setdefault(state, {}).setdefault(name, place_order[name])
            state_of.setdefault(name, state)

        self._states: List[str] = list(places_by_state)
        self._places: Dict[str, List[str]] = {
            state: sorted(places, key=places.__getitem__)
            for state, places in places_by_state.items()
        }
        self._state_of = state_of
        self._known = set(place_order)

    def list_states(self) -> List[str]:
        """Distinct state names in source-encounter order."""
        return list(self._states)

    def list_places(self, state_name: str) -> List[str]:
        """Distinct place names for a state; empty for an unknown state."""
        return list(self._places.get(state_name, ()))

    def state_of(self, place_name: str) -> Optional[str]:
        """First state associated with a place, or None."""
        return self._state_of.get(place_name)

    def has_place(self, place_name: str) -> bool:
        return place_name in self._known
