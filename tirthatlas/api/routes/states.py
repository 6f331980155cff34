"""State list and per-state place lists."""
from typing import Optional

from fastapi import APIRouter, Depends

from tirthatlas.api.state import AppState, get_state
from tirthatlas.core.connectivity import is_connected
from tirthatlas.models import ImageRef, PlaceSummary, StateEntry

router = APIRouter()


def _image_to_dict(img: Optional[ImageRef]) -> Optional[dict]:
    if img is None:
        return None
    return {"ref": img.ref, "kind": img.kind}


def _state_to_dict(s: StateEntry) -> dict:
    return {"name": s.name, "cover_image": _image_to_dict(s.cover_image)}


def _summary_to_dict(p: PlaceSummary) -> dict:
    return {
        "name": p.name,
        "preview_image": _image_to_dict(p.preview_image),
        "is_favorite": p.is_favorite,
    }


@router.get("")
def list_states(state: AppState = Depends(get_state)):
    """List states in source order with their cover image."""
    return [_state_to_dict(s) for s in state.catalog.list_states()]


@router.get("/{state_name}/places")
def list_places(state_name: str, state: AppState = Depends(get_state)):
    """Places of a state, favorites first. Unknown state gives an empty list."""
    places = state.catalog.list_places(state_name)
    return {
        "state": state_name,
        "images_enabled": is_connected(),
        "places": [_summary_to_dict(p) for p in places],
    }
