"""Favorite places (in memory; cleared on restart)."""
from fastapi import APIRouter, Depends

from tirthatlas.api.state import AppState, get_state

router = APIRouter()


@router.get("")
def list_favorites(state: AppState = Depends(get_state)):
    return {"favorites": sorted(state.favorites.snapshot())}


@router.get("/{place_name}")
def is_favorite(place_name: str, state: AppState = Depends(get_state)):
    return {"place": place_name, "is_favorite": state.favorites.is_favorite(place_name)}


@router.post("/{place_name}/toggle")
def toggle_favorite(place_name: str, state: AppState = Depends(get_state)):
    """Flip a place's favorite flag; returns the new value."""
    return {"place": place_name, "is_favorite": state.favorites.toggle(place_name)}
