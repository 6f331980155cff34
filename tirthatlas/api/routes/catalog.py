"""Reload the source tables from disk."""
from fastapi import APIRouter, Depends, HTTPException

from tirthatlas.api.state import AppState, get_state
from tirthatlas.core.errors import CatalogLoadError

router = APIRouter()


@router.post("/reload")
def reload_catalog(state: AppState = Depends(get_state)):
    """Re-read both tables; on failure the previously loaded catalog stays in place."""
    try:
        state.load_catalog()
    except CatalogLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"ok": True, "states": len(state.catalog.list_states())}
