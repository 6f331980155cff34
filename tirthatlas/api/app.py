"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tirthatlas.config import CORS_ORIGINS, LOG_LEVEL

# Configure logging in the worker process (so loader warnings are visible with uvicorn --reload)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

from tirthatlas.api.state import AppState, get_state

# Import routes after state to avoid circular imports
from tirthatlas.api.routes import catalog, connectivity, favorites, places, states

__all__ = ["app", "AppState", "get_state"]

_state = get_state()


@asynccontextmanager
async def lifespan(app: FastAPI):
    _state.try_load_catalog()
    yield


app = FastAPI(
    title="Tirth Atlas API",
    description="Read-only catalog of places by state: place lists, details and images",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(states.router, prefix="/api/states", tags=["states"])
app.include_router(places.router, prefix="/api/places", tags=["places"])
app.include_router(favorites.router, prefix="/api/favorites", tags=["favorites"])
app.include_router(connectivity.router, prefix="/api/connectivity", tags=["connectivity"])
app.include_router(catalog.router, prefix="/api/catalog", tags=["catalog"])
