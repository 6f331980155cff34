"""Client-reported connectivity; when offline, responses tell the client not to fetch images."""
from fastapi import APIRouter
from pydantic import BaseModel

from tirthatlas.core.connectivity import is_connected, set_connected

router = APIRouter()


class ConnectivityBody(BaseModel):
    connected: bool


@router.get("")
def get_connectivity():
    return {"connected": is_connected()}


@router.post("")
def report_connectivity(body: ConnectivityBody):
    set_connected(body.connected)
    return {"ok": True, "connected": is_connected()}
