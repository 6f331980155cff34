"""Place detail and image failure handling."""
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from tirthatlas.api.state import AppState, get_state
from tirthatlas.core.connectivity import is_connected
from tirthatlas.core.errors import PlaceNotFound
from tirthatlas.core.image_resolver import remove_failed
from tirthatlas.models import FieldList, FieldRecord, FieldValue, ImageRef, Place, Scalar

router = APIRouter()


class ImageRefBody(BaseModel):
    ref: str
    kind: Literal["url", "asset"] = "url"


class RemoveImageBody(BaseModel):
    images: List[ImageRefBody]
    index: int


def _image_to_dict(img: ImageRef) -> dict:
    return {"ref": img.ref, "kind": img.kind}


def _field_to_dict(value: FieldValue) -> dict:
    """Tagged field tree so clients render by tag, not by inspecting JSON types."""
    if isinstance(value, Scalar):
        return {"type": "scalar", "value": value.value}
    if isinstance(value, FieldList):
        return {"type": "list", "items": [_field_to_dict(v) for v in value.items]}
    if isinstance(value, FieldRecord):
        return {"type": "record", "fields": _fields_to_list(value.fields)}
    raise TypeError(f"unknown field value {type(value).__name__}")


def _fields_to_list(fields: dict) -> List[dict]:
    return [{"key": k, "value": _field_to_dict(v)} for k, v in fields.items()]


def _place_to_dict(p: Place) -> dict:
    coordinates = None
    if p.coordinates is not None:
        coordinates = {
            "latitude": p.coordinates.latitude,
            "longitude": p.coordinates.longitude,
            "geo_uri": p.coordinates.geo_uri(),
            "maps_query": p.coordinates.maps_query(),
        }
    return {
        "name": p.name,
        "state": p.state,
        "fields": _fields_to_list(p.fields),
        "images": [_image_to_dict(i) for i in p.images],
        "images_enabled": is_connected(),
        "coordinates": coordinates,
    }


@router.post("/images/remove")
def remove_image(body: RemoveImageBody):
    """Drop the image slot that failed to load; the rest keep their order."""
    images = [ImageRef(ref=i.ref, kind=i.kind) for i in body.images]
    try:
        remaining = remove_failed(images, body.index)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"images": [_image_to_dict(i) for i in remaining]}


@router.get("/{place_name}")
def get_place(
    place_name: str,
    state_name: Optional[str] = Query(None, alias="state"),
    state: AppState = Depends(get_state),
):
    """Place detail; state_name is inferred from the catalog when omitted."""
    try:
        place = state.catalog.get_place_detail(place_name, state_name)
    except PlaceNotFound:
        raise HTTPException(
            status_code=404,
            detail="Failed to load place details. Please try again later.",
        )
    return _place_to_dict(place)
