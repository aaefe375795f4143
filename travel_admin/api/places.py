"""
Place validation endpoint

POST /api/places/validate - Check that every submitted place is in India
"""
from __future__ import annotations

from typing import List, Union

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from ..services.place_validator import validate_places_in_india

router = APIRouter(prefix="/api/places")


class PlacesRequest(BaseModel):
    places: Union[str, List[str]] = ""


@router.post("/validate")
async def validate_places(body: PlacesRequest):
    result = await run_in_threadpool(validate_places_in_india, body.places)
    return result.to_dict()
