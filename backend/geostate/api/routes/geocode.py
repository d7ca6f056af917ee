"""Geocode Routes — autocomplete (GET) and address resolution (POST) via Mapbox.

Invariants:
    - GET never errors on short/missing input: returns {"suggestions": []}
    - POST error bodies are {"error": <fixed message>} with 400/404/500
    - Absent optional fields (state, bbox) are omitted from the POST body

Design Decisions:
    - Geocoding client injected via Depends(get_geocoder): tests override it, token stays out of routes
"""

import logging

from fastapi import APIRouter, Depends, Query

from geostate.infrastructure.mapbox_client import (
    MapboxGeocodingClient, get_geocoder,
)
from geostate.schemas.geocode import (
    GeocodeRequest, GeocodeResult, SuggestionsResponse,
)
from geostate.services.geocode import resolve_address, suggest_places

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/geocode", tags=["geocode"])


@router.get("", response_model=SuggestionsResponse)
async def get_suggestions(
    input_text: str | None = Query(None, alias="input"),
    geocoder: MapboxGeocodingClient = Depends(get_geocoder),
):
    """Autocomplete suggestions for partially typed text."""
    return await suggest_places(input_text, geocoder)


@router.post(
    "", response_model=GeocodeResult, response_model_exclude_none=True,
)
async def geocode_address(
    body: GeocodeRequest | None = None,
    geocoder: MapboxGeocodingClient = Depends(get_geocoder),
):
    """Resolve an address to coordinates, state, and bounding box."""
    address = body.address if body else None
    return await resolve_address(address, geocoder)
