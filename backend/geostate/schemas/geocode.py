"""Geocode Schemas — Pydantic models for the /api/geocode proxy.

Invariants:
    - SuggestionItem and GeocodeResult are reduced views of a provider feature
    - GeocodeResult.lat/lng are in (latitude, longitude) order, never the provider's [lng, lat]
    - GeocodeRequest accepts any JSON type for address; type checking happens in the service
      so a non-string address gets the fixed "Invalid address provided" 400

Design Decisions:
    - state and bbox optional: routes serialize with exclude_none so absent values are omitted
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class GeocodeRequest(BaseModel):
    """POST body for address resolution."""
    model_config = ConfigDict(extra="allow")

    address: Any = None


class SuggestionItem(BaseModel):
    """One autocomplete suggestion."""
    place_name: str
    id: str
    type: str


class SuggestionsResponse(BaseModel):
    """Autocomplete response — empty list for short or missing input."""
    suggestions: list[SuggestionItem] = []


class GeocodeResult(BaseModel):
    """Best-match resolution of a free-text address."""
    address: str
    state: str | None = None
    lat: float
    lng: float
    type: str
    bbox: list[int | float] | None = None
