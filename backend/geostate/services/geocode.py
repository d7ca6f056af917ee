"""Geocode Proxy — suggestion and resolve operations over the Mapbox places endpoint.

Invariants:
    - Both operations sanitize with core/sanitize.py before any provider call
    - Suggestions: missing input or sanitized length < 3 returns [] without calling the provider
    - Resolve: non-string or empty-after-sanitizing address raises InvalidAddressError first
    - Resolve: zero features raises AddressNotFoundError (404), never the generic 500
    - Provider coordinates are [lng, lat]; results carry lat=center[1], lng=center[0]
    - Any provider or payload failure (including a non-list "features") becomes a generic
      500 error; details are logged only

Design Decisions:
    - Fixed query parameter sets as module constants: identical on every request
    - state taken from the first context entry whose id starts with "region"
      (Mapbox encodes administrative regions as "region.<n>")
"""

import logging
from typing import Any

from geostate.core.domain_types import PlaceType
from geostate.core.errors import (
    AddressNotFoundError,
    ErrorContext,
    GeocodeUnavailableError,
    GeocodingProviderError,
    InvalidAddressError,
    SuggestionsUnavailableError,
)
from geostate.core.sanitize import MIN_SUGGESTION_LENGTH, sanitize_input
from geostate.infrastructure.mapbox_client import MapboxGeocodingClient
from geostate.schemas.geocode import (
    GeocodeResult, SuggestionItem, SuggestionsResponse,
)

logger = logging.getLogger(__name__)

_PLACE_TYPES = ",".join(t.value for t in (
    PlaceType.ADDRESS, PlaceType.PLACE, PlaceType.REGION,
))

SUGGESTION_PARAMS = {
    "country": "US",
    "types": _PLACE_TYPES,
    "autocomplete": "true",
    "limit": "5",
    "language": "en",
    "fuzzyMatch": "true",
}

RESOLVE_PARAMS = {
    "country": "US",
    "types": _PLACE_TYPES,
    "limit": "1",
    "language": "en",
    "fuzzyMatch": "true",
}

REGION_CONTEXT_PREFIX = "region"


async def suggest_places(
    raw_input: str | None, geocoder: MapboxGeocodingClient,
) -> SuggestionsResponse:
    """Autocomplete suggestions for partially typed text."""
    if not raw_input:
        return SuggestionsResponse(suggestions=[])

    sanitized = sanitize_input(raw_input)
    if len(sanitized) < MIN_SUGGESTION_LENGTH:
        return SuggestionsResponse(suggestions=[])

    try:
        data = await geocoder.search_places(sanitized, SUGGESTION_PARAMS)
        suggestions = [_to_suggestion(f) for f in _features(data)]
    except Exception as e:
        logger.error(f"Geocoding error: {e}", exc_info=True)
        raise SuggestionsUnavailableError(_provider_context(e)) from e

    logger.info(
        "Fetched suggestions", extra={"feature_count": len(suggestions)},
    )
    return SuggestionsResponse(suggestions=suggestions)


async def resolve_address(
    address: Any, geocoder: MapboxGeocodingClient,
) -> GeocodeResult:
    """Resolve a free-text address to its best-match location."""
    if not isinstance(address, str):
        raise InvalidAddressError()
    sanitized = sanitize_input(address)
    if not sanitized:
        raise InvalidAddressError()

    try:
        data = await geocoder.search_places(sanitized, RESOLVE_PARAMS)
        features = _features(data)
        if len(features) > 0:
            return _to_geocode_result(features[0])
    except Exception as e:
        logger.error(f"Geocoding error: {e}", exc_info=True)
        raise GeocodeUnavailableError(_provider_context(e)) from e

    raise AddressNotFoundError()


def _features(data: dict[str, Any]) -> list[dict[str, Any]]:
    features = data["features"]
    if not isinstance(features, list):
        raise GeocodingProviderError(
            f"features is {type(features).__name__}, expected list",
        )
    return features


def _provider_context(e: Exception) -> ErrorContext:
    return ErrorContext(provider_status=getattr(e, "status_code", None))


def _to_suggestion(feature: dict[str, Any]) -> SuggestionItem:
    return SuggestionItem(
        place_name=feature["place_name"],
        id=feature["id"],
        type=feature["place_type"][0],
    )


def _to_geocode_result(feature: dict[str, Any]) -> GeocodeResult:
    """Reshape a provider feature; center is [lng, lat]."""
    center = feature["center"]
    return GeocodeResult(
        address=feature["place_name"],
        state=_extract_region(feature.get("context") or []),
        lat=center[1],
        lng=center[0],
        type=feature["place_type"][0],
        bbox=feature.get("bbox"),
    )


def _extract_region(context: list[dict[str, Any]]) -> str | None:
    for item in context:
        if str(item.get("id", "")).startswith(REGION_CONTEXT_PREFIX):
            return item.get("text")
    return None
