"""Mapbox Geocoding Client — wraps httpx.AsyncClient for the Geocoding v5 places endpoint.

Invariants:
    - Every request carries the access token injected at construction (never read from env here)
    - Non-2xx status, transport errors, and non-JSON bodies all raise GeocodingProviderError
    - No retries: one outbound request per call
    - Provider status text goes to the exception and logs, never to API callers

Design Decisions:
    - Wrapper over raw client: isolates URL building and error mapping from services
    - Injectable httpx transport: tests swap in httpx.MockTransport, production uses the default pool
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from geostate.core.errors import GeocodingProviderError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mapbox.com/geocoding/v5"
PLACES_DATASET = "mapbox.places"


class MapboxGeocodingClient:
    """Async Mapbox Geocoding v5 client with error mapping."""

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.access_token = access_token
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def search_places(
        self, query: str, params: dict[str, str],
    ) -> dict[str, Any]:
        """Forward-geocode free text against the mapbox.places dataset."""
        endpoint = f"{PLACES_DATASET}/{quote(query, safe='')}.json"
        return await self.fetch(endpoint, params)

    async def fetch(
        self, endpoint: str, params: dict[str, str],
    ) -> dict[str, Any]:
        """GET an endpoint relative to the base URL; raise on anything but a JSON 2xx."""
        query = {"access_token": self.access_token, **params}
        try:
            response = await self.client.get(endpoint, params=query)
        except httpx.HTTPError as e:
            logger.error(f"Mapbox transport error: {e!r}")
            raise GeocodingProviderError(str(e) or type(e).__name__)

        if not response.is_success:
            logger.error(
                f"Mapbox returned {response.status_code} {response.reason_phrase}",
                extra={"provider_status": response.status_code},
            )
            raise GeocodingProviderError(
                response.reason_phrase, response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            raise GeocodingProviderError(
                "Response body is not valid JSON",
                response.status_code,
            )

    async def close(self) -> None:
        await self.client.aclose()


# Singleton (initialized on startup)
geocoder: MapboxGeocodingClient | None = None


def init_geocoder(access_token: str, **kwargs):
    global geocoder
    geocoder = MapboxGeocodingClient(access_token, **kwargs)


async def close_geocoder() -> None:
    global geocoder
    if geocoder:
        await geocoder.close()
        geocoder = None


def get_geocoder() -> MapboxGeocodingClient:
    """FastAPI dependency for the shared geocoding client."""
    if not geocoder:
        raise RuntimeError("Geocoding client not initialized")
    return geocoder
