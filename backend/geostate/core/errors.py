"""Error Hierarchy — typed, categorized exceptions for all GeoState failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), and http_status
    - Caller errors (400-level) are raised before any external call
    - Dependency errors (500-level) carry a generic public message; the cause is logged only
    - to_response() produces the public JSON body: {"error": <message>}
    - ErrorContext fields are logged by the global handler, never returned to callers

Design Decisions:
    - Single hierarchy with GeoStateError base: FastAPI global handler catches all
    - ErrorContext as dataclass: request details reach the logs without coupling to logging here
"""

from dataclasses import asdict, dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"


@dataclass
class ErrorContext:
    """Server-side context for error logging."""
    state: str | None = None
    abbreviation: str | None = None
    provider_status: int | None = None

    def to_log_extra(self) -> dict:
        """Non-empty fields, shaped for logging's extra=."""
        return {k: v for k, v in asdict(self).items() if v is not None}


class GeoStateError(Exception):
    """Base exception for all GeoState errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public REST error body."""
        return {"error": self.message}


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidAddressError(GeoStateError):
    """Resolve request carried no usable address string."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid address provided",
            "INVALID_ADDRESS", ErrorCategory.VALIDATION, context, 400,
        )


class AddressNotFoundError(GeoStateError):
    """Provider returned zero features for the address."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Address not found",
            "ADDRESS_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, context, 404,
        )


# ─── Dependency Errors (500-level) ──────────────────────────────

class StateDataUnavailableError(GeoStateError):
    """geodata query for a state page failed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to load state data",
            "STATE_DATA_UNAVAILABLE", ErrorCategory.DATABASE, context, 500,
        )

    def to_response(self) -> dict:
        return {"status": self.http_status, "error": self.message}


class GeocodingProviderError(GeoStateError):
    """Geocoding provider call failed (non-OK status, transport error, bad payload)."""
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            f"Mapbox API error: {message}",
            "GEOCODING_PROVIDER_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorContext(provider_status=status_code), 502,
        )
        self.status_code = status_code


class SuggestionsUnavailableError(GeoStateError):
    """Suggestion lookup failed at the provider."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to fetch suggestions",
            "SUGGESTIONS_UNAVAILABLE", ErrorCategory.EXTERNAL_API, context, 500,
        )


class GeocodeUnavailableError(GeoStateError):
    """Address resolution failed at the provider."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to geocode address",
            "GEOCODE_UNAVAILABLE", ErrorCategory.EXTERNAL_API, context, 500,
        )
