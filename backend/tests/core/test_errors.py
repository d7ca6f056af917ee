"""Error Hierarchy — verifies status codes and public response bodies.

Invariants:
    - Caller errors are 4xx, dependency errors 500
    - to_response() exposes only the fixed message (state page adds status)
    - Provider status is kept on the exception, not in the body
"""

from geostate.core.errors import (
    AddressNotFoundError,
    ErrorCategory,
    ErrorContext,
    GeocodeUnavailableError,
    GeocodingProviderError,
    GeoStateError,
    InvalidAddressError,
    StateDataUnavailableError,
    SuggestionsUnavailableError,
)


def test_invalid_address_is_400():
    err = InvalidAddressError()
    assert err.http_status == 400
    assert err.to_response() == {"error": "Invalid address provided"}


def test_address_not_found_is_404():
    err = AddressNotFoundError()
    assert err.http_status == 404
    assert err.to_response() == {"error": "Address not found"}


def test_generic_geocode_errors_are_500():
    assert SuggestionsUnavailableError().to_response() == {
        "error": "Failed to fetch suggestions",
    }
    assert GeocodeUnavailableError().to_response() == {
        "error": "Failed to geocode address",
    }
    assert SuggestionsUnavailableError().http_status == 500
    assert GeocodeUnavailableError().http_status == 500


def test_state_data_error_body_carries_status():
    err = StateDataUnavailableError()
    assert err.to_response() == {"status": 500, "error": "Failed to load state data"}


def test_provider_error_keeps_status_in_context():
    err = GeocodingProviderError("Service Unavailable", 503)
    assert err.status_code == 503
    assert err.context.provider_status == 503
    assert err.category is ErrorCategory.EXTERNAL_API
    assert "Service Unavailable" in err.message


def test_all_errors_share_base():
    for err in (
        InvalidAddressError(), AddressNotFoundError(),
        StateDataUnavailableError(), GeocodingProviderError("x"),
    ):
        assert isinstance(err, GeoStateError)


def test_error_context_log_extra_skips_empty_fields():
    ctx = ErrorContext(state="ohio", abbreviation="OH")
    assert ctx.to_log_extra() == {"state": "ohio", "abbreviation": "OH"}
    assert ErrorContext().to_log_extra() == {}
