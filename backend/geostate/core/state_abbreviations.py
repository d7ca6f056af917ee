"""State Abbreviations — lowercase full state name to USPS two-letter code.

Invariants:
    - Exactly 50 entries, keys lowercase, values uppercase two-letter codes
    - Read-only: exposed as a MappingProxyType, never mutated after import
    - Lookup is case-sensitive and exact; no normalization of the caller's input
"""

from types import MappingProxyType

from geostate.core.domain_types import StateAbbreviation

STATE_ABBREVIATIONS = MappingProxyType({
    "alabama": "AL",
    "alaska": "AK",
    "arizona": "AZ",
    "arkansas": "AR",
    "california": "CA",
    "colorado": "CO",
    "connecticut": "CT",
    "delaware": "DE",
    "florida": "FL",
    "georgia": "GA",
    "hawaii": "HI",
    "idaho": "ID",
    "illinois": "IL",
    "indiana": "IN",
    "iowa": "IA",
    "kansas": "KS",
    "kentucky": "KY",
    "louisiana": "LA",
    "maine": "ME",
    "maryland": "MD",
    "massachusetts": "MA",
    "michigan": "MI",
    "minnesota": "MN",
    "mississippi": "MS",
    "missouri": "MO",
    "montana": "MT",
    "nebraska": "NE",
    "nevada": "NV",
    "new hampshire": "NH",
    "new jersey": "NJ",
    "new mexico": "NM",
    "new york": "NY",
    "north carolina": "NC",
    "north dakota": "ND",
    "ohio": "OH",
    "oklahoma": "OK",
    "oregon": "OR",
    "pennsylvania": "PA",
    "rhode island": "RI",
    "south carolina": "SC",
    "south dakota": "SD",
    "tennessee": "TN",
    "texas": "TX",
    "utah": "UT",
    "vermont": "VT",
    "virginia": "VA",
    "washington": "WA",
    "west virginia": "WV",
    "wisconsin": "WI",
    "wyoming": "WY",
})


def lookup_abbreviation(state_name: str) -> StateAbbreviation | None:
    """Return the postal code for an exact lowercase state name, else None."""
    abbreviation = STATE_ABBREVIATIONS.get(state_name)
    return StateAbbreviation(abbreviation) if abbreviation else None
