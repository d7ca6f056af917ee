"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - StateAbbreviation is always a two-letter uppercase postal code
    - Aggregation levels and provider place types encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and compare equal to DB values without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

StateAbbreviation = NewType("StateAbbreviation", str)   # "CA", "NY", ...


# ─── Enums ───────────────────────────────────────────────────────

class AggregationLevel(str, Enum):
    """Granularity tag on geodata rows — maps to DB `level` column."""
    STATE = "state"


class PlaceType(str, Enum):
    """Provider place types the service asks for."""
    ADDRESS = "address"
    PLACE = "place"
    REGION = "region"
