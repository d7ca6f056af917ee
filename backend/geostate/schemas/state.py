"""State Page Schemas — Pydantic models for the /{state} page data.

Invariants:
    - name echoes the caller's path parameter verbatim
    - stateJson rows pass through every geodata column unmodified
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StateData(BaseModel):
    """Geodata rows for one state at the state aggregation level."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    state_json: list[dict[str, Any]] = Field(default_factory=list, alias="stateJson")


class StatePageResponse(BaseModel):
    """Page data envelope consumed by the state page."""
    model_config = ConfigDict(populate_by_name=True)

    state_data: StateData = Field(alias="stateData")
