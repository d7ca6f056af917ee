"""State Lookup — resolves a state name to its geodata rows at the state level.

Invariants:
    - State name lookup is exact and case-sensitive (no normalization)
    - Unknown names are not rejected: the query runs with an always-false state predicate
    - The try block wraps the query itself, so any store failure becomes StateDataUnavailableError
    - Rows are returned with every column intact

Design Decisions:
    - Unknown-name parity over a 404: existing pages render an empty state rather than an error
    - Raw rows logged at DEBUG, row count at INFO
"""

import logging

from sqlalchemy import false, select
from sqlalchemy.ext.asyncio import AsyncSession

from geostate.core.domain_types import AggregationLevel
from geostate.core.errors import ErrorContext, StateDataUnavailableError
from geostate.core.state_abbreviations import lookup_abbreviation
from geostate.models.geodata import GeoData
from geostate.schemas.state import StateData

logger = logging.getLogger(__name__)


async def load_state_data(state_name: str, db: AsyncSession) -> StateData:
    """Fetch state-level geodata rows for a lowercase full state name."""
    abbreviation = lookup_abbreviation(state_name)
    if abbreviation is None:
        logger.warning(
            f"No abbreviation for state name {state_name!r}",
            extra={"state": state_name},
        )

    # == None would compile to IS NULL; an unknown name must match nothing
    state_match = (
        GeoData.state == abbreviation if abbreviation is not None else false()
    )

    try:
        result = await db.execute(
            select(GeoData).where(
                state_match,
                GeoData.level == AggregationLevel.STATE.value,
            ),
        )
        rows = [row.to_dict() for row in result.scalars().all()]
    except Exception as e:
        logger.error(
            f"Error fetching state data: {e}",
            extra={"state": state_name, "abbreviation": abbreviation},
            exc_info=True,
        )
        raise StateDataUnavailableError(
            ErrorContext(state=state_name, abbreviation=abbreviation),
        ) from e

    logger.debug(f"geodata rows for {abbreviation}: {rows}")
    logger.info(
        "Loaded state data",
        extra={
            "state": state_name,
            "abbreviation": abbreviation,
            "row_count": len(rows),
        },
    )
    return StateData(name=state_name, state_json=rows)
