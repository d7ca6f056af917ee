"""State Page Route — page data for /{state}.

Invariants:
    - The path parameter is passed to the service verbatim (case-sensitive)
    - Failure body is {"status": 500, "error": "Failed to load state data"}

Design Decisions:
    - No prefix: the page lives at the site root, so this router is registered last in main.py
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from geostate.infrastructure.database import get_db
from geostate.schemas.state import StatePageResponse
from geostate.services.state_lookup import load_state_data

logger = logging.getLogger(__name__)
router = APIRouter(tags=["state-page"])


@router.get("/{state}", response_model=StatePageResponse)
async def get_state_page(state: str, db: AsyncSession = Depends(get_db)):
    """Load state-level geodata for a lowercase full state name."""
    state_data = await load_state_data(state, db)
    return StatePageResponse(state_data=state_data)
