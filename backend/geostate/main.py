"""GeoState API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GeoStateError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and geocoding client initialized on startup, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - state_page router registered last: /{state} matches any single path segment
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geostate.api.error_handlers import register_error_handlers
from geostate.api.routes import geocode, health, state_page
from geostate.config import get_settings
from geostate.infrastructure.database import close_db, init_db
from geostate.infrastructure.mapbox_client import close_geocoder, init_geocoder
from geostate.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_geocoder(
        settings.mapbox_token,
        base_url=settings.mapbox_base_url,
        timeout_seconds=settings.mapbox_timeout_seconds,
    )
    logger.info("GeoState API started")
    yield
    await close_geocoder()
    await close_db()
    logger.info("GeoState API shutting down")


app = FastAPI(
    title="GeoState API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes — explicit registration, catch-all page route last
app.include_router(health.router)
app.include_router(geocode.router)
app.include_router(state_page.router)
