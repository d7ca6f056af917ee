"""Service test fixtures — async DB, fake Mapbox, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - get_geocoder overridden with a MapboxGeocodingClient on httpx.MockTransport

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Fake Mapbox at the transport layer: exercises the real client's URL building and error mapping
"""

import httpx
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from geostate.db.base import Base
from geostate.infrastructure.database import get_db, DatabaseSessionManager
from geostate.infrastructure.mapbox_client import (
    MapboxGeocodingClient, get_geocoder,
)
from geostate.models.geodata import GeoData
import geostate.infrastructure.database as db_module
from geostate.main import app

TEST_TOKEN = "pk.test-token"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def mapbox():
    """Controllable fake Mapbox.

    Returns dict with:
      - requests: list of httpx.Request received
      - response: httpx.Response or callable(request) -> Response (may raise)
    """
    fake = {
        "requests": [],
        "response": httpx.Response(200, json={"features": []}),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        fake["requests"].append(request)
        r = fake["response"]
        return r(request) if callable(r) else r

    fake["transport"] = httpx.MockTransport(handler)
    return fake


@pytest.fixture
async def geocoder(mapbox):
    client = MapboxGeocodingClient(TEST_TOKEN, transport=mapbox["transport"])
    yield client
    await client.close()


@pytest.fixture
async def client(test_engine, test_session_factory, geocoder):
    """FastAPI test client with DB and geocoder dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_geocoder] = lambda: geocoder

    # Patch db_manager for the readiness probe
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_geodata(test_db):
    """Insert state- and county-level rows for two states."""
    rows = [
        GeoData(
            name="California", state="CA", level="state",
            geojson={"type": "Feature", "properties": {"population": 39538223}},
        ),
        GeoData(
            name="Alameda County", state="CA", level="county",
            geojson={"type": "Feature", "properties": {"population": 1682353}},
        ),
        GeoData(
            name="New York", state="NY", level="state",
            geojson={"type": "Feature", "properties": {"population": 20201249}},
        ),
    ]
    test_db.add_all(rows)
    await test_db.commit()
    return rows


def feature(
    place_name: str = "123 Main St, San Francisco, California 94105, United States",
    feature_id: str = "address.123",
    place_type: str = "address",
    center: list[float] | None = None,
    context: list[dict] | None = None,
    bbox: list[float] | None = None,
) -> dict:
    """Build a Mapbox-shaped feature."""
    f = {
        "id": feature_id,
        "type": "Feature",
        "place_type": [place_type],
        "place_name": place_name,
        "center": center or [-122.4, 37.8],
        "context": context if context is not None else [
            {"id": "postcode.1", "text": "94105"},
            {"id": "place.2", "text": "San Francisco"},
            {"id": "region.3", "text": "California", "short_code": "US-CA"},
            {"id": "country.4", "text": "United States"},
        ],
    }
    if bbox is not None:
        f["bbox"] = bbox
    return f


@pytest.fixture
def make_feature():
    return feature
