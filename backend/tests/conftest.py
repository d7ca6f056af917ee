"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use a real Mapbox token or database
os.environ.setdefault("MAPBOX_TOKEN", "pk.test-fake-token")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
