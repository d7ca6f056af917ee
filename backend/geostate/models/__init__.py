"""ORM Models — SQLAlchemy declarative models for the tables the service reads.

Invariants:
    - All models inherit from Base (db/base.py)
    - The service never writes: tables are owned by the data-loading pipeline

Design Decisions:
    - All models imported here so Base.metadata is populated before create_all in tests
"""

from geostate.models.geodata import GeoData  # noqa: F401
