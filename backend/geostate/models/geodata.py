"""GeoData ORM — one aggregated geographic record (state, county, tract, ...).

Invariants:
    - state holds a USPS two-letter code
    - level holds the aggregation granularity (see AggregationLevel)
    - Read-only from this service; rows are loaded by an external pipeline

Design Decisions:
    - geojson as JSON: geometry and properties are opaque to the API and passed through
    - Composite index on (state, level): the only predicate the API issues
"""

from sqlalchemy import String, Integer, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column

from geostate.db.base import Base


class GeoData(Base):
    """Geographic data row at a given aggregation level."""
    __tablename__ = "geodata"
    __table_args__ = (Index("ix_geodata_state_level", "state", "level"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    state: Mapped[str] = mapped_column(String(2), nullable=False)
    level: Mapped[str] = mapped_column(String(20), nullable=False)
    geojson: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    def to_dict(self) -> dict:
        """Every mapped column, keyed by column name."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }
