"""Landmark catalog: locations, their missions and curated recommendations."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    JSON,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Location(Base):
    """A landmark users can visit. Managed by content editors."""

    __tablename__ = "locations"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    city = Column(String(128), nullable=False)
    country = Column(String(128), nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String(1024), nullable=False)
    facts = Column(JSON, nullable=False, default=list)
    model_url = Column(String(1024), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    featured = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

    missions = relationship("Mission", back_populates="location", passive_deletes=True)


class Mission(Base):
    """A location-bound task worth a fixed number of points."""

    __tablename__ = "missions"
    __table_args__ = (
        Index("ix_missions_location_active", "location_id", "active"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    location_id = Column(
        String(36),
        ForeignKey("locations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    points = Column(Integer, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

    location = relationship("Location", back_populates="missions")


class LocationRecommendation(Base):
    """Directed edge suggesting the next location to visit after a source one."""

    __tablename__ = "location_recommendations"
    __table_args__ = (
        UniqueConstraint(
            "source_location_id",
            "recommended_location_id",
            name="uq_location_recommendation",
        ),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    source_location_id = Column(
        String(36),
        ForeignKey("locations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recommended_location_id = Column(
        String(36),
        ForeignKey("locations.id", ondelete="CASCADE"),
        nullable=False,
    )
    priority = Column(Integer, nullable=False, default=0)
    reason = Column(String(512), nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

    source_location = relationship("Location", foreign_keys=[source_location_id])
    recommended_location = relationship("Location", foreign_keys=[recommended_location_id])
