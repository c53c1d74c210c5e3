"""Per-user progression records: check-ins and issued certificates."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship, backref

from database import Base


class CheckIn(Base):
    """Records that a user completed a mission. Points are fixed at creation."""

    __tablename__ = "check_ins"
    __table_args__ = (
        UniqueConstraint("user_id", "mission_id", name="uq_user_mission_check_in"),
        Index("ix_check_ins_user_location", "user_id", "location_id"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    location_id = Column(
        String(36),
        ForeignKey("locations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    mission_id = Column(
        String(36),
        ForeignKey("missions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    points_earned = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

    user = relationship("User", backref=backref("check_ins", passive_deletes=True))
    location = relationship("Location")
    mission = relationship("Mission")


class Certificate(Base):
    """Issued proof of completion. A null location marks a master certificate."""

    __tablename__ = "certificates"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    location_id = Column(
        String(36),
        ForeignKey("locations.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_master = Column(Boolean, nullable=False, default=False)
    points_earned = Column(Integer, nullable=False)
    certificate_url = Column(String(1024), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

    user = relationship("User", backref=backref("certificates", passive_deletes=True))
    location = relationship("Location")


class EmailTemplate(Base):
    """Editable email body keyed by name, e.g. ``certificate_issued``."""

    __tablename__ = "email_templates"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(64), nullable=False, unique=True, index=True)
    subject = Column(String(255), nullable=False)
    body = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
