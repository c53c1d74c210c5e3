"""Pydantic schemas for check-ins, certificates and progression aggregates."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.locations import LocationSummary


class CheckInRequest(BaseModel):
    location_id: str = Field(min_length=1)
    mission_id: str = Field(min_length=1)


class CheckInRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: int
    location_id: str
    mission_id: str
    points_earned: int
    created_at: datetime


class MissionSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    description: str
    points: int


class CheckInHistoryItem(CheckInRecord):
    """Check-in joined with its mission and location summaries."""

    mission: MissionSummary
    location: LocationSummary


class CertificateRequest(BaseModel):
    """Omit ``location_id`` to request the master certificate."""

    location_id: Optional[str] = None


class CertificateRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: int
    location_id: Optional[str] = None
    is_master: bool
    points_earned: int
    certificate_url: Optional[str] = None
    created_at: datetime


class CertificateWithLocation(CertificateRecord):
    location: Optional[LocationSummary] = None


class LocationProgress(BaseModel):
    """Completion state of one location for one user.

    ``completion_ratio`` is None when the location carries no points.
    """

    location_id: str
    completed_missions: int
    total_missions: int
    completed_points: int
    total_points: int
    completion_ratio: Optional[float] = None
    is_complete: bool


class MasterProgress(BaseModel):
    """Aggregate of every location's progress."""

    completed_missions: int
    total_missions: int
    completed_points: int
    total_points: int
    completion_ratio: Optional[float] = None
    locations_completed: int
    locations_total: int


class LocationProgressEntry(BaseModel):
    location: LocationSummary
    progress: LocationProgress


class CheckInResponse(BaseModel):
    check_in: CheckInRecord
    completed_mission_ids: list[str]
    # None when the aggregate could not be refreshed.
    progress: Optional[LocationProgress] = None


class ProgressOverview(BaseModel):
    """Achievements screen payload."""

    total_points_earned: int
    locations_visited: int
    check_in_count: int
    master: MasterProgress
    master_policy: str
    master_eligible: bool
    locations: list[LocationProgressEntry]
    check_ins: list[CheckInHistoryItem]
    certificates: list[CertificateWithLocation]
