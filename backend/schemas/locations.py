"""Pydantic schemas for the landmark catalog."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LocationSummary(BaseModel):
    """Trimmed location shape embedded in joined records."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    city: str
    country: str


class LocationRecord(BaseModel):
    """Full location row as served to the app."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    city: str
    country: str
    description: str
    image_url: str
    facts: list[str] = Field(default_factory=list)
    model_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    featured: bool = False
    created_at: datetime


class MissionRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    location_id: str
    title: str
    description: str
    points: int
    active: bool = True
    created_at: Optional[datetime] = None


class RecommendedLocation(LocationRecord):
    """A candidate next location, carrying the backend's ranking metadata."""

    priority: int
    reason: Optional[str] = None


class NearbyLocation(LocationRecord):
    distance_m: float


class NearbyQuery(BaseModel):
    """Point-and-radius query for the nearby landmarks list."""

    latitude: float
    longitude: float
    radius_m: float = 25_000

    @model_validator(mode="after")
    def validate_point(self) -> "NearbyQuery":
        if self.latitude < -90 or self.latitude > 90:
            raise ValueError("latitude must be in range [-90, 90]")
        if self.longitude < -180 or self.longitude > 180:
            raise ValueError("longitude must be in range [-180, 180]")
        if self.radius_m <= 0:
            raise ValueError("radius_m must be positive")
        if self.radius_m > 500_000:
            raise ValueError("radius_m too large: max 500 km")
        return self
