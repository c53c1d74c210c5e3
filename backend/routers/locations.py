"""Landmark catalog endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from database import get_db
from models.user import User
from routers.errors import to_http_exception
from schemas.locations import (
    LocationRecord,
    MissionRecord,
    NearbyLocation,
    NearbyQuery,
    RecommendedLocation,
)
from services.auth import get_optional_current_user
from services.exceptions import LandmarkQuestError
from services.gateway import RemoteDataGateway
from services.location_service import LocationService
from services.recommendation_service import RecommendationService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/featured", response_model=list[LocationRecord])
def get_featured_locations(db: Session = Depends(get_db)):
    """Featured landmarks for the explore screen.

    Degrades to an empty list when the catalog cannot be read.
    """
    service = LocationService(RemoteDataGateway(db))
    try:
        return service.get_featured()
    except LandmarkQuestError as e:
        logger.warning("Featured locations unavailable: %s", e)
        return []


@router.get("/nearby", response_model=list[NearbyLocation])
def get_nearby_locations(
    latitude: float,
    longitude: float,
    radius_m: float = 25_000,
    db: Session = Depends(get_db),
):
    """Landmarks within ``radius_m`` meters of a point, closest first."""
    try:
        query = NearbyQuery(latitude=latitude, longitude=longitude, radius_m=radius_m)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e.errors()[0]["msg"]),
        )

    service = LocationService(RemoteDataGateway(db))
    try:
        return service.get_nearby(query.latitude, query.longitude, query.radius_m)
    except LandmarkQuestError as e:
        raise to_http_exception(e)


@router.get("/{location_id}", response_model=LocationRecord)
def get_location(location_id: str, db: Session = Depends(get_db)):
    service = LocationService(RemoteDataGateway(db))
    try:
        return service.get_location(location_id)
    except LandmarkQuestError as e:
        logger.warning("Location %s unavailable: %s", location_id, e)
        raise to_http_exception(e)


@router.get("/{location_id}/missions", response_model=list[MissionRecord])
def get_location_missions(location_id: str, db: Session = Depends(get_db)):
    """Active missions for a location."""
    service = LocationService(RemoteDataGateway(db))
    try:
        return service.get_missions(location_id)
    except LandmarkQuestError as e:
        raise to_http_exception(e)


@router.get("/{location_id}/recommendations", response_model=list[RecommendedLocation])
def get_location_recommendations(
    location_id: str,
    current_user: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
):
    """Suggested next locations.

    Signed-in users do not see locations they already checked into. Never
    fails: an empty list is returned when recommendations are unavailable.
    """
    service = RecommendationService(RemoteDataGateway(db))
    return service.recommendations_for(location_id, current_user)
