"""Progress endpoints backing the achievements screen."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from models.user import User
from routers.errors import to_http_exception
from schemas.progress import LocationProgress, ProgressOverview
from services.auth import get_current_user
from services.exceptions import LandmarkQuestError
from services.gateway import RemoteDataGateway
from services.progress_service import ProgressService


router = APIRouter()


@router.get("", response_model=ProgressOverview)
def get_progress_overview(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Points, per-location completion, master eligibility, history and certificates."""
    service = ProgressService(RemoteDataGateway(db))
    try:
        return service.get_overview(current_user)
    except LandmarkQuestError as e:
        raise to_http_exception(e)


@router.get("/locations/{location_id}", response_model=LocationProgress)
def get_location_progress(
    location_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    service = ProgressService(RemoteDataGateway(db))
    try:
        return service.get_location_progress(location_id, current_user)
    except LandmarkQuestError as e:
        raise to_http_exception(e)
