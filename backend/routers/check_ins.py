"""Mission check-in endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from database import get_db
from models.user import User
from routers.errors import to_http_exception
from routers.rate_limit import limiter
from schemas.progress import CheckInHistoryItem, CheckInRequest, CheckInResponse
from services import progression
from services.auth import get_current_user, get_optional_current_user
from services.check_in_service import CheckInService
from services.exceptions import LandmarkQuestError
from services.gateway import RemoteDataGateway
from services.progress_service import ProgressService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CheckInResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("30/minute")
def check_in(
    request: Request,
    payload: CheckInRequest,
    current_user: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
):
    """
    Check the current user into a mission.

    The server awards the mission's points. A mission the user already
    completed is rejected with 409 before anything is written.

    Rate limit: 30 requests per minute per user.
    """
    gateway = RemoteDataGateway(db)

    try:
        completed = frozenset()
        if current_user is not None:
            # Store user_id in request state for rate limiting
            request.state.user_id = current_user.id
            completed = progression.completed_mission_ids(
                gateway.list_check_ins(current_user.id, payload.location_id)
            )

        outcome = CheckInService(gateway).check_in(
            payload.location_id,
            payload.mission_id,
            current_user,
            completed_mission_ids=completed,
        )
    except LandmarkQuestError as e:
        raise to_http_exception(e)

    try:
        progress = ProgressService(gateway).get_location_progress(
            payload.location_id, current_user
        )
    except LandmarkQuestError as e:
        logger.warning("Progress refresh failed after check-in %s: %s", outcome.check_in.id, e)
        progress = None

    return CheckInResponse(
        check_in=outcome.check_in,
        completed_mission_ids=sorted(outcome.completed_mission_ids),
        progress=progress,
    )


@router.get("", response_model=list[CheckInHistoryItem])
def get_check_ins(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The current user's check-ins, newest first."""
    try:
        return RemoteDataGateway(db).list_check_ins(current_user.id)
    except LandmarkQuestError as e:
        raise to_http_exception(e)
