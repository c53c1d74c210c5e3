"""Certificate endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from database import get_db, get_session_factory
from models.user import User
from routers.errors import to_http_exception
from routers.rate_limit import limiter
from schemas.progress import CertificateRecord, CertificateRequest, CertificateWithLocation
from services import progression
from services.auth import get_current_user, get_optional_current_user
from services.certificate_service import MASTER_SCOPE, CertificateService
from services.exceptions import LandmarkQuestError
from services.gateway import RemoteDataGateway
from services.progress_service import ProgressService


logger = logging.getLogger(__name__)

router = APIRouter()


def send_certificate_email(session_factory, user_id: int, certificate_id: str) -> None:
    """Background task: email a freshly issued certificate."""
    db = session_factory()
    try:
        RemoteDataGateway(db).send_certificate_email(user_id, certificate_id)
    except LandmarkQuestError:
        logger.exception("Certificate email failed for certificate %s", certificate_id)
    finally:
        db.close()


@router.get("", response_model=list[CertificateWithLocation])
def get_certificates(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The current user's certificates, newest first."""
    try:
        return RemoteDataGateway(db).list_certificates(current_user.id)
    except LandmarkQuestError as e:
        raise to_http_exception(e)


@router.post("", response_model=CertificateRecord, status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")
def request_certificate(
    request: Request,
    response: Response,
    payload: CertificateRequest,
    background_tasks: BackgroundTasks,
    current_user: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
    session_factory=Depends(get_session_factory),
):
    """
    Issue a location certificate, or the master certificate when
    ``location_id`` is omitted.

    The user must have completed every active mission at the location. Master
    eligibility follows the configured policy. The certificate email is sent
    after the response and its outcome is not reported. A certificate the user
    already holds for the same scope is returned with 200 and no new email.

    Rate limit: 5 requests per minute per user.
    """
    gateway = RemoteDataGateway(db)
    progress_service = ProgressService(gateway)
    certificate_service = CertificateService(gateway)
    scope = MASTER_SCOPE if payload.location_id is None else payload.location_id

    try:
        issued = certificate_service.find_issued(scope, current_user)
        if issued is not None:
            response.status_code = status.HTTP_200_OK
            return issued

        if scope is MASTER_SCOPE:
            entries = progress_service.get_catalog_progress(current_user)
            eligible = progress_service.is_master_eligible(entries)
            points_earned = progression.master_progress(
                entry.progress for entry in entries
            ).completed_points
        else:
            location_progress = progress_service.get_location_progress(
                payload.location_id, current_user
            )
            eligible = location_progress.is_complete
            points_earned = location_progress.completed_points

        if not eligible:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail={
                    "error": "not_eligible",
                    "message": "Complete the required missions to request this certificate",
                },
            )

        request.state.user_id = current_user.id
        certificate = certificate_service.request_certificate(
            scope, current_user, points_earned
        )
    except LandmarkQuestError as e:
        raise to_http_exception(e)

    background_tasks.add_task(
        send_certificate_email, session_factory, current_user.id, certificate.id
    )
    return certificate
