"""Remote data gateway over the landmark tables and backend procedures.

Every read returns composed pydantic records rather than ORM rows, so callers
never depend on the session being open. Database errors surface as
``RemoteCallFailed``; a missing record surfaces as ``DataUnavailable``.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from config import CERTIFICATE_BASE_URL
from models.locations import Location, LocationRecommendation, Mission
from models.progress import Certificate, CheckIn
from models.user import User
from schemas.locations import LocationRecord, MissionRecord, RecommendedLocation
from schemas.progress import (
    CertificateRecord,
    CertificateWithLocation,
    CheckInHistoryItem,
    CheckInRecord,
)
from services.email_service import EmailService
from services.exceptions import AlreadyCompleted, DataUnavailable, RemoteCallFailed


logger = logging.getLogger(__name__)


class RemoteDataGateway:
    """Reads, writes and procedure calls against the backend store."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _remote_call(self, name: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Remote call %s failed", name)
            raise RemoteCallFailed(f"{name} failed") from e

    def get_location(self, location_id: str) -> LocationRecord:
        with self._remote_call("get_location"):
            location = self.db.query(Location).filter(Location.id == location_id).first()
        if location is None:
            raise DataUnavailable(f"Location {location_id} not found")
        return LocationRecord.model_validate(location)

    def list_locations(self) -> list[LocationRecord]:
        with self._remote_call("list_locations"):
            rows = self.db.query(Location).order_by(Location.name).all()
        return [LocationRecord.model_validate(row) for row in rows]

    def list_featured_locations(self, limit: int) -> list[LocationRecord]:
        with self._remote_call("list_featured_locations"):
            rows = (
                self.db.query(Location)
                .filter(Location.featured.is_(True))
                .order_by(Location.created_at)
                .limit(limit)
                .all()
            )
        return [LocationRecord.model_validate(row) for row in rows]

    def list_geolocated_locations(self) -> list[LocationRecord]:
        """Locations that carry coordinates."""
        with self._remote_call("list_geolocated_locations"):
            rows = (
                self.db.query(Location)
                .filter(Location.latitude.isnot(None), Location.longitude.isnot(None))
                .all()
            )
        return [LocationRecord.model_validate(row) for row in rows]

    def list_active_missions(self, location_id: Optional[str] = None) -> list[MissionRecord]:
        """Active missions, for one location or for the whole catalog."""
        with self._remote_call("list_active_missions"):
            query = self.db.query(Mission).filter(Mission.active.is_(True))
            if location_id is not None:
                query = query.filter(Mission.location_id == location_id)
            rows = query.order_by(Mission.created_at).all()
        return [MissionRecord.model_validate(row) for row in rows]

    def list_check_ins(
        self, user_id: int, location_id: Optional[str] = None
    ) -> list[CheckInHistoryItem]:
        """A user's check-ins, newest first, joined with mission and location."""
        with self._remote_call("list_check_ins"):
            query = (
                self.db.query(CheckIn)
                .options(joinedload(CheckIn.mission), joinedload(CheckIn.location))
                .filter(CheckIn.user_id == user_id)
            )
            if location_id is not None:
                query = query.filter(CheckIn.location_id == location_id)
            rows = query.order_by(CheckIn.created_at.desc()).all()
        return [CheckInHistoryItem.model_validate(row) for row in rows]

    def list_certificates(self, user_id: int) -> list[CertificateWithLocation]:
        with self._remote_call("list_certificates"):
            rows = (
                self.db.query(Certificate)
                .options(joinedload(Certificate.location))
                .filter(Certificate.user_id == user_id)
                .order_by(Certificate.created_at.desc())
                .all()
            )
        return [CertificateWithLocation.model_validate(row) for row in rows]

    def handle_check_in(self, user_id: int, location_id: str, mission_id: str) -> CheckInRecord:
        """Record a mission completion and award the mission's points.

        Rejects inactive or unknown missions, and duplicate check-ins with
        ``AlreadyCompleted``.
        """
        with self._remote_call("handle_check_in"):
            mission = (
                self.db.query(Mission)
                .filter(
                    Mission.id == mission_id,
                    Mission.location_id == location_id,
                    Mission.active.is_(True),
                )
                .first()
            )
        if mission is None:
            raise DataUnavailable(f"Mission {mission_id} not found at location {location_id}")

        check_in = CheckIn(
            user_id=user_id,
            location_id=location_id,
            mission_id=mission_id,
            points_earned=mission.points,
        )
        try:
            self.db.add(check_in)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Duplicate check-in rejected: user=%s mission=%s", user_id, mission_id)
            raise AlreadyCompleted(mission_id) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Remote call handle_check_in failed")
            raise RemoteCallFailed("handle_check_in failed") from e

        self.db.refresh(check_in)
        return CheckInRecord.model_validate(check_in)

    def find_certificate(
        self, user_id: int, location_id: Optional[str] = None
    ) -> Optional[CertificateRecord]:
        """Earliest certificate issued to a user for a location, or the master one."""
        with self._remote_call("find_certificate"):
            query = self.db.query(Certificate).filter(Certificate.user_id == user_id)
            if location_id is None:
                query = query.filter(Certificate.is_master.is_(True))
            else:
                query = query.filter(Certificate.location_id == location_id)
            row = query.order_by(Certificate.created_at).first()
        return CertificateRecord.model_validate(row) if row is not None else None

    def generate_certificate(
        self, user_id: int, points_earned: int, location_id: Optional[str] = None
    ) -> CertificateRecord:
        """Issue a certificate. Omitting ``location_id`` issues a master certificate."""
        if location_id is not None:
            with self._remote_call("generate_certificate"):
                exists = self.db.query(Location.id).filter(Location.id == location_id).first()
            if exists is None:
                raise DataUnavailable(f"Location {location_id} not found")

        certificate_id = str(uuid.uuid4())
        certificate = Certificate(
            id=certificate_id,
            user_id=user_id,
            location_id=location_id,
            is_master=location_id is None,
            points_earned=points_earned,
            certificate_url=f"{CERTIFICATE_BASE_URL.rstrip('/')}/{certificate_id}.pdf",
        )
        with self._remote_call("generate_certificate"):
            self.db.add(certificate)
            self.db.commit()
            self.db.refresh(certificate)
        return CertificateRecord.model_validate(certificate)

    def get_recommended_locations(self, source_location_id: str) -> list[RecommendedLocation]:
        """Active recommendations from a source location, ranked by priority."""
        with self._remote_call("get_recommended_locations"):
            rows = (
                self.db.query(LocationRecommendation)
                .options(joinedload(LocationRecommendation.recommended_location))
                .filter(
                    LocationRecommendation.source_location_id == source_location_id,
                    LocationRecommendation.active.is_(True),
                )
                .order_by(LocationRecommendation.priority, LocationRecommendation.created_at)
                .all()
            )

        return [
            RecommendedLocation(
                **LocationRecord.model_validate(row.recommended_location).model_dump(),
                priority=row.priority,
                reason=row.reason,
            )
            for row in rows
        ]

    def send_certificate_email(self, user_id: int, certificate_id: str) -> None:
        """Email the certificate link to its owner. Outcome is only logged."""
        with self._remote_call("send_certificate_email"):
            user = self.db.query(User).filter(User.id == user_id).first()
            certificate = (
                self.db.query(Certificate)
                .options(joinedload(Certificate.location))
                .filter(Certificate.id == certificate_id, Certificate.user_id == user_id)
                .first()
            )
        if user is None or certificate is None:
            logger.warning(
                "Certificate email skipped: user=%s certificate=%s not found",
                user_id,
                certificate_id,
            )
            return

        sent = EmailService(self.db).send_certificate(
            to_email=user.email,
            username=user.username,
            certificate=CertificateWithLocation.model_validate(certificate),
        )
        if not sent:
            logger.warning("Certificate email not delivered: certificate=%s", certificate_id)
