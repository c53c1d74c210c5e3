"""Mission check-in orchestration."""

import logging
from typing import AbstractSet, NamedTuple, Optional

from models.user import User
from schemas.progress import CheckInRecord
from services.exceptions import (
    AlreadyCompleted,
    CheckInFailed,
    DataUnavailable,
    RemoteCallFailed,
    Unauthenticated,
)
from services.gateway import RemoteDataGateway


logger = logging.getLogger(__name__)


class CheckInOutcome(NamedTuple):
    check_in: CheckInRecord
    # Caller's completed set plus the mission just checked into.
    completed_mission_ids: frozenset[str]


class CheckInService:
    """Validates preconditions and forwards check-ins to the backend."""

    def __init__(self, gateway: RemoteDataGateway):
        self.gateway = gateway

    def check_in(
        self,
        location_id: str,
        mission_id: str,
        current_user: Optional[User],
        completed_mission_ids: AbstractSet[str] = frozenset(),
    ) -> CheckInOutcome:
        """Check the user into a mission.

        Points are awarded by the backend procedure, never computed here. A
        mission already in ``completed_mission_ids`` is rejected before any
        remote call; the backend's uniqueness constraint remains the final word.

        Raises:
            Unauthenticated: no current user.
            AlreadyCompleted: mission is in the caller's completed set, or the
                backend already holds a check-in for it.
            CheckInFailed: the backend call failed; ``cause`` holds the reason.
        """
        if current_user is None:
            raise Unauthenticated("Sign in to check in")

        if mission_id in completed_mission_ids:
            raise AlreadyCompleted(mission_id)

        try:
            check_in = self.gateway.handle_check_in(current_user.id, location_id, mission_id)
        except (RemoteCallFailed, DataUnavailable) as e:
            logger.warning(
                "Check-in failed for user %s mission %s: %s", current_user.id, mission_id, e
            )
            raise CheckInFailed("Failed to check in", cause=e) from e

        logger.info(
            "User %s checked in to mission %s (+%s points)",
            current_user.id,
            mission_id,
            check_in.points_earned,
        )
        return CheckInOutcome(
            check_in=check_in,
            completed_mission_ids=frozenset(completed_mission_ids) | {mission_id},
        )
