"""Per-user progression queries backing the achievements screen."""

from collections import defaultdict
from typing import Optional

from config import MASTER_CERTIFICATE_POLICY, MASTER_CERTIFICATE_THRESHOLD
from models.user import User
from schemas.locations import LocationSummary
from schemas.progress import (
    CheckInHistoryItem,
    LocationProgress,
    LocationProgressEntry,
    ProgressOverview,
)
from services import progression
from services.exceptions import Unauthenticated
from services.gateway import RemoteDataGateway
from services.progression import MasterEligibilityPolicy


class ProgressService:
    """Combines catalog and check-in reads with the progression calculator."""

    def __init__(
        self,
        gateway: RemoteDataGateway,
        policy: Optional[MasterEligibilityPolicy] = None,
        threshold: float = MASTER_CERTIFICATE_THRESHOLD,
    ):
        self.gateway = gateway
        self.policy = policy or MasterEligibilityPolicy(MASTER_CERTIFICATE_POLICY)
        self.threshold = threshold

    def get_location_progress(self, location_id: str, current_user: Optional[User]) -> LocationProgress:
        """Progress on one location's active missions."""
        if current_user is None:
            raise Unauthenticated("Sign in to see your progress")

        self.gateway.get_location(location_id)
        missions = self.gateway.list_active_missions(location_id)
        check_ins = self.gateway.list_check_ins(current_user.id, location_id)
        return progression.location_progress(
            location_id, missions, progression.completed_mission_ids(check_ins)
        )

    def get_catalog_progress(
        self,
        current_user: Optional[User],
        check_ins: Optional[list[CheckInHistoryItem]] = None,
    ) -> list[LocationProgressEntry]:
        """Progress for every location in the catalog, visited or not.

        Pass ``check_ins`` when the caller already holds the user's history.
        """
        if current_user is None:
            raise Unauthenticated("Sign in to see your progress")

        if check_ins is None:
            check_ins = self.gateway.list_check_ins(current_user.id)

        locations = self.gateway.list_locations()
        missions_by_location = defaultdict(list)
        for mission in self.gateway.list_active_missions():
            missions_by_location[mission.location_id].append(mission)
        completed = progression.completed_mission_ids(check_ins)

        return [
            LocationProgressEntry(
                location=LocationSummary.model_validate(location.model_dump()),
                progress=progression.location_progress(
                    location.id, missions_by_location[location.id], completed
                ),
            )
            for location in locations
        ]

    def is_master_eligible(self, entries: list[LocationProgressEntry]) -> bool:
        return progression.is_master_eligible(
            [entry.progress for entry in entries], self.policy, self.threshold
        )

    def get_overview(self, current_user: Optional[User]) -> ProgressOverview:
        """Totals, per-location progress, history and certificates for a user."""
        if current_user is None:
            raise Unauthenticated("Sign in to see your progress")

        check_ins = self.gateway.list_check_ins(current_user.id)
        entries = self.get_catalog_progress(current_user, check_ins)
        certificates = self.gateway.list_certificates(current_user.id)

        return ProgressOverview(
            total_points_earned=sum(c.points_earned for c in check_ins),
            locations_visited=len({c.location_id for c in check_ins}),
            check_in_count=len(check_ins),
            master=progression.master_progress(entry.progress for entry in entries),
            master_policy=self.policy.value,
            master_eligible=self.is_master_eligible(entries),
            locations=entries,
            check_ins=check_ins,
            certificates=certificates,
        )
