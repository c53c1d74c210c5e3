"""Next-location suggestions for a source location."""

import logging
from typing import AbstractSet, Iterable, Optional

from models.user import User
from schemas.locations import RecommendedLocation
from services.exceptions import LandmarkQuestError
from services.gateway import RemoteDataGateway


logger = logging.getLogger(__name__)


def filter_visited(
    candidates: Iterable[RecommendedLocation], visited_location_ids: AbstractSet[str]
) -> list[RecommendedLocation]:
    """Drop candidates the user already visited, keeping the backend's order."""
    return [c for c in candidates if c.id not in visited_location_ids]


class RecommendationService:
    """Fetches backend-ranked recommendations and hides visited locations.

    Failures never propagate: recommendations are display-only.
    """

    def __init__(self, gateway: RemoteDataGateway):
        self.gateway = gateway

    def recommendations_for(
        self, source_location_id: str, current_user: Optional[User]
    ) -> list[RecommendedLocation]:
        try:
            candidates = self.gateway.get_recommended_locations(source_location_id)
        except LandmarkQuestError as e:
            logger.warning(
                "Recommendations unavailable for location %s: %s", source_location_id, e
            )
            return []

        if current_user is None:
            return candidates

        try:
            history = self.gateway.list_check_ins(current_user.id)
        except LandmarkQuestError as e:
            logger.warning(
                "Check-in history unavailable for user %s, recommendations unfiltered: %s",
                current_user.id,
                e,
            )
            return candidates

        visited = {check_in.location_id for check_in in history}
        return filter_visited(candidates, visited)
