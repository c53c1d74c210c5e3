"""Points and completion arithmetic for missions and check-ins.

Everything here is pure: no I/O, no exceptions on empty input. A completion
ratio is only defined when the missions carry points, so ``completion_ratio``
returns None instead of dividing by zero and callers branch on it.
"""

from enum import Enum
from typing import AbstractSet, Iterable, Optional, Sequence

from schemas.locations import MissionRecord
from schemas.progress import CheckInRecord, LocationProgress, MasterProgress


class MasterEligibilityPolicy(str, Enum):
    """How master-certificate eligibility is decided."""

    # Every location that has missions is fully completed.
    ALL_LOCATIONS = "all_locations"
    # A share of all missions across the catalog is completed.
    MISSION_THRESHOLD = "mission_threshold"


DEFAULT_MISSION_THRESHOLD = 0.8


def total_points(missions: Iterable[MissionRecord]) -> int:
    return sum(mission.points for mission in missions)


def completed_points(missions: Iterable[MissionRecord], completed_ids: AbstractSet[str]) -> int:
    return sum(mission.points for mission in missions if mission.id in completed_ids)


def completion_ratio(
    missions: Sequence[MissionRecord], completed_ids: AbstractSet[str]
) -> Optional[float]:
    """Share of points earned, or None when there are no points to earn."""
    total = total_points(missions)
    if total <= 0:
        return None
    return completed_points(missions, completed_ids) / total


def is_fully_completed(missions: Iterable[MissionRecord], completed_ids: AbstractSet[str]) -> bool:
    """True when there is at least one mission and all of them are completed."""
    mission_ids = {mission.id for mission in missions}
    return bool(mission_ids) and mission_ids <= set(completed_ids)


def completed_mission_ids(check_ins: Iterable[CheckInRecord]) -> frozenset[str]:
    return frozenset(check_in.mission_id for check_in in check_ins)


def location_progress(
    location_id: str, missions: Sequence[MissionRecord], completed_ids: AbstractSet[str]
) -> LocationProgress:
    """Completion state of one location's active missions."""
    return LocationProgress(
        location_id=location_id,
        completed_missions=sum(1 for mission in missions if mission.id in completed_ids),
        total_missions=len(missions),
        completed_points=completed_points(missions, completed_ids),
        total_points=total_points(missions),
        completion_ratio=completion_ratio(missions, completed_ids),
        is_complete=is_fully_completed(missions, completed_ids),
    )


def master_progress(progress_items: Iterable[LocationProgress]) -> MasterProgress:
    """Aggregate per-location progress into catalog-wide totals."""
    items = list(progress_items)
    completed = sum(p.completed_points for p in items)
    total = sum(p.total_points for p in items)

    return MasterProgress(
        completed_missions=sum(p.completed_missions for p in items),
        total_missions=sum(p.total_missions for p in items),
        completed_points=completed,
        total_points=total,
        completion_ratio=completed / total if total > 0 else None,
        locations_completed=sum(1 for p in items if p.is_complete),
        locations_total=len(items),
    )


def all_locations_complete(progress_items: Iterable[LocationProgress]) -> bool:
    items = [p for p in progress_items if p.total_missions > 0]
    return bool(items) and all(p.is_complete for p in items)


def mission_threshold_met(
    master: MasterProgress, threshold: float = DEFAULT_MISSION_THRESHOLD
) -> bool:
    if master.total_missions == 0:
        return False
    return master.completed_missions / master.total_missions >= threshold


def is_master_eligible(
    progress_items: Iterable[LocationProgress],
    policy: MasterEligibilityPolicy,
    threshold: float = DEFAULT_MISSION_THRESHOLD,
) -> bool:
    """Decide master-certificate eligibility under the given policy."""
    items = list(progress_items)
    if policy == MasterEligibilityPolicy.MISSION_THRESHOLD:
        return mission_threshold_met(master_progress(items), threshold)
    return all_locations_complete(items)
