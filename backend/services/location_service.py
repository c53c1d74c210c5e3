"""Landmark catalog queries: featured, detail, missions and nearby."""

import math

from config import FEATURED_LOCATIONS_LIMIT
from schemas.locations import LocationRecord, MissionRecord, NearbyLocation
from services.gateway import RemoteDataGateway


def _haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Calculate the great-circle distance between two points in meters."""
    R = 6371000  # Earth's radius in meters
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lng2 - lng1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return 2 * R * math.atan2(math.sqrt(a), math.sqrt(1 - a))


class LocationService:
    """Service for location-related queries."""

    def __init__(self, gateway: RemoteDataGateway):
        self.gateway = gateway

    def get_featured(self, limit: int = FEATURED_LOCATIONS_LIMIT) -> list[LocationRecord]:
        return self.gateway.list_featured_locations(limit)

    def get_location(self, location_id: str) -> LocationRecord:
        return self.gateway.get_location(location_id)

    def get_missions(self, location_id: str) -> list[MissionRecord]:
        """Active missions of an existing location."""
        self.gateway.get_location(location_id)
        return self.gateway.list_active_missions(location_id)

    def get_nearby(
        self, latitude: float, longitude: float, radius_m: float
    ) -> list[NearbyLocation]:
        """Locations within ``radius_m`` of the point, closest first.

        Args:
            latitude: Query point latitude
            longitude: Query point longitude
            radius_m: Search radius in meters

        Returns:
            list of NearbyLocation with distance_m populated
        """
        nearby = []
        for location in self.gateway.list_geolocated_locations():
            distance = _haversine_distance(
                latitude, longitude, location.latitude, location.longitude
            )
            if distance <= radius_m:
                nearby.append(
                    NearbyLocation(**location.model_dump(), distance_m=round(distance, 1))
                )

        nearby.sort(key=lambda item: item.distance_m)
        return nearby
