"""Model package exports for database initialization."""

from models.user import User
from models.locations import Location, Mission, LocationRecommendation
from models.progress import CheckIn, Certificate, EmailTemplate

__all__ = [
    "User",
    "Location",
    "Mission",
    "LocationRecommendation",
    "CheckIn",
    "Certificate",
    "EmailTemplate",
]
