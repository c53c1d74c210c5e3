# Schemas package

from .locations import (
    LocationSummary,
    LocationRecord,
    MissionRecord,
    RecommendedLocation,
    NearbyLocation,
    NearbyQuery,
)

from .progress import (
    CheckInRequest,
    CheckInRecord,
    CheckInHistoryItem,
    CheckInResponse,
    CertificateRequest,
    CertificateRecord,
    CertificateWithLocation,
    LocationProgress,
    LocationProgressEntry,
    MasterProgress,
    ProgressOverview,
)
