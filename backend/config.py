import os

ENV = os.getenv("ENV", "development").lower()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./landmark_quest.db")

# JWT verification. Tokens are issued by the identity provider; this service
# only decodes them with the shared secret.
_DEFAULT_SECRET_KEY = "dev-secret-key-change-in-production-abc123xyz789"
SECRET_KEY = os.getenv("SECRET_KEY", _DEFAULT_SECRET_KEY)  # Default for development only
ALGORITHM = "HS256"

# Email Configuration (SendGrid)
SENDGRID_API_KEY = os.getenv("SENDGRID_API_KEY")
SENDGRID_FROM_EMAIL = os.getenv("SENDGRID_FROM_EMAIL", "noreply@landmarkquest.app")

# Certificates
CERTIFICATE_BASE_URL = os.getenv("CERTIFICATE_BASE_URL", "http://localhost:8000/certificates")
# "all_locations" or "mission_threshold"
MASTER_CERTIFICATE_POLICY = os.getenv("MASTER_CERTIFICATE_POLICY", "all_locations")
MASTER_CERTIFICATE_THRESHOLD = float(os.getenv("MASTER_CERTIFICATE_THRESHOLD", "0.8"))

FEATURED_LOCATIONS_LIMIT = int(os.getenv("FEATURED_LOCATIONS_LIMIT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_config() -> None:
    """
    Validate required configuration.

    This is intentionally strict only in production so that local development
    and tests can run with minimal environment setup.
    """
    if ENV != "production":
        return

    errors: list[str] = []

    if not SECRET_KEY or SECRET_KEY == _DEFAULT_SECRET_KEY:
        errors.append("SECRET_KEY must be set to a secure value in production")

    if not SENDGRID_API_KEY:
        errors.append("SENDGRID_API_KEY must be set in production")

    if not SENDGRID_FROM_EMAIL:
        errors.append("SENDGRID_FROM_EMAIL must be set in production")

    if not CERTIFICATE_BASE_URL.startswith(("http://", "https://")):
        errors.append("CERTIFICATE_BASE_URL must be an http(s) URL in production")

    if MASTER_CERTIFICATE_POLICY not in ("all_locations", "mission_threshold"):
        errors.append("MASTER_CERTIFICATE_POLICY must be 'all_locations' or 'mission_threshold'")

    if not 0 < MASTER_CERTIFICATE_THRESHOLD <= 1:
        errors.append("MASTER_CERTIFICATE_THRESHOLD must be in (0, 1]")

    if errors:
        raise RuntimeError("Invalid configuration:\n- " + "\n- ".join(errors))
