"""Certificate issuance."""

import logging
from typing import Optional, Union

from models.user import User
from schemas.progress import CertificateRecord
from services.exceptions import (
    CertificateGenerationFailed,
    DataUnavailable,
    RemoteCallFailed,
    Unauthenticated,
)
from services.gateway import RemoteDataGateway


logger = logging.getLogger(__name__)


class _MasterScope:
    """Scope of a certificate that spans every location."""

    def __repr__(self) -> str:
        return "MASTER_SCOPE"


# Compared by identity, so no location id can stand in for it.
MASTER_SCOPE = _MasterScope()

CertificateScope = Union[str, _MasterScope]


def scope_location_id(scope: CertificateScope) -> Optional[str]:
    """Location id for a scope; None for the master scope."""
    return None if scope is MASTER_SCOPE else scope


class CertificateService:
    def __init__(self, gateway: RemoteDataGateway):
        self.gateway = gateway

    def find_issued(
        self, scope: CertificateScope, current_user: Optional[User]
    ) -> Optional[CertificateRecord]:
        """The certificate already issued to the user for ``scope``, if any."""
        if current_user is None:
            raise Unauthenticated("Sign in to request a certificate")

        return self.gateway.find_certificate(current_user.id, scope_location_id(scope))

    def request_certificate(
        self, scope: CertificateScope, current_user: Optional[User], points_earned: int
    ) -> CertificateRecord:
        """Ask the backend to issue a certificate for ``scope``.

        ``scope`` is a location id or MASTER_SCOPE. Eligibility and the points
        snapshot are the caller's responsibility and are passed through as-is.
        """
        if current_user is None:
            raise Unauthenticated("Sign in to request a certificate")

        try:
            certificate = self.gateway.generate_certificate(
                current_user.id, points_earned, location_id=scope_location_id(scope)
            )
        except (RemoteCallFailed, DataUnavailable) as e:
            logger.warning("Certificate generation failed for user %s: %s", current_user.id, e)
            raise CertificateGenerationFailed(
                "Failed to generate certificate. Please try again later.", cause=e
            ) from e

        logger.info(
            "Issued %s certificate %s to user %s",
            "master" if certificate.is_master else "location",
            certificate.id,
            current_user.id,
        )
        return certificate
