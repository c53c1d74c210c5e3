"""Translate domain errors into HTTP responses."""

from fastapi import HTTPException, status

from services.exceptions import (
    AlreadyCompleted,
    CertificateGenerationFailed,
    CheckInFailed,
    DataUnavailable,
    LandmarkQuestError,
    Unauthenticated,
)


def to_http_exception(error: LandmarkQuestError) -> HTTPException:
    """Map a domain error to a status code and ``{"error", "message"}`` detail."""
    if isinstance(error, Unauthenticated):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": error.code, "message": error.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    if isinstance(error, AlreadyCompleted):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(error, DataUnavailable):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, (CheckInFailed, CertificateGenerationFailed)) and isinstance(
        error.cause, DataUnavailable
    ):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HTTPException(
        status_code=status_code,
        detail={"error": error.code, "message": error.message},
    )
