"""Error taxonomy shared by the gateway, services and routers."""

from typing import Optional


class LandmarkQuestError(Exception):
    """Base class for all domain errors."""

    code = "error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.__class__.__doc__ or self.code


class Unauthenticated(LandmarkQuestError):
    """This action requires a signed-in user."""

    code = "unauthenticated"


class RemoteCallFailed(LandmarkQuestError):
    """The backend call failed or was rejected."""

    code = "remote_call_failed"


class DataUnavailable(LandmarkQuestError):
    """The requested record does not exist."""

    code = "not_found"


class AlreadyCompleted(LandmarkQuestError):
    """This mission is already completed."""

    code = "already_completed"

    def __init__(self, mission_id: str):
        super().__init__(f"Mission {mission_id} is already completed")
        self.mission_id = mission_id


class _WrappedFailure(LandmarkQuestError):
    def __init__(self, message: str = "", cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class CheckInFailed(_WrappedFailure):
    """Failed to check in."""

    code = "check_in_failed"


class CertificateGenerationFailed(_WrappedFailure):
    """Failed to generate certificate."""

    code = "certificate_generation_failed"
