"""Shared rate limiter for mutating endpoints."""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address


def get_user_id_from_request(request: Request) -> str:
    """Extract user ID for rate limiting key."""
    # During rate limit check, user may not be authenticated yet
    # Fall back to IP address if no user context
    if hasattr(request.state, "user_id"):
        return str(request.state.user_id)
    return get_remote_address(request)


limiter = Limiter(key_func=get_user_id_from_request)
