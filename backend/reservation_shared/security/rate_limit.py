"""
Rate limiting utilities using slowapi.
Protects the login endpoint from credential stuffing.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from reservation_shared.config.logging import get_logger
from reservation_shared.config.settings import get_settings

logger = get_logger(__name__)

# Client IP is the rate limit key
limiter = Limiter(key_func=get_remote_address)


def login_rate_limit() -> str:
    """Current login limit, e.g. "5/minute"."""
    return get_settings().login_rate_limit


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Custom handler for rate limit exceeded errors.
    Returns a JSON response with retry information.
    """
    retry_after = exc.limit.limit.get_expiry()
    logger.warning(
        "Rate limit exceeded",
        path=request.url.path,
        client=get_remote_address(request),
        limit=str(exc.detail),
    )
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Rate limit exceeded. Please try again later.",
            "retry_after": retry_after,
        },
        headers={"Retry-After": str(retry_after)},
    )
