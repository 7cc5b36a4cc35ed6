"""
Authentication router.
Handles registration and login; both are public.
"""

from fastapi import APIRouter, Depends, Request

from reservation_api.dependencies import get_user_service
from reservation_api.services.domain import UserService
from reservation_shared.security.rate_limit import limiter, login_rate_limit
from reservation_shared.utils.schemas import UserCredentials


router = APIRouter(prefix="/api/user", tags=["user"])


@router.post("/register", response_model=str)
def register(
    body: UserCredentials,
    service: UserService = Depends(get_user_service),
) -> str:
    """Returns "User created successfully."; 409 if the username is taken."""
    return service.register(body)


@router.post("/login", response_model=str)
@limiter.limit(login_rate_limit)
def login(
    request: Request,
    body: UserCredentials,
    service: UserService = Depends(get_user_service),
) -> str:
    """
    Exchange credentials for a signed access token.

    The token carries:
    - sub: user ID
    - name: username
    - user_id: user ID
    - iss, aud, iat, exp
    """
    return service.login(body)
