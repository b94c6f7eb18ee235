"""
Auth router for accounts and the current user's profile.

This router contains endpoints for:
- POST /api/auth/register - Create an account and sign in
- POST /api/auth/login - Exchange credentials for the auth cookie
- POST /api/auth/logout - Clear the auth cookie
- GET /api/auth/me - Current user
- PUT /api/auth/me - Merge-update name / fitness goals
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from api.deps import (
    get_accounts_use_case,
    get_profile_use_case,
    get_request_context,
    get_settings,
)
from api.errors import raise_for_failure
from api.schemas import LoginRequest, ProfileUpdateRequest, RegisterRequest
from application.authorization import RequestContext
from application.use_cases import AccountsUseCase, ProfileUseCase
from backend.auth import AUTH_COOKIE_NAME
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth",
    tags=["Auth"],
)


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        max_age=int(settings.token_ttl.total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.auth_cookie_secure,
        path="/",
    )


# =============================================================================
# Account Endpoints
# =============================================================================


@router.post("/register", status_code=201)
def register_endpoint(
    response: Response,
    payload: Any = Body(None),
    use_case: AccountsUseCase = Depends(get_accounts_use_case),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new account and set the auth cookie.

    Returns:
        201 with the new user; 400 for invalid input or a taken email
    """
    request = RegisterRequest.from_body(payload)
    result = use_case.register(request.name, request.email, request.password)
    if not result.success:
        raise_for_failure(result)

    _set_auth_cookie(response, result.token, settings)
    return {
        "message": "User registered successfully",
        "user": result.user.to_response(),
    }


@router.post("/login")
def login_endpoint(
    response: Response,
    payload: Any = Body(None),
    use_case: AccountsUseCase = Depends(get_accounts_use_case),
    settings: Settings = Depends(get_settings),
):
    request = LoginRequest.from_body(payload)
    result = use_case.login(request.email, request.password)
    if not result.success:
        raise_for_failure(result)

    _set_auth_cookie(response, result.token, settings)
    return {
        "message": "Login successful",
        "user": result.user.to_response(),
    }


@router.post("/logout")
def logout_endpoint(response: Response, settings: Settings = Depends(get_settings)):
    """Clear the auth cookie. Tokens are stateless, so nothing is revoked server-side."""
    response.delete_cookie(
        key=AUTH_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.auth_cookie_secure,
    )
    return {"message": "Logged out successfully"}


# =============================================================================
# Profile Endpoints
# =============================================================================


@router.get("/me")
def get_me_endpoint(
    ctx: RequestContext = Depends(get_request_context),
    use_case: ProfileUseCase = Depends(get_profile_use_case),
):
    result = use_case.get_current(ctx)
    if not result.success:
        raise_for_failure(result)
    return {"user": result.user.to_response()}


@router.put("/me")
def update_me_endpoint(
    payload: Any = Body(None),
    ctx: RequestContext = Depends(get_request_context),
    use_case: ProfileUseCase = Depends(get_profile_use_case),
):
    """
    Merge-update the current user's profile.

    A blank name is ignored; ``fitnessGoals`` applies whenever sent.
    """
    result = use_case.update(ctx, ProfileUpdateRequest.from_body(payload).sent_fields())
    if not result.success:
        raise_for_failure(result)
    return {
        "message": "Profile updated successfully",
        "user": result.user.to_response(),
    }
