"""
Auth Schemas.

Schemas for:
- RegisterRequest: Request body for POST /api/auth/register
- LoginRequest: Request body for POST /api/auth/login
- ProfileUpdateRequest: Request body for PUT /api/auth/me
"""

from typing import Any

from pydantic import Field

from api.schemas.common import RequestModel


class RegisterRequest(RequestModel):
    """Request body for POST /api/auth/register."""
    name: Any = None
    email: Any = None
    password: Any = None


class LoginRequest(RequestModel):
    """Request body for POST /api/auth/login."""
    email: Any = None
    password: Any = None


class ProfileUpdateRequest(RequestModel):
    """Request body for PUT /api/auth/me. Only sent fields change."""
    name: Any = None
    fitness_goals: Any = Field(
        default=None,
        description="Free-text fitness goals; an empty string clears them",
    )
