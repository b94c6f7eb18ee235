"""
Pydantic schemas for API requests.

Organized by feature/domain:
- auth: Registration, login and profile update bodies
- workouts: Workout create/update body
- logs: Log create/update bodies
"""

from api.schemas.auth import (
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
)
from api.schemas.common import RequestModel
from api.schemas.logs import LogCreateRequest, LogUpdateRequest
from api.schemas.workouts import WorkoutRequest

__all__ = [
    "RequestModel",
    "RegisterRequest",
    "LoginRequest",
    "ProfileUpdateRequest",
    "WorkoutRequest",
    "LogCreateRequest",
    "LogUpdateRequest",
]
