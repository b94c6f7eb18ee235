"""
Router package for the FitTrack API.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- auth: Registration, login, logout and the current user's profile
- workouts: Public workout catalog CRUD
- logs: Workout logs and the shared community feed
"""

from api.routers.auth import router as auth_router
from api.routers.health import router as health_router
from api.routers.logs import router as logs_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "auth_router",
    "health_router",
    "logs_router",
    "workouts_router",
]
