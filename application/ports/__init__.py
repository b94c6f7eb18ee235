"""
Repository Interfaces (Ports) for the FitTrack API.

This package defines abstract interfaces that decouple application logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository, WorkoutFilters

    class WorkoutsUseCase:
        def __init__(self, workout_repo: WorkoutRepository):
            self._workout_repo = workout_repo
"""

from application.ports.user_repository import UserRepository
from application.ports.workout_repository import WorkoutFilters, WorkoutRepository
from application.ports.log_repository import LogFilters, LogRepository

__all__ = [
    # Users
    "UserRepository",
    # Workouts
    "WorkoutRepository",
    "WorkoutFilters",
    # Logs
    "LogRepository",
    "LogFilters",
]
