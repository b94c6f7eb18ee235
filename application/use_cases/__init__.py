"""
Application Use Cases for the FitTrack API.

This package contains application-level use cases that orchestrate domain
validation, the authorization kernel and repository ports. Use cases are the
entry points for business operations.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return tagged results, not API responses

Usage:
    from application.use_cases import WorkoutsUseCase

    use_case = WorkoutsUseCase(workout_repo=workout_repo)
    result = use_case.update_workout(ctx, "w-123", {"notes": ""})
    if not result.success:
        print(result.error_kind, result.error)
"""

from application.use_cases.accounts import AccountsUseCase
from application.use_cases.logs import LogsUseCase
from application.use_cases.profile import ProfileUseCase
from application.use_cases.results import (
    AuthResult,
    DeleteResult,
    ErrorKind,
    LogPageResult,
    LogResult,
    OperationResult,
    UserResult,
    WorkoutResult,
)
from application.use_cases.workouts import WorkoutsUseCase

__all__ = [
    # Use cases
    "AccountsUseCase",
    "ProfileUseCase",
    "WorkoutsUseCase",
    "LogsUseCase",
    # Results
    "ErrorKind",
    "OperationResult",
    "AuthResult",
    "UserResult",
    "WorkoutResult",
    "LogResult",
    "LogPageResult",
    "DeleteResult",
]
