"""
Domain layer for the FitTrack API.

This package contains pure domain models and field validation that are
independent of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Log,
    LogComment,
    LogDraft,
    Page,
    PageRequest,
    Pagination,
    User,
    UserCredentials,
    UserSummary,
    Workout,
    WorkoutCategory,
    WorkoutDraft,
    WorkoutSummary,
)

__all__ = [
    "Log",
    "LogComment",
    "LogDraft",
    "Page",
    "PageRequest",
    "Pagination",
    "User",
    "UserCredentials",
    "UserSummary",
    "Workout",
    "WorkoutCategory",
    "WorkoutDraft",
    "WorkoutSummary",
]
