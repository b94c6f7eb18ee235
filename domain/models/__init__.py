"""
Domain models for the FitTrack API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services):
- User: registered identity (password hash kept in UserCredentials only)
- Workout: reusable exercise definition in the public catalog
- Log: one completed workout session, optionally shared to the feed
- Page / PageRequest / Pagination: offset/limit pagination envelope

Write models (``*Draft`` for create, ``*Patch`` for merge updates) carry
the field constraints; ``domain.validation`` turns their errors into
messages.
"""

from domain.models.base import DomainModel
from domain.models.log import (
    CommentDraft,
    Log,
    LogComment,
    LogDraft,
    LogPatch,
    parse_datetime,
)
from domain.models.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    Page,
    PageRequest,
    Pagination,
)
from domain.models.user import (
    ProfilePatch,
    RegistrationDraft,
    User,
    UserCredentials,
    UserSummary,
    normalize_email,
)
from domain.models.workout import (
    Workout,
    WorkoutCategory,
    WorkoutDraft,
    WorkoutPatch,
    WorkoutSummary,
)

__all__ = [
    "DomainModel",
    # Users
    "User",
    "UserCredentials",
    "UserSummary",
    "RegistrationDraft",
    "ProfilePatch",
    "normalize_email",
    # Workouts
    "Workout",
    "WorkoutCategory",
    "WorkoutDraft",
    "WorkoutPatch",
    "WorkoutSummary",
    # Logs
    "Log",
    "LogComment",
    "LogDraft",
    "LogPatch",
    "CommentDraft",
    "parse_datetime",
    # Pagination
    "Page",
    "PageRequest",
    "Pagination",
    "DEFAULT_PAGE",
    "DEFAULT_LIMIT",
]
