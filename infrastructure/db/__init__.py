"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use cases
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseUserRepository,
        SupabaseWorkoutRepository,
        SupabaseLogRepository,
    )

    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    user_repo = SupabaseUserRepository(client)
    workout_repo = SupabaseWorkoutRepository(client)
    log_repo = SupabaseLogRepository(client)
"""

from infrastructure.db.user_repository import SupabaseUserRepository
from infrastructure.db.workout_repository import SupabaseWorkoutRepository
from infrastructure.db.log_repository import SupabaseLogRepository

__all__ = [
    # Accounts and profiles
    "SupabaseUserRepository",

    # Workout catalog
    "SupabaseWorkoutRepository",

    # Workout logs and shared feed
    "SupabaseLogRepository",
]
