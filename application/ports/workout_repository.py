"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from domain.models import Page, PageRequest, Workout, WorkoutDraft, WorkoutSummary


@dataclass(frozen=True)
class WorkoutFilters:
    """Equality filters for listing workouts. None means "any"."""

    category: Optional[str] = None
    created_by: Optional[str] = None


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Returned workouts have ``creator`` populated. Ownership is not checked
    here; callers go through the authorization kernel first.
    """

    def create(self, draft: WorkoutDraft, owner_id: str) -> Workout:
        """
        Persist a new workout owned by ``owner_id``.

        Returns:
            The stored workout with generated ID and timestamps
        """
        ...

    def get_by_id(self, workout_id: str) -> Optional[Workout]:
        """Get a single workout by ID, or None if not found."""
        ...

    def update(self, workout_id: str, changes: Dict[str, Any]) -> Optional[Workout]:
        """
        Merge ``changes`` into a stored workout and bump ``updated_at``.

        Args:
            workout_id: Workout ID
            changes: Only the fields to change

        Returns:
            Updated workout, or None if it no longer exists
        """
        ...

    def delete(self, workout_id: str) -> bool:
        """Delete a workout. Returns False if it did not exist."""
        ...

    def list(self, filters: WorkoutFilters, page: PageRequest) -> Page[Workout]:
        """
        List workouts matching ``filters``, newest first.

        Returns:
            Page of workouts plus pagination envelope (total across all pages)
        """
        ...

    def get_summaries(self, workout_ids: List[str]) -> Dict[str, WorkoutSummary]:
        """Batch-fetch reduced workout views; unknown IDs are omitted."""
        ...
