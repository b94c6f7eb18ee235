"""
Workouts Use Case.

Create, read, merge-update, delete and list workouts. Workouts form a
public catalog: reads need no identity, mutations are reserved for the
creator.
"""
import logging
from typing import Any, Dict, Optional

from application.authorization import AuthorizationKernel, RequestContext
from application.ports import WorkoutFilters, WorkoutRepository
from application.use_cases.results import DeleteResult, ErrorKind, WorkoutResult
from domain.models import Page, PageRequest, Workout, WorkoutDraft
from domain.validation import validate_workout

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"
WORKOUT_NOT_FOUND = "Workout not found"


class WorkoutsUseCase:
    """
    Use case for workout catalog operations.

    Usage:
        >>> use_case = WorkoutsUseCase(workout_repo=workout_repo)
        >>> result = use_case.create_workout(ctx, {"name": "Squat", "category": "Legs", "sets": 3, "reps": 12})
        >>> if result.success:
        ...     print(result.workout.id)
    """

    def __init__(self, workout_repo: WorkoutRepository):
        self._workout_repo = workout_repo

    def list_workouts(
        self,
        page: PageRequest,
        *,
        category: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> Page[Workout]:
        """
        List workouts, newest first.

        Args:
            page: Requested page
            category: Category filter; None or "All" means every category
            created_by: Optional owner filter
        """
        if category == ALL_CATEGORIES or not category:
            category = None
        filters = WorkoutFilters(category=category, created_by=created_by or None)
        return self._workout_repo.list(filters, page)

    def get_workout(self, workout_id: str) -> WorkoutResult:
        workout = self._workout_repo.get_by_id(workout_id)
        if workout is None:
            return WorkoutResult.failed(ErrorKind.NOT_FOUND, WORKOUT_NOT_FOUND)
        return WorkoutResult(success=True, workout=workout)

    def create_workout(self, ctx: RequestContext, fields: Dict[str, Any]) -> WorkoutResult:
        """
        Validate and persist a new workout owned by the caller.

        Args:
            ctx: Request context (must be authenticated)
            fields: Request fields keyed by snake_case name

        Returns:
            WorkoutResult with the stored, populated workout
        """
        if not ctx.is_authenticated:
            return WorkoutResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)

        validation = validate_workout(fields)
        if not validation.ok:
            logger.info(f"Workout validation failed: {validation.errors}")
            return WorkoutResult.invalid(validation)

        workout = self._workout_repo.create(WorkoutDraft(**validation.values), ctx.user_id)
        logger.info(f"Workout created: {workout.id} by {ctx.user_id}")
        return WorkoutResult(success=True, workout=workout)

    def update_workout(
        self,
        ctx: RequestContext,
        workout_id: str,
        fields: Dict[str, Any],
    ) -> WorkoutResult:
        """
        Merge the fields present in ``fields`` into a workout.

        Only keys present in ``fields`` change; an empty mapping changes
        nothing.
        """
        if not ctx.is_authenticated:
            return WorkoutResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)

        existing = self._workout_repo.get_by_id(workout_id)
        if existing is None:
            return WorkoutResult.failed(ErrorKind.NOT_FOUND, WORKOUT_NOT_FOUND)

        if not AuthorizationKernel.assert_ownership(existing, ctx.identity).allowed:
            return WorkoutResult.failed(ErrorKind.FORBIDDEN, "Not authorized to edit this workout")

        validation = validate_workout(fields, partial=True)
        if not validation.ok:
            return WorkoutResult.invalid(validation)

        if not validation.values:
            return WorkoutResult(success=True, workout=existing)

        updated = self._workout_repo.update(workout_id, validation.values)
        if updated is None:
            return WorkoutResult.failed(ErrorKind.NOT_FOUND, WORKOUT_NOT_FOUND)

        logger.info(f"Workout {workout_id} updated: {sorted(validation.values)}")
        return WorkoutResult(success=True, workout=updated)

    def delete_workout(self, ctx: RequestContext, workout_id: str) -> DeleteResult:
        if not ctx.is_authenticated:
            return DeleteResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)

        existing = self._workout_repo.get_by_id(workout_id)
        if existing is None:
            return DeleteResult.failed(ErrorKind.NOT_FOUND, WORKOUT_NOT_FOUND)

        if not AuthorizationKernel.assert_ownership(existing, ctx.identity).allowed:
            return DeleteResult.failed(ErrorKind.FORBIDDEN, "Not authorized to delete this workout")

        if not self._workout_repo.delete(workout_id):
            return DeleteResult.failed(ErrorKind.NOT_FOUND, WORKOUT_NOT_FOUND)

        logger.info(f"Workout {workout_id} deleted by {ctx.user_id}")
        return DeleteResult(success=True, deleted_id=workout_id)
