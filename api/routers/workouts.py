"""
Workouts router for the public workout catalog.

This router contains endpoints for:
- GET /api/workouts - List workouts (category / createdBy filters, paginated)
- POST /api/workouts - Create a workout
- GET /api/workouts/{workout_id} - Get a workout
- PUT /api/workouts/{workout_id} - Merge-update a workout (creator only)
- DELETE /api/workouts/{workout_id} - Delete a workout (creator only)
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from api.deps import get_request_context, get_workouts_use_case
from api.errors import raise_for_failure
from api.schemas import WorkoutRequest
from application.authorization import RequestContext
from application.use_cases import WorkoutsUseCase
from domain.models import PageRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/workouts",
    tags=["Workouts"],
)


@router.get("")
def list_workouts_endpoint(
    category: Optional[str] = Query(None, description="Category filter; 'All' means no filter"),
    created_by: Optional[str] = Query(None, alias="createdBy", description="Owner user ID"),
    page: Optional[str] = Query(None, description="1-based page number"),
    limit: Optional[str] = Query(None, description="Items per page"),
    use_case: WorkoutsUseCase = Depends(get_workouts_use_case),
):
    """
    List workouts, newest first.

    Malformed ``page`` / ``limit`` values fall back to 1 and 10.
    """
    result = use_case.list_workouts(
        PageRequest.from_query(page, limit),
        category=category,
        created_by=created_by,
    )
    return result.to_response()


@router.post("", status_code=201)
def create_workout_endpoint(
    payload: Any = Body(None),
    ctx: RequestContext = Depends(get_request_context),
    use_case: WorkoutsUseCase = Depends(get_workouts_use_case),
):
    result = use_case.create_workout(ctx, WorkoutRequest.from_body(payload).sent_fields())
    if not result.success:
        raise_for_failure(result)
    return {
        "message": "Workout created successfully",
        "workout": result.workout.to_response(),
    }


@router.get("/{workout_id}")
def get_workout_endpoint(
    workout_id: str,
    use_case: WorkoutsUseCase = Depends(get_workouts_use_case),
):
    result = use_case.get_workout(workout_id)
    if not result.success:
        raise_for_failure(result)
    return {"workout": result.workout.to_response()}


@router.put("/{workout_id}")
def update_workout_endpoint(
    workout_id: str,
    payload: Any = Body(None),
    ctx: RequestContext = Depends(get_request_context),
    use_case: WorkoutsUseCase = Depends(get_workouts_use_case),
):
    """
    Merge-update a workout.

    Only fields present in the body change. Sending ``"notes": ""`` clears
    the notes; omitting ``notes`` leaves them alone.
    """
    result = use_case.update_workout(ctx, workout_id, WorkoutRequest.from_body(payload).sent_fields())
    if not result.success:
        raise_for_failure(result)
    return {
        "message": "Workout updated successfully",
        "workout": result.workout.to_response(),
    }


@router.delete("/{workout_id}")
def delete_workout_endpoint(
    workout_id: str,
    ctx: RequestContext = Depends(get_request_context),
    use_case: WorkoutsUseCase = Depends(get_workouts_use_case),
):
    result = use_case.delete_workout(ctx, workout_id)
    if not result.success:
        raise_for_failure(result)
    return {"message": "Workout deleted successfully"}
