"""
Workout Schemas.

One body model serves both create and merge-update: create requires the
core fields, update applies whichever fields were sent.
"""

from typing import Any

from pydantic import Field

from api.schemas.common import RequestModel


class WorkoutRequest(RequestModel):
    """Request body for POST /api/workouts and PUT /api/workouts/{id}."""
    name: Any = None
    category: Any = Field(
        default=None,
        description="One of: Legs, Arms, Cardio, Core, Back, Chest, Shoulders, Full Body, Other",
    )
    sets: Any = Field(default=None, description="Whole number, 1 to 50")
    reps: Any = Field(default=None, description="Whole number, 1 to 1000")
    notes: Any = None
    reference_link: Any = Field(
        default=None,
        description="Optional http(s) link to a demo or article",
    )
