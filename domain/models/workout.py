"""
Workout entity - a reusable exercise definition in the public catalog.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from domain.models.base import DomainModel
from domain.models.user import UserSummary


class WorkoutCategory(str, Enum):
    """Closed set of workout categories."""

    LEGS = "Legs"
    ARMS = "Arms"
    CARDIO = "Cardio"
    CORE = "Core"
    BACK = "Back"
    CHEST = "Chest"
    SHOULDERS = "Shoulders"
    FULL_BODY = "Full Body"
    OTHER = "Other"

    @classmethod
    def values(cls) -> list[str]:
        return [c.value for c in cls]


class WorkoutSummary(DomainModel):
    """Reduced workout view attached to logs."""

    id: str
    name: str
    category: str
    sets: int
    reps: int


WORKOUT_NAME_MAX_LENGTH = 100
NOTES_MAX_LENGTH = 500
SETS_MIN, SETS_MAX = 1, 50
REPS_MIN, REPS_MAX = 1, 1000
URL_PATTERN = r"^(https?://.+)?$"


class WorkoutDraft(BaseModel):
    """
    Validated input for creating a workout.

    ``sets`` and ``reps`` are strict: ``true`` or ``"12"`` are rejected
    rather than coerced.
    """

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=WORKOUT_NAME_MAX_LENGTH)
    category: WorkoutCategory
    sets: StrictInt = Field(..., ge=SETS_MIN, le=SETS_MAX)
    reps: StrictInt = Field(..., ge=REPS_MIN, le=REPS_MAX)
    notes: str = Field(default="", max_length=NOTES_MAX_LENGTH)
    reference_link: str = Field(
        default="",
        pattern=URL_PATTERN,
        description="Optional http(s) link; empty when absent",
    )

    @field_validator("name", "reference_link", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("notes", "reference_link", mode="before")
    @classmethod
    def null_text_is_empty(cls, v):
        return "" if v is None else v


class WorkoutPatch(WorkoutDraft):
    """
    Validated merge update for a workout.

    Every field defaults to None and is left out of
    ``model_dump(exclude_unset=True)`` unless it was sent. Defaults are not
    validated, so only an explicit ``null`` on a required field fails.
    """

    name: str = Field(None, min_length=1, max_length=WORKOUT_NAME_MAX_LENGTH)
    category: WorkoutCategory = None
    sets: StrictInt = Field(None, ge=SETS_MIN, le=SETS_MAX)
    reps: StrictInt = Field(None, ge=REPS_MIN, le=REPS_MAX)
    notes: str = Field(None, max_length=NOTES_MAX_LENGTH)
    reference_link: str = Field(None, pattern=URL_PATTERN)


class Workout(DomainModel):
    """
    A workout definition owned by the user who created it.

    Workouts are readable by anyone; only ``created_by`` may change or
    delete them. ``creator`` is populated on read and never stored.
    """

    id: str
    name: str
    category: str
    sets: int
    reps: int
    notes: str = ""
    reference_link: str = ""
    created_by: str = Field(..., description="Owning user ID")
    creator: Optional[UserSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def owner_id(self) -> str:
        return self.created_by

    def summary(self) -> WorkoutSummary:
        return WorkoutSummary(
            id=self.id,
            name=self.name,
            category=self.category,
            sets=self.sets,
            reps=self.reps,
        )
