"""
Log entity - one completed workout session.

A log belongs to the user who recorded it, which is not necessarily the
creator of the referenced workout. Other users can only see it while
``is_shared`` is true.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator

from domain.models.base import DomainModel
from domain.models.user import UserSummary
from domain.models.workout import NOTES_MAX_LENGTH, WorkoutSummary

DURATION_MIN, DURATION_MAX = 1, 1440
COMMENT_MAX_LENGTH = 200


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 date/time into an aware UTC datetime.

    Naive values (``"2024-01-01T10:00"``) are taken as UTC. Returns None
    when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class LogComment(DomainModel):
    """A comment left on a shared log."""

    user: str
    text: str = Field(..., max_length=COMMENT_MAX_LENGTH)
    created_at: Optional[datetime] = None


class CommentDraft(BaseModel):
    text: str = Field(..., min_length=1, max_length=COMMENT_MAX_LENGTH)

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class LogPatch(BaseModel):
    """
    Validated merge update for a log.

    Fields default to None and only the ones sent survive
    ``model_dump(exclude_unset=True)``. ``workout_id`` is not accepted: a
    log stays attached to the workout it was created for.
    """

    completed_at: datetime = None
    duration: StrictInt = Field(None, ge=DURATION_MIN, le=DURATION_MAX, description="Minutes")
    notes: str = Field(None, max_length=NOTES_MAX_LENGTH)
    is_shared: bool = None

    @field_validator("completed_at", mode="before")
    @classmethod
    def parse_completed_at(cls, v):
        if v is None:
            return v
        parsed = parse_datetime(v)
        if parsed is None:
            raise ValueError("not an ISO-8601 date")
        return parsed

    @field_validator("notes", mode="before")
    @classmethod
    def null_notes_are_empty(cls, v):
        return "" if v is None else v

    @field_validator("is_shared", mode="before")
    @classmethod
    def null_is_not_shared(cls, v):
        return False if v is None else v


class LogDraft(LogPatch):
    """Validated input for creating a log."""

    workout_id: str = Field(..., min_length=1)
    completed_at: datetime
    duration: StrictInt = Field(..., ge=DURATION_MIN, le=DURATION_MAX, description="Minutes")
    notes: str = Field(default="", max_length=NOTES_MAX_LENGTH)
    is_shared: bool = False

    @field_validator("workout_id", mode="before")
    @classmethod
    def strip_workout_id(cls, v):
        return v.strip() if isinstance(v, str) else v


class Log(DomainModel):
    """A completed workout session."""

    id: str
    workout_id: str
    user_id: str = Field(..., description="Owning user ID")
    completed_at: datetime
    duration: int = Field(..., description="Duration in minutes")
    notes: str = ""
    is_shared: bool = False
    likes: List[str] = Field(default_factory=list)
    comments: List[LogComment] = Field(default_factory=list)
    workout: Optional[WorkoutSummary] = None
    user: Optional[UserSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def owner_id(self) -> str:
        return self.user_id
