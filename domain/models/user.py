"""
User identity models.

The password hash is deliberately absent from ``User``: it lives only in
``UserCredentials``, which never leaves the authentication flow.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.base import DomainModel

USER_NAME_MAX_LENGTH = 100
FITNESS_GOALS_MAX_LENGTH = 500
PASSWORD_MIN_LENGTH = 6
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class RegistrationDraft(BaseModel):
    """Validated sign-up input. ``email`` is stored lower-cased."""

    name: str = Field(..., min_length=1, max_length=USER_NAME_MAX_LENGTH)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, v):
        return normalize_email(v) if isinstance(v, str) else v


class ProfilePatch(BaseModel):
    name: str = Field(None, min_length=1, max_length=USER_NAME_MAX_LENGTH)
    fitness_goals: str = Field(None, max_length=FITNESS_GOALS_MAX_LENGTH)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("fitness_goals", mode="before")
    @classmethod
    def null_goals_are_empty(cls, v):
        return "" if v is None else v


class UserSummary(DomainModel):
    """Reduced user view attached to workouts and logs."""

    id: str
    name: str
    email: Optional[str] = None


class User(DomainModel):
    """
    A registered user as seen by the rest of the application.

    Examples:
        >>> user = User(id="u1", name="Alex", email="alex@x.com")
        >>> user.to_response()["fitnessGoals"]
        ''
    """

    id: str
    name: str
    email: str
    fitness_goals: str = Field(default="", description="Free-text fitness goals")
    created_at: Optional[datetime] = None

    def summary(self, *, include_email: bool = True) -> UserSummary:
        """Return the reduced view used for denormalized references."""
        return UserSummary(
            id=self.id,
            name=self.name,
            email=self.email if include_email else None,
        )


class UserCredentials(BaseModel):
    """Stored login material for a single user."""

    user_id: str
    email: str
    password_hash: str
