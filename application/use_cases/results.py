"""
Use-case result types.

Use cases report expected failures (unauthenticated caller, missing
resource, denied access, invalid input) as tagged results rather than
exceptions. The route layer maps ``ErrorKind`` to an HTTP status code.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from domain.models import Log, Page, User, Workout
from domain.validation import FieldError, ValidationResult


class ErrorKind(str, Enum):
    """Expected failure categories, in the order they are checked."""

    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    VALIDATION_FAILED = "validation_failed"


@dataclass
class OperationResult:
    """Common result fields shared by all use cases."""

    success: bool
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    validation_errors: List[FieldError] = field(default_factory=list)

    @classmethod
    def failed(
        cls,
        kind: ErrorKind,
        message: str,
        validation_errors: Optional[List[FieldError]] = None,
    ):
        return cls(
            success=False,
            error=message,
            error_kind=kind,
            validation_errors=validation_errors or [],
        )

    @classmethod
    def invalid(cls, validation: ValidationResult):
        return cls.failed(
            ErrorKind.VALIDATION_FAILED,
            validation.message or "Invalid input",
            validation.errors,
        )


@dataclass
class UserResult(OperationResult):
    user: Optional[User] = None


@dataclass
class AuthResult(OperationResult):
    """Result of register/login: the user plus a freshly issued token."""

    user: Optional[User] = None
    token: Optional[str] = None


@dataclass
class WorkoutResult(OperationResult):
    workout: Optional[Workout] = None


@dataclass
class LogResult(OperationResult):
    log: Optional[Log] = None


@dataclass
class LogPageResult(OperationResult):
    page: Optional[Page[Log]] = None


@dataclass
class DeleteResult(OperationResult):
    deleted_id: Optional[str] = None
