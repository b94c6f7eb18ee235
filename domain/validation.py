"""
Field-level validation for workout, log, profile and registration input.

The constraints themselves live on the pydantic write models in
``domain.models`` (``WorkoutDraft``/``WorkoutPatch``, ``LogDraft``/``LogPatch``,
``RegistrationDraft``, ``ProfilePatch``, ``CommentDraft``). This module runs
``model_validate`` once at the boundary and turns any ``ValidationError``
into a ``ValidationResult``: the cleaned values plus a list of
``FieldError`` entries carrying user-facing messages. Validators never
raise for bad input, so callers can turn a failure into a 400 response
before any persistence call.

Every validator takes a plain mapping of snake_case field names. With
``partial=True`` the patch model is used and only the keys present in the
mapping are checked and returned, which is how merge updates distinguish
"not sent" from "sent as empty/false".
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from domain.models.log import (
    COMMENT_MAX_LENGTH,
    CommentDraft,
    LogDraft,
    LogPatch,
    parse_datetime,
)
from domain.models.user import (
    FITNESS_GOALS_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    USER_NAME_MAX_LENGTH,
    ProfilePatch,
    RegistrationDraft,
    normalize_email,
)
from domain.models.workout import (
    NOTES_MAX_LENGTH,
    REPS_MAX,
    REPS_MIN,
    SETS_MAX,
    SETS_MIN,
    WORKOUT_NAME_MAX_LENGTH,
    WorkoutCategory,
    WorkoutDraft,
    WorkoutPatch,
)

__all__ = [
    "FieldError",
    "ValidationResult",
    "normalize_email",
    "parse_datetime",
    "validate_comment",
    "validate_log",
    "validate_profile",
    "validate_registration",
    "validate_workout",
]

# Message table keys besides pydantic error types
REQUIRED = "required"
OTHER = "*"

NOTES_MESSAGES = {
    "string_too_long": f"Notes cannot be more than {NOTES_MAX_LENGTH} characters",
    OTHER: "Notes must be text",
}

WORKOUT_MESSAGES: Dict[str, Dict[str, str]] = {
    "name": {
        REQUIRED: "Workout name is required",
        "string_too_long": f"Workout name cannot be more than {WORKOUT_NAME_MAX_LENGTH} characters",
        OTHER: "Workout name must be text",
    },
    "category": {
        REQUIRED: "Category is required",
        OTHER: f"Category must be one of: {', '.join(WorkoutCategory.values())}",
    },
    "sets": {
        REQUIRED: "Number of sets is required",
        "greater_than_equal": f"Sets must be at least {SETS_MIN}",
        "less_than_equal": f"Sets cannot be more than {SETS_MAX}",
        OTHER: "Number of sets must be a whole number",
    },
    "reps": {
        REQUIRED: "Number of reps is required",
        "greater_than_equal": f"Reps must be at least {REPS_MIN}",
        "less_than_equal": f"Reps cannot be more than {REPS_MAX}",
        OTHER: "Number of reps must be a whole number",
    },
    "notes": NOTES_MESSAGES,
    "reference_link": {OTHER: "Please enter a valid URL"},
}

LOG_MESSAGES: Dict[str, Dict[str, str]] = {
    "workout_id": {REQUIRED: "Workout ID is required", OTHER: "Workout ID must be text"},
    "completed_at": {
        REQUIRED: "Completion date is required",
        OTHER: "Completion date must be a valid date",
    },
    "duration": {
        REQUIRED: "Duration is required",
        "greater_than_equal": "Duration must be at least 1 minute",
        "less_than_equal": "Duration cannot be more than 24 hours",
        OTHER: "Duration must be a whole number",
    },
    "notes": NOTES_MESSAGES,
    "is_shared": {OTHER: "Shared flag must be true or false"},
}

USER_MESSAGES: Dict[str, Dict[str, str]] = {
    "name": {
        REQUIRED: "Name is required",
        "string_too_long": f"Name cannot be more than {USER_NAME_MAX_LENGTH} characters",
        OTHER: "Name must be text",
    },
    "email": {OTHER: "Please enter a valid email address"},
    "password": {
        "string_too_short": f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
        OTHER: "Password must be text",
    },
    "fitness_goals": {
        "string_too_long": f"Fitness goals cannot be more than {FITNESS_GOALS_MAX_LENGTH} characters",
        OTHER: "Fitness goals must be text",
    },
}

COMMENT_MESSAGES: Dict[str, Dict[str, str]] = {
    "text": {
        REQUIRED: "Comment text is required",
        "string_too_long": f"Comment cannot be more than {COMMENT_MAX_LENGTH} characters",
        OTHER: "Comment must be text",
    },
}


@dataclass(frozen=True)
class FieldError:
    """A single violated constraint."""

    field: str
    message: str


@dataclass
class ValidationResult:
    """Cleaned values plus any constraint violations."""

    values: Dict[str, Any] = field(default_factory=dict)
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> Optional[str]:
        """Human-readable message naming the first violated constraint."""
        return self.errors[0].message if self.errors else None

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field=field_name, message=message))


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _error_key(error: Dict[str, Any]) -> str:
    if error["type"] == "missing" or _is_blank(error.get("input")):
        return REQUIRED
    return error["type"]


def _validate(
    model: Type[BaseModel],
    fields: Mapping[str, Any],
    messages: Dict[str, Dict[str, str]],
    *,
    partial: bool = False,
    required_message: Optional[str] = None,
) -> ValidationResult:
    """
    Validate ``fields`` against ``model`` and map errors to messages.

    When ``required_message`` is given, any missing or blank required field
    reports that single message instead of per-field errors.
    """
    result = ValidationResult()
    try:
        validated = model.model_validate(dict(fields))
    except ValidationError as exc:
        errors = exc.errors()
        if required_message and any(_error_key(e) == REQUIRED for e in errors):
            field_name = next(str(e["loc"][0]) for e in errors if _error_key(e) == REQUIRED)
            result.add_error(field_name, required_message)
            return result
        for error in errors:
            field_name = str(error["loc"][0]) if error["loc"] else ""
            table = messages.get(field_name, {})
            key = _error_key(error)
            result.add_error(field_name, table.get(key) or table.get(OTHER) or error["msg"])
        return result

    result.values = validated.model_dump(exclude_unset=partial)
    return result


# =============================================================================
# Workouts
# =============================================================================


def validate_workout(fields: Mapping[str, Any], *, partial: bool = False) -> ValidationResult:
    """
    Validate workout input.

    Examples:
        >>> validate_workout({"name": "Squat", "category": "Legs", "sets": 3, "reps": 12}).ok
        True
        >>> validate_workout({"sets": 0}, partial=True).message
        'Sets must be at least 1'
    """
    if partial:
        return _validate(WorkoutPatch, fields, WORKOUT_MESSAGES, partial=True)
    return _validate(
        WorkoutDraft,
        fields,
        WORKOUT_MESSAGES,
        required_message="Name, category, sets, and reps are required",
    )


# =============================================================================
# Logs
# =============================================================================


def validate_log(fields: Mapping[str, Any], *, partial: bool = False) -> ValidationResult:
    """Validate log input. ``workout_id`` is only accepted on create."""
    if partial:
        return _validate(LogPatch, fields, LOG_MESSAGES, partial=True)
    return _validate(
        LogDraft,
        fields,
        LOG_MESSAGES,
        required_message="Workout ID, completion date, and duration are required",
    )


def validate_comment(text: Any) -> ValidationResult:
    return _validate(CommentDraft, {"text": text}, COMMENT_MESSAGES)


# =============================================================================
# Users
# =============================================================================


def validate_profile(fields: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a profile update.

    A blank name is ignored rather than rejected, so clients that always
    send the name field cannot wipe it. ``fitness_goals`` applies whenever
    present, including as an empty string.
    """
    changes = {key: value for key, value in fields.items() if not (key == "name" and _is_blank(value))}
    return _validate(ProfilePatch, changes, USER_MESSAGES, partial=True)


def validate_registration(name: Any, email: Any, password: Any) -> ValidationResult:
    return _validate(
        RegistrationDraft,
        {"name": name, "email": email, "password": password},
        USER_MESSAGES,
        required_message="Name, email, and password are required",
    )
