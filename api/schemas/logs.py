"""
Log Schemas.

``workoutId`` is read on create only; a log cannot be moved to another
workout after the fact.
"""

from typing import Any

from pydantic import Field

from api.schemas.common import RequestModel


class LogCreateRequest(RequestModel):
    """Request body for POST /api/logs."""
    workout_id: Any = None
    completed_at: Any = Field(
        default=None,
        description="ISO-8601 completion date/time",
    )
    duration: Any = Field(default=None, description="Minutes, 1 to 1440")
    notes: Any = None
    is_shared: Any = None


class LogUpdateRequest(RequestModel):
    """Request body for PUT /api/logs/{id}. Only sent fields change."""
    completed_at: Any = None
    duration: Any = None
    notes: Any = None
    is_shared: Any = None
