"""
Log Repository Interface (Port).

This module defines the abstract interface for workout log persistence.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from domain.models import Log, LogDraft, Page, PageRequest


@dataclass(frozen=True)
class LogFilters:
    """Equality filters for listing logs. None means "any"."""

    user_id: Optional[str] = None
    is_shared: Optional[bool] = None


class LogRepository(Protocol):
    """
    Abstract interface for log persistence operations.

    Returned logs have ``workout`` and ``user`` populated when the
    referenced documents still exist.
    """

    def create(self, draft: LogDraft, owner_id: str) -> Log:
        """Persist a new log owned by ``owner_id``."""
        ...

    def get_by_id(self, log_id: str) -> Optional[Log]:
        """Get a single log by ID, or None if not found."""
        ...

    def update(self, log_id: str, changes: Dict[str, Any]) -> Optional[Log]:
        """Merge ``changes`` into a stored log. None if it no longer exists."""
        ...

    def delete(self, log_id: str) -> bool:
        """Delete a log. Returns False if it did not exist."""
        ...

    def list(self, filters: LogFilters, page: PageRequest) -> Page[Log]:
        """List logs matching ``filters``, most recently completed first."""
        ...
