"""
User Repository Interface (Port).

This module defines the abstract interface for user persistence operations.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from typing import Any, Dict, List, Optional, Protocol

from domain.models import User, UserCredentials, UserSummary


class UserRepository(Protocol):
    """
    Abstract interface for user persistence.

    Emails are stored lower-cased; lookups by email are case-insensitive.
    Only ``get_credentials`` ever returns the password hash.
    """

    def create(
        self,
        name: str,
        email: str,
        password_hash: str,
    ) -> User:
        """
        Create a new user.

        Args:
            name: Display name
            email: Normalized (lower-cased) email address
            password_hash: bcrypt hash of the password

        Returns:
            The created user

        Raises:
            RepositoryError: If the store rejects the write (e.g. duplicate email)
        """
        ...

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID, or None if it does not exist."""
        ...

    def get_credentials(self, email: str) -> Optional[UserCredentials]:
        """Get login material for an email address, or None if unknown."""
        ...

    def email_exists(self, email: str) -> bool:
        """Check whether an email address is already registered."""
        ...

    def update_profile(
        self,
        user_id: str,
        changes: Dict[str, Any],
    ) -> Optional[User]:
        """
        Apply profile changes (``name``, ``fitness_goals``).

        Args:
            user_id: User to update
            changes: Only the fields to change

        Returns:
            Updated user, or None if the user no longer exists
        """
        ...

    def get_summaries(self, user_ids: List[str]) -> Dict[str, UserSummary]:
        """
        Batch-fetch reduced user views for denormalized references.

        Returns:
            Dict mapping user ID to summary; unknown IDs are omitted
        """
        ...
