"""
Supabase implementation of UserRepository.

This module provides the concrete Supabase implementation for user
persistence (table ``users``). The ``email`` column carries a unique index
and is always written lower-cased.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import RepositoryError
from domain.models import User, UserCredentials, UserSummary
from infrastructure.db.common import is_valid_id, serialize

logger = logging.getLogger(__name__)

PUBLIC_COLUMNS = "id, name, email, fitness_goals, created_at"


def _row_to_user(row: Dict[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        name=row["name"],
        email=row["email"],
        fitness_goals=row.get("fitness_goals") or "",
        created_at=row.get("created_at"),
    )


class SupabaseUserRepository:
    """
    Supabase implementation of UserRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def create(self, name: str, email: str, password_hash: str) -> User:
        try:
            result = self._client.table("users").insert({
                "name": name,
                "email": email.lower(),
                "password_hash": password_hash,
                "fitness_goals": "",
            }).execute()
        except Exception as e:
            logger.error(f"Failed to create user: {e}")
            raise RepositoryError("Failed to create user") from e

        if not result.data:
            raise RepositoryError("Insert into users returned no row")
        return _row_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        if not is_valid_id(user_id):
            return None
        try:
            result = self._client.table("users") \
                .select(PUBLIC_COLUMNS) \
                .eq("id", user_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to get user {user_id}: {e}")
            raise RepositoryError("Failed to get user") from e
        return _row_to_user(result.data[0]) if result.data else None

    def get_credentials(self, email: str) -> Optional[UserCredentials]:
        try:
            result = self._client.table("users") \
                .select("id, email, password_hash") \
                .eq("email", email.lower()) \
                .limit(1) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to look up credentials: {e}")
            raise RepositoryError("Failed to look up credentials") from e

        if not result.data:
            return None
        row = result.data[0]
        return UserCredentials(
            user_id=str(row["id"]),
            email=row["email"],
            password_hash=row["password_hash"],
        )

    def email_exists(self, email: str) -> bool:
        try:
            result = self._client.table("users") \
                .select("id", count="exact") \
                .eq("email", email.lower()) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to check email: {e}")
            raise RepositoryError("Failed to check email") from e
        return bool(result.count)

    def update_profile(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        if not is_valid_id(user_id):
            return None
        try:
            result = self._client.table("users") \
                .update(serialize(changes)) \
                .eq("id", user_id) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to update profile {user_id}: {e}")
            raise RepositoryError("Failed to update profile") from e

        if not result.data:
            return None
        return _row_to_user(result.data[0])

    def get_summaries(self, user_ids: List[str]) -> Dict[str, UserSummary]:
        ids = sorted({uid for uid in user_ids if is_valid_id(uid)})
        if not ids:
            return {}
        try:
            result = self._client.table("users") \
                .select("id, name, email") \
                .in_("id", ids) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to fetch user summaries: {e}")
            raise RepositoryError("Failed to fetch users") from e

        return {
            str(row["id"]): UserSummary(id=str(row["id"]), name=row["name"], email=row.get("email"))
            for row in result.data or []
        }
