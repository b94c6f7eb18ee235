"""
Profile Use Case.

Reads and updates the authenticated user's own profile.
"""
import logging
from typing import Any, Dict

from application.authorization import RequestContext
from application.ports import UserRepository
from application.use_cases.results import ErrorKind, UserResult
from domain.validation import validate_profile

logger = logging.getLogger(__name__)


class ProfileUseCase:
    """Use case for the current user's profile."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    def get_current(self, ctx: RequestContext) -> UserResult:
        if not ctx.is_authenticated:
            return UserResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)
        return UserResult(success=True, user=ctx.identity)

    def update(self, ctx: RequestContext, fields: Dict[str, Any]) -> UserResult:
        """
        Merge ``name`` / ``fitness_goals`` into the current user's profile.

        Args:
            ctx: Request context (must be authenticated)
            fields: Fields present in the request body

        Returns:
            UserResult with the updated user
        """
        if not ctx.is_authenticated:
            return UserResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)

        validation = validate_profile(fields)
        if not validation.ok:
            return UserResult.invalid(validation)

        if not validation.values:
            return UserResult(success=True, user=ctx.identity)

        updated = self._user_repo.update_profile(ctx.user_id, validation.values)
        if updated is None:
            return UserResult.failed(ErrorKind.NOT_FOUND, "User not found")

        logger.info(f"Profile updated for user {updated.id}: {sorted(validation.values)}")
        return UserResult(success=True, user=updated)
