"""
Logs Use Case.

Workout logs belong to the user who recorded them. The owner sees all of
their logs; everyone else sees a log only once it is shared. The shared
feed lists every shared log across all users.
"""
import logging
from typing import Any, Dict

from application.authorization import AuthorizationKernel, RequestContext
from application.ports import LogFilters, LogRepository, WorkoutRepository
from application.use_cases.results import (
    DeleteResult,
    ErrorKind,
    LogPageResult,
    LogResult,
)
from domain.models import LogDraft, PageRequest
from domain.validation import validate_log

logger = logging.getLogger(__name__)

LOG_NOT_FOUND = "Log not found"


class LogsUseCase:
    """Use case for workout log operations."""

    def __init__(self, log_repo: LogRepository, workout_repo: WorkoutRepository):
        """
        Initialize with required dependencies.

        Args:
            log_repo: Repository for log persistence
            workout_repo: Repository used to check referenced workouts exist
        """
        self._log_repo = log_repo
        self._workout_repo = workout_repo

    def list_logs(
        self,
        ctx: RequestContext,
        page: PageRequest,
        *,
        shared: bool = False,
    ) -> LogPageResult:
        """
        List the caller's own logs, or the shared community feed.

        Args:
            ctx: Request context (must be authenticated)
            page: Requested page
            shared: When True, list shared logs from every user

        Returns:
            LogPageResult with logs ordered by completion time, newest first
        """
        if not ctx.is_authenticated:
            return LogPageResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)

        if shared:
            filters = LogFilters(is_shared=True)
        else:
            filters = LogFilters(user_id=ctx.user_id)
        return LogPageResult(success=True, page=self._log_repo.list(filters, page))

    def get_log(self, ctx: RequestContext, log_id: str) -> LogResult:
        if not ctx.is_authenticated:
            return LogResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)

        log = self._log_repo.get_by_id(log_id)
        if log is None:
            return LogResult.failed(ErrorKind.NOT_FOUND, LOG_NOT_FOUND)

        if not AuthorizationKernel.assert_visibility(log, ctx.identity).allowed:
            return LogResult.failed(ErrorKind.FORBIDDEN, "Not authorized to view this log")

        return LogResult(success=True, log=log)

    def create_log(self, ctx: RequestContext, fields: Dict[str, Any]) -> LogResult:
        """Validate and persist a log of an existing workout."""
        if not ctx.is_authenticated:
            return LogResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)

        validation = validate_log(fields)
        if not validation.ok:
            return LogResult.invalid(validation)

        workout_id = validation.values["workout_id"]
        if self._workout_repo.get_by_id(workout_id) is None:
            return LogResult.failed(ErrorKind.VALIDATION_FAILED, "Workout does not exist")

        log = self._log_repo.create(LogDraft(**validation.values), ctx.user_id)
        logger.info(f"Log created: {log.id} for workout {workout_id} by {ctx.user_id}")
        return LogResult(success=True, log=log)

    def update_log(self, ctx: RequestContext, log_id: str, fields: Dict[str, Any]) -> LogResult:
        """Merge the fields present in ``fields`` into one of the caller's logs."""
        if not ctx.is_authenticated:
            return LogResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)

        existing = self._log_repo.get_by_id(log_id)
        if existing is None:
            return LogResult.failed(ErrorKind.NOT_FOUND, LOG_NOT_FOUND)

        if not AuthorizationKernel.assert_ownership(existing, ctx.identity).allowed:
            return LogResult.failed(ErrorKind.FORBIDDEN, "Not authorized to edit this log")

        validation = validate_log(fields, partial=True)
        if not validation.ok:
            return LogResult.invalid(validation)

        if not validation.values:
            return LogResult(success=True, log=existing)

        updated = self._log_repo.update(log_id, validation.values)
        if updated is None:
            return LogResult.failed(ErrorKind.NOT_FOUND, LOG_NOT_FOUND)

        logger.info(f"Log {log_id} updated: {sorted(validation.values)}")
        return LogResult(success=True, log=updated)

    def delete_log(self, ctx: RequestContext, log_id: str) -> DeleteResult:
        if not ctx.is_authenticated:
            return DeleteResult.failed(ErrorKind.UNAUTHENTICATED, ctx.unauthenticated_message)

        existing = self._log_repo.get_by_id(log_id)
        if existing is None:
            return DeleteResult.failed(ErrorKind.NOT_FOUND, LOG_NOT_FOUND)

        if not AuthorizationKernel.assert_ownership(existing, ctx.identity).allowed:
            return DeleteResult.failed(ErrorKind.FORBIDDEN, "Not authorized to delete this log")

        if not self._log_repo.delete(log_id):
            return DeleteResult.failed(ErrorKind.NOT_FOUND, LOG_NOT_FOUND)

        logger.info(f"Log {log_id} deleted by {ctx.user_id}")
        return DeleteResult(success=True, deleted_id=log_id)
