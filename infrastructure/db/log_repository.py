"""
Supabase implementation of LogRepository.

Logs live in table ``logs``. ``likes`` and ``comments`` are JSON columns.
The referenced workout and the owning user are attached on read; a log
whose workout has since been deleted comes back with ``workout`` unset.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import RepositoryError
from application.ports.log_repository import LogFilters
from domain.models import Log, LogComment, LogDraft, Page, PageRequest, Pagination, UserSummary
from infrastructure.db.common import fetch_page, is_valid_id, now_iso, serialize
from infrastructure.db.user_repository import SupabaseUserRepository
from infrastructure.db.workout_repository import SupabaseWorkoutRepository

logger = logging.getLogger(__name__)


class SupabaseLogRepository:
    """Supabase implementation of LogRepository protocol."""

    def __init__(self, client: Client):
        self._client = client
        self._users = SupabaseUserRepository(client)
        self._workouts = SupabaseWorkoutRepository(client)

    def _to_logs(self, rows: List[Dict[str, Any]]) -> List[Log]:
        workouts = self._workouts.get_summaries([str(row["workout_id"]) for row in rows])
        users = self._users.get_summaries([str(row["user_id"]) for row in rows])
        logs = []
        for row in rows:
            owner = users.get(str(row["user_id"]))
            logs.append(Log(
                id=str(row["id"]),
                workout_id=str(row["workout_id"]),
                user_id=str(row["user_id"]),
                completed_at=row["completed_at"],
                duration=row["duration"],
                notes=row.get("notes") or "",
                is_shared=bool(row.get("is_shared")),
                likes=[str(uid) for uid in row.get("likes") or []],
                comments=[LogComment.model_validate(c) for c in row.get("comments") or []],
                workout=workouts.get(str(row["workout_id"])),
                # Log views expose the owner's name only
                user=UserSummary(id=owner.id, name=owner.name) if owner else None,
                created_at=row.get("created_at"),
                updated_at=row.get("updated_at"),
            ))
        return logs

    def create(self, draft: LogDraft, owner_id: str) -> Log:
        timestamp = now_iso()
        record = serialize(draft.model_dump())
        record.update({
            "user_id": owner_id,
            "likes": [],
            "comments": [],
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        try:
            result = self._client.table("logs").insert(record).execute()
        except Exception as e:
            logger.error(f"Failed to create log: {e}")
            raise RepositoryError("Failed to create log") from e

        if not result.data:
            raise RepositoryError("Insert into logs returned no row")
        return self._to_logs(result.data)[0]

    def get_by_id(self, log_id: str) -> Optional[Log]:
        if not is_valid_id(log_id):
            return None
        try:
            result = self._client.table("logs") \
                .select("*") \
                .eq("id", log_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to get log {log_id}: {e}")
            raise RepositoryError("Failed to get log") from e

        if not result.data:
            return None
        return self._to_logs(result.data)[0]

    def update(self, log_id: str, changes: Dict[str, Any]) -> Optional[Log]:
        if not is_valid_id(log_id):
            return None
        payload = serialize(changes)
        payload["updated_at"] = now_iso()
        try:
            result = self._client.table("logs") \
                .update(payload) \
                .eq("id", log_id) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to update log {log_id}: {e}")
            raise RepositoryError("Failed to update log") from e

        if not result.data:
            return None
        return self._to_logs(result.data)[0]

    def delete(self, log_id: str) -> bool:
        if not is_valid_id(log_id):
            return False
        try:
            result = self._client.table("logs") \
                .delete() \
                .eq("id", log_id) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to delete log {log_id}: {e}")
            raise RepositoryError("Failed to delete log") from e
        return bool(result.data)

    def list(self, filters: LogFilters, page: PageRequest) -> Page[Log]:
        conditions: Dict[str, Any] = {}
        if filters.user_id is not None:
            if not is_valid_id(filters.user_id):
                return Page(items=[], pagination=Pagination.build(page, 0))
            conditions["user_id"] = filters.user_id
        if filters.is_shared is not None:
            conditions["is_shared"] = filters.is_shared

        try:
            rows, total = fetch_page(self._client, "logs", conditions, "completed_at", page)
        except Exception as e:
            logger.error(f"Failed to list logs: {e}")
            raise RepositoryError("Failed to list logs") from e

        return Page(items=self._to_logs(rows), pagination=Pagination.build(page, total))
