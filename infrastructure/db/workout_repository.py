"""
Supabase implementation of WorkoutRepository.

This module provides the concrete Supabase implementation for the workout
catalog (table ``workouts``). The creator of each workout is attached on
read with one batched lookup against ``users`` per query.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import RepositoryError
from application.ports.workout_repository import WorkoutFilters
from domain.models import Page, PageRequest, Pagination, Workout, WorkoutDraft, WorkoutSummary
from infrastructure.db.common import fetch_page, is_valid_id, now_iso, serialize
from infrastructure.db.user_repository import SupabaseUserRepository

logger = logging.getLogger(__name__)


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client
        self._users = SupabaseUserRepository(client)

    # =========================================================================
    # Row Mapping
    # =========================================================================

    def _to_workouts(self, rows: List[Dict[str, Any]]) -> List[Workout]:
        creators = self._users.get_summaries([str(row["created_by"]) for row in rows])
        workouts = []
        for row in rows:
            owner_id = str(row["created_by"])
            workouts.append(Workout(
                id=str(row["id"]),
                name=row["name"],
                category=row["category"],
                sets=row["sets"],
                reps=row["reps"],
                notes=row.get("notes") or "",
                reference_link=row.get("reference_link") or "",
                created_by=owner_id,
                creator=creators.get(owner_id),
                created_at=row.get("created_at"),
                updated_at=row.get("updated_at"),
            ))
        return workouts

    # =========================================================================
    # CRUD Operations
    # =========================================================================

    def create(self, draft: WorkoutDraft, owner_id: str) -> Workout:
        timestamp = now_iso()
        record = draft.model_dump(mode="json")
        record.update({
            "created_by": owner_id,
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        try:
            result = self._client.table("workouts").insert(record).execute()
        except Exception as e:
            logger.error(f"Failed to create workout: {e}")
            raise RepositoryError("Failed to create workout") from e

        if not result.data:
            raise RepositoryError("Insert into workouts returned no row")
        return self._to_workouts(result.data)[0]

    def get_by_id(self, workout_id: str) -> Optional[Workout]:
        if not is_valid_id(workout_id):
            return None
        try:
            result = self._client.table("workouts") \
                .select("*") \
                .eq("id", workout_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to get workout {workout_id}: {e}")
            raise RepositoryError("Failed to get workout") from e

        if not result.data:
            return None
        return self._to_workouts(result.data)[0]

    def update(self, workout_id: str, changes: Dict[str, Any]) -> Optional[Workout]:
        if not is_valid_id(workout_id):
            return None
        payload = serialize(changes)
        payload["updated_at"] = now_iso()
        try:
            result = self._client.table("workouts") \
                .update(payload) \
                .eq("id", workout_id) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to update workout {workout_id}: {e}")
            raise RepositoryError("Failed to update workout") from e

        if not result.data:
            return None
        return self._to_workouts(result.data)[0]

    def delete(self, workout_id: str) -> bool:
        if not is_valid_id(workout_id):
            return False
        try:
            result = self._client.table("workouts") \
                .delete() \
                .eq("id", workout_id) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to delete workout {workout_id}: {e}")
            raise RepositoryError("Failed to delete workout") from e
        return bool(result.data)

    def list(self, filters: WorkoutFilters, page: PageRequest) -> Page[Workout]:
        conditions: Dict[str, Any] = {}
        if filters.category:
            conditions["category"] = filters.category
        if filters.created_by:
            if not is_valid_id(filters.created_by):
                return Page(items=[], pagination=Pagination.build(page, 0))
            conditions["created_by"] = filters.created_by

        try:
            rows, total = fetch_page(self._client, "workouts", conditions, "created_at", page)
        except Exception as e:
            logger.error(f"Failed to list workouts: {e}")
            raise RepositoryError("Failed to list workouts") from e

        return Page(items=self._to_workouts(rows), pagination=Pagination.build(page, total))

    def get_summaries(self, workout_ids: List[str]) -> Dict[str, WorkoutSummary]:
        ids = sorted({wid for wid in workout_ids if is_valid_id(wid)})
        if not ids:
            return {}
        try:
            result = self._client.table("workouts") \
                .select("id, name, category, sets, reps") \
                .in_("id", ids) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to fetch workout summaries: {e}")
            raise RepositoryError("Failed to fetch workouts") from e

        return {
            str(row["id"]): WorkoutSummary(
                id=str(row["id"]),
                name=row["name"],
                category=row["category"],
                sets=row["sets"],
                reps=row["reps"],
            )
            for row in result.data or []
        }
