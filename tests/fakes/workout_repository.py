"""
Fake Workout Repository for testing.

This module provides an in-memory implementation of WorkoutRepository
for fast, isolated testing without database dependencies.
"""
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
import itertools
import uuid
import copy

from application.ports import WorkoutFilters
from domain.models import Page, PageRequest, Pagination, Workout, WorkoutDraft, WorkoutSummary
from tests.fakes.user_repository import FakeUserRepository


class FakeWorkoutRepository:
    """
    In-memory fake implementation of WorkoutRepository for testing.

    Stores workouts in a dict keyed by workout ID. Creators are resolved
    against the given FakeUserRepository, like the real join.

    Usage:
        users = FakeUserRepository()
        repo = FakeWorkoutRepository(users)
        repo.seed([{"id": "w1", "name": "Squat", "created_by": "u1", ...}])
    """

    def __init__(self, users: Optional[FakeUserRepository] = None):
        """Initialize with empty storage."""
        self._workouts: Dict[str, Dict[str, Any]] = {}
        self._users = users or FakeUserRepository()
        self._sequence = itertools.count()

    def reset(self) -> None:
        """Clear all stored workouts."""
        self._workouts.clear()

    def seed(self, workouts: List[Dict[str, Any]]) -> None:
        """
        Seed the repository with test data.

        Args:
            workouts: List of workout dicts. Must include 'created_by'.
        """
        now = datetime.now(timezone.utc)
        for workout in workouts:
            workout_id = workout.get("id") or str(uuid.uuid4())
            self._workouts[workout_id] = {
                "name": "Test Workout",
                "category": "Other",
                "sets": 3,
                "reps": 10,
                "notes": "",
                "reference_link": "",
                "created_at": now,
                "updated_at": now,
                **workout,
                "id": workout_id,
                "_seq": next(self._sequence),
            }

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all stored workouts (test helper)."""
        return [copy.deepcopy(row) for row in self._workouts.values()]

    def _to_workout(self, row: Dict[str, Any]) -> Workout:
        creators = self._users.get_summaries([row["created_by"]])
        fields = {k: v for k, v in row.items() if not k.startswith("_")}
        return Workout(**copy.deepcopy(fields), creator=creators.get(row["created_by"]))

    # =========================================================================
    # WorkoutRepository Protocol Methods
    # =========================================================================

    def create(self, draft: WorkoutDraft, owner_id: str) -> Workout:
        now = datetime.now(timezone.utc)
        workout_id = str(uuid.uuid4())
        row = {
            **draft.model_dump(mode="json"),
            "id": workout_id,
            "created_by": owner_id,
            "created_at": now,
            "updated_at": now,
            "_seq": next(self._sequence),
        }
        self._workouts[workout_id] = row
        return self._to_workout(row)

    def get_by_id(self, workout_id: str) -> Optional[Workout]:
        row = self._workouts.get(workout_id)
        return self._to_workout(row) if row else None

    def update(self, workout_id: str, changes: Dict[str, Any]) -> Optional[Workout]:
        row = self._workouts.get(workout_id)
        if row is None:
            return None
        row.update(copy.deepcopy(changes))
        row["updated_at"] = datetime.now(timezone.utc)
        return self._to_workout(row)

    def delete(self, workout_id: str) -> bool:
        return self._workouts.pop(workout_id, None) is not None

    def list(self, filters: WorkoutFilters, page: PageRequest) -> Page[Workout]:
        rows = [
            row for row in self._workouts.values()
            if (filters.category is None or row["category"] == filters.category)
            and (filters.created_by is None or row["created_by"] == filters.created_by)
        ]
        rows.sort(key=lambda r: (r["created_at"], r["_seq"]), reverse=True)
        window = rows[page.skip:page.skip + page.limit]
        return Page(
            items=[self._to_workout(row) for row in window],
            pagination=Pagination.build(page, len(rows)),
        )

    def get_summaries(self, workout_ids: List[str]) -> Dict[str, WorkoutSummary]:
        return {
            wid: self._to_workout(self._workouts[wid]).summary()
            for wid in set(workout_ids)
            if wid in self._workouts
        }
