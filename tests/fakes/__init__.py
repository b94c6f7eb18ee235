"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import create_fake_store

    store = create_fake_store()
    alex = store.add_user(name="Alex", email="alex@example.com", password="secret1")
    store.workouts.seed([{"name": "Squat", "category": "Legs", "created_by": alex.id}])
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import uuid

from backend.auth import hash_password
from domain.models import User

from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.log_repository import FakeLogRepository


# =============================================================================
# Factory Functions
# =============================================================================


@dataclass
class FakeStore:
    """The three fakes wired together so joins resolve across them."""

    users: FakeUserRepository = field(default_factory=FakeUserRepository)
    workouts: Optional[FakeWorkoutRepository] = None
    logs: Optional[FakeLogRepository] = None

    def __post_init__(self):
        if self.workouts is None:
            self.workouts = FakeWorkoutRepository(self.users)
        if self.logs is None:
            self.logs = FakeLogRepository(self.workouts, self.users)

    def add_user(
        self,
        *,
        name: str = "Test User",
        email: Optional[str] = None,
        password: Optional[str] = None,
        **extra: Any,
    ) -> User:
        """
        Seed one user and return it.

        Hashing is skipped unless ``password`` is given, keeping bcrypt out
        of tests that never log in.
        """
        user_id = extra.pop("id", None) or str(uuid.uuid4())
        row: Dict[str, Any] = {
            "id": user_id,
            "name": name,
            "email": email or f"{user_id[:8]}@example.com",
            **extra,
        }
        if password is not None:
            row["password_hash"] = hash_password(password)
        self.users.seed([row])
        return self.users.get_by_id(user_id)

    def reset(self) -> None:
        self.logs.reset()
        self.workouts.reset()
        self.users.reset()


def create_fake_store() -> FakeStore:
    """Create an empty, fully wired FakeStore."""
    return FakeStore()


def create_workout_repo(
    *,
    owner_id: str = "test_user",
    num_workouts: int = 0,
    users: Optional[FakeUserRepository] = None,
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Args:
        owner_id: Creator ID for generated workouts
        num_workouts: Number of sample workouts to create

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository(users)
    workouts: List[Dict[str, Any]] = [
        {
            "name": f"Test Workout {i + 1}",
            "category": "Legs",
            "sets": 3,
            "reps": 10,
            "created_by": owner_id,
        }
        for i in range(num_workouts)
    ]
    repo.seed(workouts)
    return repo


__all__ = [
    # Fakes
    "FakeUserRepository",
    "FakeWorkoutRepository",
    "FakeLogRepository",
    # Factories
    "FakeStore",
    "create_fake_store",
    "create_workout_repo",
]
