"""
Unit tests for WorkoutsUseCase.

Checks are ordered authenticate -> fetch -> authorize -> validate -> act.
"""

import pytest

from application.authorization import RequestContext
from application.use_cases import ErrorKind, WorkoutsUseCase
from domain.models import PageRequest
from tests.fakes import create_fake_store

pytestmark = pytest.mark.unit

SQUAT = {"name": "Squat", "category": "Legs", "sets": 3, "reps": 12}


@pytest.fixture
def store():
    return create_fake_store()


@pytest.fixture
def alex(store):
    return store.add_user(name="Alex", email="alex@x.com")


@pytest.fixture
def sam(store):
    return store.add_user(name="Sam", email="sam@x.com")


@pytest.fixture
def use_case(store):
    return WorkoutsUseCase(workout_repo=store.workouts)


@pytest.fixture
def squat(use_case, alex):
    return use_case.create_workout(RequestContext(identity=alex), dict(SQUAT)).workout


class TestCreateWorkout:
    def test_create_populates_creator(self, use_case, alex):
        result = use_case.create_workout(RequestContext(identity=alex), dict(SQUAT))

        assert result.success
        assert result.workout.id
        assert result.workout.created_by == alex.id
        assert result.workout.creator.name == "Alex"
        assert result.workout.creator.email == "alex@x.com"

    def test_requires_identity(self, use_case):
        result = use_case.create_workout(RequestContext(), dict(SQUAT))
        assert result.error_kind is ErrorKind.UNAUTHENTICATED

    def test_invalid_input_is_not_persisted(self, use_case, alex, store):
        result = use_case.create_workout(RequestContext(identity=alex), {**SQUAT, "sets": 0})

        assert result.error_kind is ErrorKind.VALIDATION_FAILED
        assert result.error == "Sets must be at least 1"
        assert store.workouts.get_all() == []


class TestUpdateWorkout:
    def test_merge_only_sent_fields(self, use_case, alex, squat):
        use_case.update_workout(RequestContext(identity=alex), squat.id, {"notes": "deep"})

        result = use_case.update_workout(RequestContext(identity=alex), squat.id, {"sets": 5})

        assert result.success
        assert result.workout.sets == 5
        assert result.workout.notes == "deep"
        assert result.workout.reps == 12

    def test_empty_string_clears_notes(self, use_case, alex, squat):
        use_case.update_workout(RequestContext(identity=alex), squat.id, {"notes": "deep"})

        result = use_case.update_workout(RequestContext(identity=alex), squat.id, {"notes": ""})

        assert result.workout.notes == ""

    def test_empty_change_set_is_noop(self, use_case, alex, squat):
        result = use_case.update_workout(RequestContext(identity=alex), squat.id, {})

        assert result.success
        assert result.workout.model_dump() == squat.model_dump()

    def test_missing_workout_is_404_before_validation(self, use_case, alex):
        result = use_case.update_workout(RequestContext(identity=alex), "missing", {"sets": 0})
        assert result.error_kind is ErrorKind.NOT_FOUND

    def test_non_owner_is_403_before_validation(self, use_case, sam, squat):
        result = use_case.update_workout(RequestContext(identity=sam), squat.id, {"sets": 0})
        assert result.error_kind is ErrorKind.FORBIDDEN
        assert result.error == "Not authorized to edit this workout"

    def test_unauthenticated_is_401_first(self, use_case):
        result = use_case.update_workout(RequestContext(token_present=True), "missing", {})
        assert result.error_kind is ErrorKind.UNAUTHENTICATED
        assert result.error == "Invalid or expired token"

    def test_owner_invalid_change_is_400(self, use_case, alex, squat):
        result = use_case.update_workout(RequestContext(identity=alex), squat.id, {"reps": 1001})
        assert result.error_kind is ErrorKind.VALIDATION_FAILED


class TestDeleteWorkout:
    def test_owner_deletes(self, use_case, alex, squat):
        result = use_case.delete_workout(RequestContext(identity=alex), squat.id)

        assert result.success
        assert result.deleted_id == squat.id
        assert use_case.get_workout(squat.id).error_kind is ErrorKind.NOT_FOUND

    def test_non_owner_cannot_delete(self, use_case, sam, squat):
        result = use_case.delete_workout(RequestContext(identity=sam), squat.id)

        assert result.error_kind is ErrorKind.FORBIDDEN
        assert use_case.get_workout(squat.id).success


class TestListWorkouts:
    def test_all_means_no_filter(self, use_case, store, alex):
        store.workouts.seed([
            {"name": "Run", "category": "Cardio", "created_by": alex.id},
            {"name": "Curl", "category": "Arms", "created_by": alex.id},
        ])

        page = use_case.list_workouts(PageRequest(), category="All")

        assert page.pagination.total == 2

    def test_category_filter(self, use_case, store, alex):
        store.workouts.seed([
            {"name": "Run", "category": "Cardio", "created_by": alex.id},
            {"name": "Curl", "category": "Arms", "created_by": alex.id},
        ])

        page = use_case.list_workouts(PageRequest(), category="Cardio")

        assert [w.name for w in page.items] == ["Run"]

    def test_created_by_filter(self, use_case, store, alex, sam):
        store.workouts.seed([
            {"name": "Run", "category": "Cardio", "created_by": alex.id},
            {"name": "Row", "category": "Cardio", "created_by": sam.id},
        ])

        page = use_case.list_workouts(PageRequest(), created_by=sam.id)

        assert [w.name for w in page.items] == ["Row"]
