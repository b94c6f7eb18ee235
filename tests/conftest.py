"""
Shared pytest fixtures.

Every API test runs against ``create_app`` with the repository providers
overridden by the in-memory fakes, so no Supabase project is needed.

Usage:
    def test_something(client_for, store):
        alex = store.add_user(name="Alex")
        response = client_for(alex).get("/api/logs")
"""

from typing import Callable, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api import deps
from backend.auth import AUTH_COOKIE_NAME, TokenService
from backend.main import create_app
from backend.settings import Settings
from domain.models import User
from tests.fakes import FakeStore, create_fake_store

TEST_JWT_SECRET = "test-jwt-secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", jwt_secret=TEST_JWT_SECRET, _env_file=None)


@pytest.fixture
def token_service(settings) -> TokenService:
    return TokenService(settings.jwt_secret, ttl=settings.token_ttl)


@pytest.fixture
def store() -> FakeStore:
    """Fresh, wired fake repositories for each test."""
    return create_fake_store()


@pytest.fixture
def app(settings, store) -> FastAPI:
    """App instance with settings and repositories overridden."""
    application = create_app(settings=settings)
    application.dependency_overrides[deps.get_settings] = lambda: settings
    application.dependency_overrides[deps.get_user_repo] = lambda: store.users
    application.dependency_overrides[deps.get_workout_repo] = lambda: store.workouts
    application.dependency_overrides[deps.get_log_repo] = lambda: store.logs
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Anonymous client (no auth cookie)."""
    return TestClient(app)


@pytest.fixture
def client_for(app, token_service) -> Callable[[Optional[User]], TestClient]:
    """
    Build a client signed in as ``user`` via a directly issued token.

    Skips the login round-trip so bcrypt only runs in the auth tests.
    """

    def _client_for(user: Optional[User] = None) -> TestClient:
        if user is None:
            return TestClient(app)
        return TestClient(app, cookies={AUTH_COOKIE_NAME: token_service.issue(user.id)})

    return _client_for
