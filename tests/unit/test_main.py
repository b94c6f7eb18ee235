"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from application.exceptions import RepositoryError
from backend.main import (
    INTERNAL_ERROR_MESSAGE,
    create_app,
    _configure_cors,
    _init_sentry,
    _log_security_warnings,
)
from backend.settings import Settings


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        """create_app() should return a FastAPI application instance."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        """create_app() should use get_settings() when no settings provided."""
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_settings = Settings(environment="test", _env_file=None)
            mock_get_settings.return_value = mock_settings

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        """create_app() should configure app title and version."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)

        assert app.title == "FitTrack API"
        assert app.version == "1.0.0"

    def test_create_app_registers_all_routes(self):
        settings = Settings(environment="test", _env_file=None)
        paths = set(create_app(settings=settings).openapi()["paths"])

        assert "/health" in paths
        assert "/api/auth/register" in paths
        assert "/api/auth/login" in paths
        assert "/api/auth/logout" in paths
        assert "/api/auth/me" in paths
        assert "/api/workouts" in paths
        assert "/api/workouts/{workout_id}" in paths
        assert "/api/logs" in paths
        assert "/api/logs/{log_id}" in paths


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        """Sentry should not be initialized when DSN is not set."""
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        """Sentry should be initialized when DSN is provided."""
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
                profiles_sample_rate=0.1,
                enable_tracing=True,
            )


@pytest.mark.unit
class TestConfigureCors:
    """Test CORS configuration."""

    def test_configure_cors_adds_middleware(self):
        """_configure_cors should add CORS middleware to the app."""
        app = FastAPI()
        initial_middleware_count = len(app.user_middleware)

        _configure_cors(app, Settings(_env_file=None))

        assert len(app.user_middleware) == initial_middleware_count + 1

    def test_configured_origin_is_allowed(self):
        settings = Settings(
            environment="test",
            cors_allowed_origins="https://fittrack.example",
            _env_file=None,
        )
        client = TestClient(create_app(settings=settings))

        response = client.get("/health", headers={"Origin": "https://fittrack.example"})

        assert response.headers["access-control-allow-origin"] == "https://fittrack.example"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_unknown_origin_is_not_allowed(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))

        response = client.get("/health", headers={"Origin": "https://evil.example"})

        assert "access-control-allow-origin" not in response.headers


@pytest.mark.unit
class TestLogSecurityWarnings:
    """Test startup configuration warnings."""

    def test_warns_on_default_secret_in_production(self, caplog):
        settings = Settings(environment="production", _env_file=None)

        with caplog.at_level("WARNING"):
            _log_security_warnings(settings)

        assert "JWT_SECRET is the built-in default" in caplog.text

    def test_quiet_on_default_secret_in_development(self, caplog):
        settings = Settings(environment="development", _env_file=None)

        with caplog.at_level("WARNING"):
            _log_security_warnings(settings)

        assert "JWT_SECRET" not in caplog.text

    def test_quiet_with_custom_secret(self, caplog):
        settings = Settings(environment="production", jwt_secret="real-secret", _env_file=None)

        with caplog.at_level("WARNING"):
            _log_security_warnings(settings)

        assert "JWT_SECRET" not in caplog.text


@pytest.mark.unit
class TestErrorRendering:
    """Every error leaves the app as {"error": message}."""

    @pytest.fixture
    def bare_app(self):
        return create_app(settings=Settings(environment="test", _env_file=None))

    def test_unknown_route_is_json_error(self, bare_app):
        response = TestClient(bare_app).get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_repository_error_becomes_500(self, bare_app):
        @bare_app.get("/boom-repo")
        def boom_repo():
            raise RepositoryError("connection reset")

        response = TestClient(bare_app).get("/boom-repo")

        assert response.status_code == 500
        assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}

    def test_unexpected_error_becomes_500(self, bare_app):
        @bare_app.get("/boom")
        def boom():
            raise RuntimeError("unexpected")

        response = TestClient(bare_app, raise_server_exceptions=False).get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}

    def test_request_validation_error_is_400_naming_field(self, bare_app):
        @bare_app.get("/typed")
        def typed(count: int):
            return {"count": count}

        response = TestClient(bare_app).get("/typed", params={"count": "lots"})

        assert response.status_code == 400
        assert response.json()["error"].startswith("count:")

    def test_malformed_json_body_is_400(self, client_for, store):
        user = store.add_user(name="Alex")

        response = client_for(user).post(
            "/api/workouts",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_database_unconfigured_is_503(self, bare_app):
        with patch("api.deps.get_supabase_client", return_value=None):
            response = TestClient(bare_app).get("/api/workouts")

        assert response.status_code == 503
        assert "Database not available" in response.json()["error"]


@pytest.mark.unit
class TestMultipleAppInstances:
    """Test that multiple app instances can be created."""

    def test_create_multiple_independent_apps(self):
        """Should be able to create multiple independent app instances."""
        settings1 = Settings(environment="test", _env_file=None)
        settings2 = Settings(environment="production", _env_file=None)

        app1 = create_app(settings=settings1)
        app2 = create_app(settings=settings2)

        assert app1 is not app2
        assert isinstance(app1, FastAPI)
        assert isinstance(app2, FastAPI)
