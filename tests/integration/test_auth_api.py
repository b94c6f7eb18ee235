"""
Integration tests for the auth router.

Tests the endpoints:
- POST /api/auth/register
- POST /api/auth/login
- POST /api/auth/logout
- GET /api/auth/me
- PUT /api/auth/me
"""

import pytest
from fastapi.testclient import TestClient

from backend.auth import AUTH_COOKIE_NAME

pytestmark = pytest.mark.integration

ALEX = {"name": "Alex", "email": "alex@x.com", "password": "pw123456"}


class TestRegister:
    def test_register_sets_cookie(self, client):
        response = client.post("/api/auth/register", json=ALEX)

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["name"] == "Alex"
        assert body["user"]["email"] == "alex@x.com"
        assert "passwordHash" not in body["user"]
        assert "password" not in body["user"]

        set_cookie = response.headers["set-cookie"]
        assert f"{AUTH_COOKIE_NAME}=" in set_cookie
        assert "HttpOnly" in set_cookie
        assert "Max-Age=604800" in set_cookie
        assert "samesite=lax" in set_cookie.lower()

    def test_duplicate_email(self, client):
        client.post("/api/auth/register", json=ALEX)

        response = client.post("/api/auth/register", json={**ALEX, "email": "ALEX@x.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "Email already registered"}

    def test_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "alex@x.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "Name, email, and password are required"}


class TestLogin:
    def test_login_then_me(self, client):
        client.post("/api/auth/register", json=ALEX)
        client.cookies.clear()

        login = client.post("/api/auth/login", json={"email": "alex@x.com", "password": "pw123456"})
        me = client.get("/api/auth/me")

        assert login.status_code == 200
        assert me.status_code == 200
        assert me.json()["user"]["name"] == "Alex"

    def test_wrong_password(self, client):
        client.post("/api/auth/register", json=ALEX)

        response = client.post("/api/auth/login", json={"email": "alex@x.com", "password": "nope-nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid email or password"}


class TestLogout:
    def test_logout_clears_cookie(self, client):
        client.post("/api/auth/register", json=ALEX)

        response = client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out successfully"}
        assert client.get("/api/auth/me").status_code == 401


class TestMe:
    def test_requires_cookie(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    def test_bad_cookie(self, app):
        response = TestClient(app, cookies={AUTH_COOKIE_NAME: "garbage"}).get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    def test_update_profile_merge(self, client_for, store):
        alex = store.add_user(name="Alex", email="alex@x.com", fitness_goals="Run a 10k")
        client = client_for(alex)

        response = client.put("/api/auth/me", json={"name": ""})

        assert response.status_code == 200
        assert response.json()["user"]["name"] == "Alex"
        assert response.json()["user"]["fitnessGoals"] == "Run a 10k"

        response = client.put("/api/auth/me", json={"fitnessGoals": ""})

        assert response.json()["message"] == "Profile updated successfully"
        assert response.json()["user"]["fitnessGoals"] == ""

    def test_update_profile_too_long(self, client_for, store):
        alex = store.add_user(name="Alex")

        response = client_for(alex).put("/api/auth/me", json={"name": "x" * 101})

        assert response.status_code == 400
