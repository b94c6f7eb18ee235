"""
FastAPI Dependency Providers for the FitTrack API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- The request context (acting identity) is resolved once per request from
  the ``auth-token`` cookie and passed explicitly to use cases

Usage in routers:
    from api.deps import get_request_context, get_workouts_use_case

    @router.post("/workouts")
    def create_workout(
        ctx: RequestContext = Depends(get_request_context),
        use_case: WorkoutsUseCase = Depends(get_workouts_use_case),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Cookie, Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    LogRepository,
    UserRepository,
    WorkoutRepository,
)
from application.authorization import AuthorizationKernel, RequestContext
from application.use_cases import (
    AccountsUseCase,
    LogsUseCase,
    ProfileUseCase,
    WorkoutsUseCase,
)

# Concrete implementations
from infrastructure import (
    SupabaseLogRepository,
    SupabaseUserRepository,
    SupabaseWorkoutRepository,
)

from backend.auth import AUTH_COOKIE_NAME, TokenService
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    """
    Get UserRepository implementation.

    Returns a SupabaseUserRepository instance with injected client.
    The return type is the Protocol to enable easy faking.
    """
    return SupabaseUserRepository(client)


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutRepository: Repository for the workout catalog
    """
    return SupabaseWorkoutRepository(client)


def get_log_repo(
    client: Client = Depends(get_supabase_client_required),
) -> LogRepository:
    """
    Get LogRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        LogRepository: Repository for workout logs
    """
    return SupabaseLogRepository(client)


# =============================================================================
# Authentication Providers
# =============================================================================


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    """Token service signing with the configured secret and lifetime."""
    return TokenService(settings.jwt_secret, ttl=settings.token_ttl)


def get_authorization_kernel(
    user_repo: UserRepository = Depends(get_user_repo),
    token_service: TokenService = Depends(get_token_service),
) -> AuthorizationKernel:
    return AuthorizationKernel(user_repo, token_service)


def get_request_context(
    auth_token: Optional[str] = Cookie(None, alias=AUTH_COOKIE_NAME),
    kernel: AuthorizationKernel = Depends(get_authorization_kernel),
) -> RequestContext:
    """
    Resolve the acting identity for this request.

    Never raises for a missing or bad token; use cases decide whether an
    identity is required and answer 401 themselves.

    Args:
        auth_token: Identity token from the ``auth-token`` cookie

    Returns:
        RequestContext: identity (or None) plus whether a token was sent
    """
    return kernel.build_context(auth_token)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_accounts_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    token_service: TokenService = Depends(get_token_service),
) -> AccountsUseCase:
    return AccountsUseCase(user_repo=user_repo, token_service=token_service)


def get_profile_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
) -> ProfileUseCase:
    return ProfileUseCase(user_repo=user_repo)


def get_workouts_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> WorkoutsUseCase:
    return WorkoutsUseCase(workout_repo=workout_repo)


def get_logs_use_case(
    log_repo: LogRepository = Depends(get_log_repo),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> LogsUseCase:
    return LogsUseCase(log_repo=log_repo, workout_repo=workout_repo)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_user_repo",
    "get_workout_repo",
    "get_log_repo",
    # Authentication
    "get_token_service",
    "get_authorization_kernel",
    "get_request_context",
    # Use cases
    "get_accounts_use_case",
    "get_profile_use_case",
    "get_workouts_use_case",
    "get_logs_use_case",
]
