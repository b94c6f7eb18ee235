"""
API package for the FitTrack API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- schemas/: request body models
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_user_repo,
    get_workout_repo,
    get_log_repo,
    get_token_service,
    get_authorization_kernel,
    get_request_context,
)

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
]
