"""Navigation guard middleware.

Browser navigations to protected pages are redirected to the login page
when no identity cookie is present. Only presence is checked here; the
token itself is validated by the API routes.

Usage::

    from backend.navigation import NavigationGuardMiddleware

    app.add_middleware(NavigationGuardMiddleware)
"""

import logging
from typing import Iterable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse
from starlette.types import ASGIApp

from backend.auth import AUTH_COOKIE_NAME

logger = logging.getLogger(__name__)

PROTECTED_PREFIXES: tuple[str, ...] = ("/workouts", "/logs", "/profile", "/feed")
LOGIN_PATH = "/login"
API_PREFIX = "/api"


def is_protected_path(path: str, prefixes: Iterable[str] = PROTECTED_PREFIXES) -> bool:
    """True for page paths under a protected prefix. API paths never match."""
    if path == API_PREFIX or path.startswith(API_PREFIX + "/"):
        return False
    return any(path == p or path.startswith(p + "/") for p in prefixes)


class NavigationGuardMiddleware(BaseHTTPMiddleware):
    """Redirects unauthenticated page navigations to the login page."""

    def __init__(
        self,
        app: ASGIApp,
        protected_prefixes: Optional[Iterable[str]] = None,
        login_path: str = LOGIN_PATH,
    ) -> None:
        super().__init__(app)
        self.protected_prefixes = tuple(protected_prefixes or PROTECTED_PREFIXES)
        self.login_path = login_path

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if is_protected_path(path, self.protected_prefixes) and not request.cookies.get(AUTH_COOKIE_NAME):
            logger.debug("Redirecting unauthenticated navigation to %s", path)
            return RedirectResponse(url=self.login_path, status_code=307)
        return await call_next(request)
