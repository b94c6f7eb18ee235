"""
Authorization kernel.

Resolves the acting identity from an identity token and decides whether
that identity may act on a resource. Every mutating or single-resource-read
operation goes through here, in this order:

    authenticate -> fetch resource (404) -> authorize (403) -> act

Identity is resolved once per request into a ``RequestContext`` that is
passed explicitly to use cases.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from application.ports import UserRepository
from domain.models import Log, User

logger = logging.getLogger(__name__)


class TokenVerifier(Protocol):
    def verify(self, token: Optional[str]) -> Optional[str]:
        ...


class OwnedResource(Protocol):
    @property
    def owner_id(self) -> str:
        ...


class AccessDecision(str, Enum):
    """Outcome of an ownership or visibility check."""

    AUTHORIZED = "authorized"
    VISIBLE = "visible"
    FORBIDDEN = "forbidden"

    @property
    def allowed(self) -> bool:
        return self is not AccessDecision.FORBIDDEN


@dataclass(frozen=True)
class RequestContext:
    """
    Per-request identity, built once by the route layer.

    ``token_present`` distinguishes "no cookie" from "cookie that did not
    resolve to a user" so error messages can differ; both are 401.
    """

    identity: Optional[User] = None
    token_present: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def user_id(self) -> Optional[str]:
        return self.identity.id if self.identity else None

    @property
    def unauthenticated_message(self) -> str:
        if self.token_present:
            return "Invalid or expired token"
        return "Authentication required"


class AuthorizationKernel:
    """Resolves identities and enforces ownership/visibility rules."""

    def __init__(self, user_repo: UserRepository, token_service: TokenVerifier):
        self._user_repo = user_repo
        self._token_service = token_service

    def resolve_identity(self, token: Optional[str]) -> Optional[User]:
        """
        Resolve a token to the user it was issued for.

        Returns None for an absent or invalid token, or when the user no
        longer exists.
        """
        user_id = self._token_service.verify(token)
        if user_id is None:
            return None
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            logger.info(f"Token for unknown user {user_id} rejected")
        return user

    def build_context(self, token: Optional[str]) -> RequestContext:
        return RequestContext(
            identity=self.resolve_identity(token),
            token_present=bool(token),
        )

    @staticmethod
    def assert_ownership(resource: OwnedResource, identity: User) -> AccessDecision:
        if resource.owner_id == identity.id:
            return AccessDecision.AUTHORIZED
        logger.warning(f"User {identity.id} denied access to resource owned by {resource.owner_id}")
        return AccessDecision.FORBIDDEN

    @staticmethod
    def assert_visibility(log: Log, identity: User) -> AccessDecision:
        """A log is visible to its owner, or to anyone once shared."""
        if log.owner_id == identity.id or log.is_shared is True:
            return AccessDecision.VISIBLE
        logger.warning(f"User {identity.id} denied view of private log {log.id}")
        return AccessDecision.FORBIDDEN
