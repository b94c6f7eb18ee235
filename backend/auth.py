"""
Authentication primitives: identity tokens and password hashing.

Identity tokens are HS256 JWTs carrying the user ID in ``sub`` and an
absolute expiry 7 days after issuance. They travel in the ``auth-token``
cookie. Verification is stateless; there is no session table and no
refresh token, so re-authentication requires a new login.

Usage:
    from backend.auth import TokenService

    tokens = TokenService(secret=settings.jwt_secret)
    token = tokens.issue(user.id)
    user_id = tokens.verify(token)  # None when invalid or expired
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

logger = logging.getLogger(__name__)

AUTH_COOKIE_NAME = "auth-token"
JWT_ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL = timedelta(days=7)
BCRYPT_ROUNDS = 12


class TokenService:
    """Issues and verifies signed, time-limited identity tokens."""

    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        algorithm: str = JWT_ALGORITHM,
    ):
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: str, *, now: Optional[datetime] = None) -> str:
        """
        Issue a token for ``user_id``.

        Args:
            user_id: Identifier to embed in the ``sub`` claim
            now: Issuance time (defaults to current UTC time)

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> Optional[str]:
        """
        Validate signature and expiry.

        Returns:
            The user ID, or None for a missing, malformed, tampered or
            expired token. Never raises.
        """
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected invalid token: {e}")
            return None

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            return None
        return user_id


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (72-byte input limit applies)."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8")[:72], salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash. False on any mismatch."""
    try:
        return bcrypt.checkpw(password.encode("utf-8")[:72], password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False
