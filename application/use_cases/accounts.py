"""
Accounts Use Case.

Registration and login. Both return a freshly issued identity token that
the route layer places in the ``auth-token`` cookie.
"""
import logging
from typing import Any

from application.ports import UserRepository
from application.use_cases.results import AuthResult, ErrorKind
from backend.auth import TokenService, hash_password, verify_password
from domain.validation import normalize_email, validate_registration

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AccountsUseCase:
    """Use case for creating accounts and exchanging credentials for tokens."""

    def __init__(self, user_repo: UserRepository, token_service: TokenService):
        self._user_repo = user_repo
        self._token_service = token_service

    def register(self, name: Any, email: Any, password: Any) -> AuthResult:
        """
        Register a new user and sign them in.

        Args:
            name: Display name
            email: Email address (case-insensitive, must be unique)
            password: Plain-text password (min 6 characters)

        Returns:
            AuthResult with the new user and a token, or a validation failure
        """
        validation = validate_registration(name, email, password)
        if not validation.ok:
            return AuthResult.invalid(validation)

        values = validation.values
        if self._user_repo.email_exists(values["email"]):
            logger.info("Registration rejected: email already registered")
            return AuthResult.failed(ErrorKind.VALIDATION_FAILED, "Email already registered")

        user = self._user_repo.create(
            name=values["name"],
            email=values["email"],
            password_hash=hash_password(values["password"]),
        )
        logger.info(f"User registered: {user.id}")
        return AuthResult(success=True, user=user, token=self._token_service.issue(user.id))

    def login(self, email: Any, password: Any) -> AuthResult:
        """
        Exchange credentials for a token.

        Unknown email and wrong password produce the same message.
        """
        if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
            return AuthResult.failed(
                ErrorKind.VALIDATION_FAILED, "Email and password are required"
            )

        credentials = self._user_repo.get_credentials(normalize_email(email))
        if credentials is None or not verify_password(password, credentials.password_hash):
            return AuthResult.failed(ErrorKind.UNAUTHENTICATED, INVALID_CREDENTIALS)

        user = self._user_repo.get_by_id(credentials.user_id)
        if user is None:
            return AuthResult.failed(ErrorKind.UNAUTHENTICATED, INVALID_CREDENTIALS)

        logger.info(f"User logged in: {user.id}")
        return AuthResult(success=True, user=user, token=self._token_service.issue(user.id))
