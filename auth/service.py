"""Authentication service - register, login, logout over the domain store.

Passwords are compared in plaintext. Expected failures (email taken, bad
credentials) return None; the reason is recorded as a security event only.
"""

import logging

from auth.exceptions import NotAuthenticatedError
from auth.security_logger import SecurityEvent, SecurityLogger
from auth.session import SessionManager
from auth.types import AuthState, RegistrationRequest, User
from store.exceptions import CorruptRecordError
from store.repository import DomainRepository
from utils.ids import generate_id
from utils.timezone import now_utc

logger = logging.getLogger(__name__)


class AuthService:
    """Orchestrates the LoggedOut -> LoggedIn -> LoggedOut session cycle.

    Handles:
    - Registration (with email uniqueness)
    - Login (exact credential match)
    - Logout
    - Session lookup for callers needing the current user
    """

    def __init__(
        self,
        repository: DomainRepository,
        session_manager: SessionManager,
        security_logger: SecurityLogger,
    ):
        self._repository = repository
        self._session_manager = session_manager
        self._security_logger = security_logger

    def register(self, name: str, email: str, password: str) -> User | None:
        """Create a user and log them in.

        Returns:
            The new user, or None if the email is already registered.
        """
        if self._repository.find_user_by_email(email) is not None:
            self._security_logger.log(
                SecurityEvent.REGISTRATION_REJECTED,
                email=email,
                details={"reason": "email_taken"},
            )
            return None

        user = User(
            id=generate_id(),
            name=name,
            email=email,
            password=password,
            created_at=now_utc(),
        )
        self._repository.add_user(user)
        self._session_manager.start(user)

        self._security_logger.log(
            SecurityEvent.USER_REGISTERED,
            email=user.email,
            user_id=user.id,
        )
        logger.info(f"User registered: {user.id}")
        return user

    def register_account(self, request: RegistrationRequest) -> User | None:
        """Register from a checked form, trimming name and email.

        Form checks (required fields, email shape, password length and
        confirmation) happen when the RegistrationRequest is built.
        """
        return self.register(
            request.name.strip(),
            request.email.strip(),
            request.password,
        )

    def login(self, email: str, password: str) -> User | None:
        """Log in with exact email and password.

        Returns:
            The user, or None if the email is unknown or the password is
            wrong. Both cases look the same to the caller, and the session
            is left as it was.
        """
        user = self._repository.find_user_by_email(email)

        if user is None:
            self._security_logger.log(
                SecurityEvent.LOGIN_FAILED,
                email=email,
                details={"reason": "user_not_found"},
            )
            return None

        if user.password != password:
            self._security_logger.log(
                SecurityEvent.LOGIN_FAILED,
                email=email,
                user_id=user.id,
                details={"reason": "wrong_password"},
            )
            return None

        self._session_manager.start(user)
        self._security_logger.log(
            SecurityEvent.LOGIN_SUCCEEDED,
            email=user.email,
            user_id=user.id,
        )
        return user

    def logout(self) -> None:
        """End the session. Safe to call when already logged out."""
        # Unreadable session must not block logout
        try:
            previous = self._session_manager.current().current_user
        except CorruptRecordError:
            logger.warning("Discarding unreadable session on logout")
            previous = None
        self._session_manager.end()

        self._security_logger.log(
            SecurityEvent.LOGGED_OUT,
            email=previous.email if previous else None,
            user_id=previous.id if previous else None,
        )

    def get_auth_state(self) -> AuthState:
        """Current session; logged out when nothing was stored."""
        return self._session_manager.current()

    def current_user(self) -> User | None:
        """Session user snapshot, or None when logged out."""
        return self._session_manager.current().current_user

    def require_current_user(self) -> User:
        """Session user snapshot.

        Raises:
            NotAuthenticatedError: If nobody is logged in.
        """
        user = self.current_user()
        if user is None:
            raise NotAuthenticatedError("Log in to continue")
        return user
