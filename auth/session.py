"""Session lifecycle.

There is one session per store. It is rewritten whole on every transition;
current_user is a copy of the User at login time.
"""

from auth.types import AuthState, User
from store.repository import DomainRepository


class SessionManager:
    """Reads and replaces the single session record."""

    def __init__(self, repository: DomainRepository):
        self._repository = repository

    def current(self) -> AuthState:
        """Current session. Logged out if none was ever stored."""
        return self._repository.read_auth_state()

    def start(self, user: User) -> AuthState:
        """Replace the session with a logged-in one for user."""
        state = AuthState.logged_in(user)
        self._repository.write_auth_state(state)
        return state

    def end(self) -> AuthState:
        """Replace the session with the logged-out one."""
        state = AuthState.logged_out()
        self._repository.write_auth_state(state)
        return state
