"""Typed exceptions for auth failures.

Expected outcomes (duplicate email on register, bad credentials on login)
are reported as None, not raised.
"""


class AuthError(Exception):
    """Base class for authentication/authorization errors."""


class NotAuthenticatedError(AuthError):
    """Operation needs a logged-in user and the session is logged out."""
