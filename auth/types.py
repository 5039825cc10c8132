"""Pydantic models for auth domain.

Persisted JSON uses camelCase keys (createdAt, isLoggedIn, currentUser);
attributes are snake_case and either form is accepted on input.
"""

import re
from datetime import datetime

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel

_EMAIL_SHAPE = re.compile(r"\S+@\S+\.\S+")

MIN_PASSWORD_LENGTH = 6


class User(BaseModel):
    """A registered user. Password is kept in plaintext."""

    id: str
    name: str
    email: str
    password: str
    created_at: datetime

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class AuthState(BaseModel):
    """The single active session.

    current_user is a snapshot of the User taken at login time.
    """

    is_logged_in: bool = False
    current_user: User | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @model_validator(mode="after")
    def user_iff_logged_in(self) -> "AuthState":
        """current_user is set exactly when is_logged_in is true."""
        if self.is_logged_in != (self.current_user is not None):
            raise ValueError("current_user must be set if and only if is_logged_in is true")
        return self

    @classmethod
    def logged_out(cls) -> "AuthState":
        return cls(is_logged_in=False, current_user=None)

    @classmethod
    def logged_in(cls, user: User) -> "AuthState":
        return cls(is_logged_in=True, current_user=user)


class RegistrationRequest(BaseModel):
    """Registration form payload.

    Checks run in form order and the first failure is reported.
    """

    name: str
    email: str
    password: str
    confirm_password: str

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @model_validator(mode="after")
    def form_checks(self) -> "RegistrationRequest":
        """Stop at the first failing check, in form order."""
        if not self.name.strip():
            raise ValueError("Name is required")
        if not self.email.strip():
            raise ValueError("Email is required")
        if not _EMAIL_SHAPE.search(self.email):
            raise ValueError("Please enter a valid email address")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self
