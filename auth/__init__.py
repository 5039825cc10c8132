"""Authentication modules.

Session and service modules are imported directly (auth.session,
auth.service) since they depend on the store layer.
"""

from auth.exceptions import AuthError, NotAuthenticatedError
from auth.types import User, AuthState, RegistrationRequest
from auth.config import AuthConfig
from auth.security_logger import SecurityLogger, SecurityEvent
