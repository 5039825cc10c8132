"""Authentication configuration."""

from pydantic import BaseModel, Field


class AuthConfig(BaseModel):
    """Authentication configuration."""

    security_event_buffer_size: int = Field(
        default=100,
        description="How many recent security events are kept for inspection",
        ge=1,
        le=10000,
    )
