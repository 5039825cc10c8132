"""Listing validation result."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ValidationResult(BaseModel):
    """Verdict on a draft listing.

    Message and suggestion order is display order. When the listing is valid,
    messages holds only the closing messages, never failures.
    """

    is_valid: bool
    messages: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @property
    def failure_messages(self) -> list[str]:
        """Messages produced by failing rules."""
        if self.is_valid:
            return []
        return list(self.messages)
