"""
Listing service: validate a draft, show feedback, publish on success.

Publishing requires a logged-in user; the listing is tagged with the session
user's id. Storage failures propagate to the caller.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from auth.service import AuthService
from core import chatbot, validator
from core.models import Gender, Pet, PetDraft, ValidationResult
from store.repository import DomainRepository
from utils.ids import generate_id
from utils.timezone import now_utc

logger = logging.getLogger(__name__)

UNSUPPORTED_GENDER_MESSAGE = "🚫 Gender must be Male or Female"
GENDER_SUGGESTION = "⚧ Choose Male or Female for your pet"


def _parse_gender(value: str) -> Gender | None:
    try:
        return Gender(value.strip())
    except ValueError:
        return None


@dataclass
class PublishResult:
    """Outcome of a publish attempt."""

    pet: Pet | None
    result: ValidationResult
    lines: list[str]

    @property
    def published(self) -> bool:
        return self.pet is not None


class ListingService:
    """Service for publishing pet listings."""

    def __init__(self, repository: DomainRepository, auth: AuthService):
        self.repository = repository
        self.auth = auth

    def publish(self, draft: PetDraft | Mapping[str, Any]) -> PublishResult:
        """
        Validate and, if valid, save a listing for the logged-in user.

        Args:
            draft: Listing form payload (PetDraft or mapping)

        Returns:
            PublishResult with the saved pet (None when rejected), the
            verdict and the chatbot lines for it.

        Raises:
            NotAuthenticatedError: If nobody is logged in. Checked before
                validation.
        """
        owner = self.auth.require_current_user()

        draft = validator.as_draft(draft)
        result = validator.validate(draft)

        # The form only checks that a gender was given
        gender = _parse_gender(draft.gender)
        if result.is_valid and gender is None:
            result = ValidationResult(
                is_valid=False,
                messages=[UNSUPPORTED_GENDER_MESSAGE],
                suggestions=[GENDER_SUGGESTION],
            )
        lines = chatbot.present(result)

        if not result.is_valid:
            logger.warning(
                f"Listing rejected for {owner.id}: {len(result.failure_messages)} problems"
            )
            return PublishResult(pet=None, result=result, lines=lines)

        pet = Pet(
            id=generate_id(),
            name=draft.name.strip(),
            breed=draft.breed.strip(),
            age=draft.age.strip(),
            gender=gender,
            health_info=draft.health_info.strip(),
            description=draft.description.strip(),
            image=draft.image,
            seller_contact=draft.seller_contact.strip(),
            owner_id=owner.id,
            created_at=now_utc(),
        )
        self.repository.add_pet(pet)

        logger.info(f"Listing published: {pet.id} by {owner.id}")
        return PublishResult(pet=pet, result=result, lines=lines)
