"""
Rule-based listing validator.

Inspects a draft listing and reports what is missing or malformed. Every rule
runs; failures accumulate in rule order, which is also display order. The
validator holds no state, so validate() can be called from anywhere, any
number of times.
"""

import re
from collections.abc import Mapping
from typing import Any

from core.models import PetDraft, ValidationResult

# (attribute, label) in the order missing fields are reported
REQUIRED_FIELDS = [
    ("name", "Pet Name"),
    ("breed", "Breed"),
    ("age", "Age"),
    ("gender", "Gender"),
    ("health_info", "Health Information"),
    ("description", "Description"),
    ("seller_contact", "Contact Information"),
]

MIN_NAME_LENGTH = 2
MIN_BREED_LENGTH = 3
MIN_DESCRIPTION_LENGTH = 20
MIN_HEALTH_INFO_LENGTH = 10

_AGE_PATTERN = re.compile(
    r"[0-9]+\s*(year|years|month|months|yr|yrs|mo|mos)(\s*old)?",
    re.IGNORECASE,
)
_EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b", re.ASCII)
_PHONE_PATTERN = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b", re.ASCII)


def is_valid_age(age: str) -> bool:
    """'2 years', '6 months', '1 year old', '3 yrs' and the like."""
    return _AGE_PATTERN.fullmatch(age.strip()) is not None


def is_valid_contact(contact: str) -> bool:
    """Contains an email address or a 3-3-4 digit phone number."""
    return bool(_EMAIL_PATTERN.search(contact) or _PHONE_PATTERN.search(contact))


def as_draft(draft: PetDraft | Mapping[str, Any]) -> PetDraft:
    """Coerce a form payload into a PetDraft."""
    if isinstance(draft, PetDraft):
        return draft
    # Form payloads may leave fields out or send None
    return PetDraft.model_validate({k: v for k, v in draft.items() if v is not None})


def validate(draft: PetDraft | Mapping[str, Any]) -> ValidationResult:
    """
    Validate a draft listing.

    Args:
        draft: PetDraft, or a mapping with camelCase or snake_case keys

    Returns:
        ValidationResult. When valid, messages holds two closing lines and
        suggestions two general tips; neither counts as a failure.
    """
    draft = as_draft(draft)
    messages: list[str] = []
    suggestions: list[str] = []
    is_valid = True

    for attr, label in REQUIRED_FIELDS:
        if not getattr(draft, attr).strip():
            is_valid = False
            messages.append(f"🚫 {label} is required")

    if not draft.image:
        is_valid = False
        messages.append("🚫 Pet photo is required")
        suggestions.append("📸 Upload a clear, recent photo of your pet")

    # Checks below apply only to fields that were filled in
    if draft.name and len(draft.name.strip()) < MIN_NAME_LENGTH:
        is_valid = False
        messages.append("🚫 Pet name should be at least 2 characters long")

    if draft.breed and len(draft.breed.strip()) < MIN_BREED_LENGTH:
        is_valid = False
        messages.append("🚫 Please provide a valid breed name")
        suggestions.append("🐕 Examples: Labrador Retriever, Persian Cat, Mixed Breed")

    if draft.age and not is_valid_age(draft.age):
        is_valid = False
        messages.append("🚫 Please provide a valid age format")
        suggestions.append('⏰ Examples: "2 years", "6 months", "1 year old"')

    if draft.description and len(draft.description.strip()) < MIN_DESCRIPTION_LENGTH:
        is_valid = False
        messages.append("🚫 Description should be at least 20 characters")
        suggestions.append(
            "📝 Tell us about your pet's personality, habits, and what makes them special!"
        )

    if draft.health_info and len(draft.health_info.strip()) < MIN_HEALTH_INFO_LENGTH:
        is_valid = False
        messages.append("🚫 Health information should be more detailed")
        suggestions.append(
            "🏥 Include vaccination status, any medical conditions, and general health"
        )

    if draft.seller_contact and not is_valid_contact(draft.seller_contact):
        is_valid = False
        messages.append("🚫 Please provide valid contact information")
        suggestions.append("📞 Include email and/or phone number for interested buyers")

    if is_valid:
        messages.append("✅ Great! Your pet listing looks perfect!")
        messages.append("🎉 All information is complete and ready for publication")
        suggestions.append("💡 Consider adding details about your pet's favorite activities")
        suggestions.append("🏠 Mention if your pet is good with kids or other animals")

    return ValidationResult(is_valid=is_valid, messages=messages, suggestions=suggestions)
