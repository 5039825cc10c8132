"""Core domain models."""

from core.models.pet import Gender, Pet, PetDraft, PetQuery, PetSort
from core.models.listing import ValidationResult

__all__ = [
    # Pet
    "Gender", "Pet", "PetDraft", "PetQuery", "PetSort",
    # Listing
    "ValidationResult",
]
