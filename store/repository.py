"""
Typed domain operations over the record store.

Users, pets and the single auth session. The repository keeps no state of
its own: every call re-reads the collection, and every add is a
read-modify-write of the whole collection. Two writers interleaving their
reads and writes can lose an update; callers are expected to be serialized.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from auth.types import AuthState, User
from core.models import Pet, PetQuery, PetSort
from store.exceptions import CorruptRecordError
from store.record_store import CollectionKey, RecordStore
from store.seed import sample_pets
from utils.timezone import now_utc

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _decode(model: type[ModelT], raw: dict[str, Any], collection: CollectionKey) -> ModelT:
    """Validate one stored record, reporting bad data as corruption."""
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise CorruptRecordError(
            f"Invalid {model.__name__} record in '{collection.value}': {e}"
        ) from e


def _encode(record: BaseModel) -> dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True)


class DomainRepository:
    """Users, pets and session over a RecordStore."""

    def __init__(self, store: RecordStore):
        self.store = store

    # Users

    def list_users(self) -> list[User]:
        """All users in registration order."""
        return [
            _decode(User, raw, CollectionKey.USERS)
            for raw in self.store.read(CollectionKey.USERS)
        ]

    def add_user(self, user: User) -> None:
        """Append a user. Email uniqueness is the caller's job."""
        records = self.store.read(CollectionKey.USERS)
        records.append(_encode(user))
        self.store.write(CollectionKey.USERS, records)

    def find_user_by_email(self, email: str) -> User | None:
        """First user whose email matches exactly (case-sensitive)."""
        for user in self.list_users():
            if user.email == email:
                return user
        return None

    # Pets

    def list_pets(self) -> list[Pet]:
        """All pets in publish order."""
        return [
            _decode(Pet, raw, CollectionKey.PETS)
            for raw in self.store.read(CollectionKey.PETS)
        ]

    def add_pet(self, pet: Pet) -> None:
        """Append a pet listing."""
        records = self.store.read(CollectionKey.PETS)
        records.append(_encode(pet))
        self.store.write(CollectionKey.PETS, records)

    def list_pets_by_owner(self, owner_id: str) -> list[Pet]:
        """Pets with exactly this owner id, in publish order."""
        return [pet for pet in self.list_pets() if pet.owner_id == owner_id]

    def find_pet_by_id(self, pet_id: str) -> Pet | None:
        """First pet with this id, or None."""
        for pet in self.list_pets():
            if pet.id == pet_id:
                return pet
        return None

    def list_featured_pets(self, limit: int = 3) -> list[Pet]:
        """The first few listings, for the landing page."""
        return self.list_pets()[:limit]

    def list_breeds(self) -> list[str]:
        """Distinct breeds, sorted."""
        return sorted({pet.breed for pet in self.list_pets()})

    def search_pets(self, query: PetQuery) -> list[Pet]:
        """
        Filter and sort listings for browsing.

        Args:
            query: search term (name, breed or description, case-insensitive
                substring), breed substring, exact gender, and sort order

        Returns:
            Matching pets. Sorting is stable, so ties keep publish order.
        """
        term = query.search.lower()
        breed = query.breed.lower()

        matches = []
        for pet in self.list_pets():
            if term and not (
                term in pet.name.lower()
                or term in pet.breed.lower()
                or term in pet.description.lower()
            ):
                continue
            if breed and breed not in pet.breed.lower():
                continue
            if query.gender is not None and pet.gender != query.gender:
                continue
            matches.append(pet)

        if query.sort is PetSort.NEWEST:
            matches.sort(key=lambda p: p.created_at, reverse=True)
        elif query.sort is PetSort.OLDEST:
            matches.sort(key=lambda p: p.created_at)
        elif query.sort is PetSort.NAME:
            matches.sort(key=lambda p: p.name.casefold())
        elif query.sort is PetSort.BREED:
            matches.sort(key=lambda p: p.breed.casefold())

        return matches

    def initialize_default_data(self) -> bool:
        """
        Seed the sample listings if there are no pets yet.

        Never touches existing data.

        Returns:
            True if the samples were written, False if pets already existed.
        """
        if self.store.read(CollectionKey.PETS):
            return False

        pets = sample_pets(now_utc())
        self.store.write(CollectionKey.PETS, [_encode(pet) for pet in pets])
        logger.info("Seeded %d sample pets", len(pets))
        return True

    # Session

    def read_auth_state(self) -> AuthState:
        """Current session, logged out if none was ever written."""
        raw = self.store.read_object(CollectionKey.AUTH_SESSION)
        if raw is None:
            return AuthState.logged_out()
        return _decode(AuthState, raw, CollectionKey.AUTH_SESSION)

    def write_auth_state(self, state: AuthState) -> None:
        """Replace the session."""
        self.store.write_object(CollectionKey.AUTH_SESSION, _encode(state))
