"""
Marketplace: the API the UI layer calls.

Wires a blob backend through the record store, repository, session manager
and services. One Marketplace per process (or per test); close() it when
done, or use it as a context manager.

Usage:
    with Marketplace.in_memory() as market:
        market.register("Ana", "ana@example.com", "secret1")
        result = market.publish_listing(draft)
"""

import logging
from collections.abc import Mapping
from typing import Any

from auth.config import AuthConfig
from auth.security_logger import SecurityLogger
from auth.service import AuthService
from auth.session import SessionManager
from auth.types import AuthState, RegistrationRequest, User
from clients.memory_client import MemoryClient
from clients.valkey_client import ValkeyClient
from core import chatbot, validator
from core.models import Pet, PetDraft, PetQuery, ValidationResult
from core.services.listing_service import ListingService, PublishResult
from store.config import StoreConfig
from store.record_store import BlobBackend, RecordStore
from store.repository import DomainRepository
from utils.ids import generate_id
from utils.timezone import format_date

logger = logging.getLogger(__name__)


class Marketplace:
    """Collaborator-facing facade over the core services."""

    def __init__(
        self,
        backend: BlobBackend,
        store_config: StoreConfig | None = None,
        auth_config: AuthConfig | None = None,
    ):
        self.store_config = store_config or StoreConfig()
        self.auth_config = auth_config or AuthConfig()

        self.store = RecordStore(backend, self.store_config)
        self.repository = DomainRepository(self.store)
        self.security_logger = SecurityLogger(self.auth_config.security_event_buffer_size)
        self.auth = AuthService(
            repository=self.repository,
            session_manager=SessionManager(self.repository),
            security_logger=self.security_logger,
        )
        self.listings = ListingService(self.repository, self.auth)

        if self.store_config.seed_default_data:
            try:
                self.initialize_default_data()
            except Exception:
                self.store.close()
                raise

    @classmethod
    def in_memory(
        cls,
        store_config: StoreConfig | None = None,
        auth_config: AuthConfig | None = None,
    ) -> "Marketplace":
        """Marketplace over a fresh in-process store."""
        store_config = store_config or StoreConfig()
        backend = MemoryClient(quota_bytes=store_config.quota_bytes)
        return cls(backend, store_config, auth_config)

    @classmethod
    def from_url(
        cls,
        url: str,
        store_config: StoreConfig | None = None,
        auth_config: AuthConfig | None = None,
    ) -> "Marketplace":
        """Marketplace over a Valkey server. Fails fast if unreachable."""
        return cls(ValkeyClient(url), store_config, auth_config)

    def close(self) -> None:
        self.store.close()
        logger.info("Marketplace closed")

    def __enter__(self) -> "Marketplace":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Data

    def initialize_default_data(self) -> bool:
        return self.repository.initialize_default_data()

    def get_pets(self) -> list[Pet]:
        return self.repository.list_pets()

    def save_pet(self, pet: Pet) -> None:
        self.repository.add_pet(pet)

    def get_pets_by_owner(self, owner_id: str) -> list[Pet]:
        return self.repository.list_pets_by_owner(owner_id)

    def get_pet_by_id(self, pet_id: str) -> Pet | None:
        return self.repository.find_pet_by_id(pet_id)

    def get_featured_pets(self, limit: int = 3) -> list[Pet]:
        return self.repository.list_featured_pets(limit)

    def search_pets(self, query: PetQuery | None = None) -> list[Pet]:
        return self.repository.search_pets(query or PetQuery())

    def list_breeds(self) -> list[str]:
        return self.repository.list_breeds()

    def get_users(self) -> list[User]:
        return self.repository.list_users()

    def find_user_by_email(self, email: str) -> User | None:
        return self.repository.find_user_by_email(email)

    # Auth

    def get_auth_state(self) -> AuthState:
        return self.auth.get_auth_state()

    def login(self, email: str, password: str) -> User | None:
        return self.auth.login(email, password)

    def logout(self) -> None:
        self.auth.logout()

    def register(self, name: str, email: str, password: str) -> User | None:
        return self.auth.register(name, email, password)

    def register_account(self, request: RegistrationRequest) -> User | None:
        return self.auth.register_account(request)

    # Listings

    def validate(self, draft: PetDraft | Mapping[str, Any]) -> ValidationResult:
        return validator.validate(draft)

    def get_chatbot_response(self, result: ValidationResult) -> list[str]:
        return chatbot.get_chatbot_response(result)

    def publish_listing(self, draft: PetDraft | Mapping[str, Any]) -> PublishResult:
        return self.listings.publish(draft)

    # Helpers

    @staticmethod
    def generate_id() -> str:
        return generate_id()

    @staticmethod
    def format_date(iso_string: str, tz_name: str | None = None) -> str:
        return format_date(iso_string, tz_name)
