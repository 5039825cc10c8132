"""Shared test fixtures for the PetConnect core test suite."""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file BEFORE any fixtures read env vars
load_dotenv(Path(__file__).parent.parent / ".env")

from auth.config import AuthConfig
from auth.security_logger import SecurityLogger
from auth.service import AuthService
from auth.session import SessionManager
from auth.types import User
from clients.memory_client import MemoryClient
from core.models import Gender, Pet, PetDraft
from store.config import StoreConfig
from store.record_store import RecordStore
from store.repository import DomainRepository


# =============================================================================
# TEST CONSTANTS
# =============================================================================

DEMO_EMAIL = "demo@petconnect.com"
DEMO_PASSWORD = "demo123"

TEST_OWNER_ID = "owner-a"
TEST_OWNER_B_ID = "owner-b"


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def store_config() -> StoreConfig:
    """Store config with a small quota."""
    return StoreConfig(quota_bytes=64 * 1024)


@pytest.fixture
def memory_backend(store_config):
    """Fresh in-process backend per test."""
    client = MemoryClient(quota_bytes=store_config.quota_bytes)
    yield client
    client.close()


@pytest.fixture
def record_store(memory_backend, store_config) -> RecordStore:
    return RecordStore(memory_backend, store_config)


@pytest.fixture
def repository(record_store) -> DomainRepository:
    return DomainRepository(record_store)


# =============================================================================
# AUTH FIXTURES
# =============================================================================


@pytest.fixture
def security_logger() -> SecurityLogger:
    return SecurityLogger(AuthConfig().security_event_buffer_size)


@pytest.fixture
def session_manager(repository) -> SessionManager:
    return SessionManager(repository)


@pytest.fixture
def auth_service(repository, session_manager, security_logger) -> AuthService:
    return AuthService(
        repository=repository,
        session_manager=session_manager,
        security_logger=security_logger,
    )


@pytest.fixture
def demo_user(repository) -> User:
    """The demo account, stored directly (no session side effects)."""
    user = User(
        id="demo-user",
        name="Demo User",
        email=DEMO_EMAIL,
        password=DEMO_PASSWORD,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    repository.add_user(user)
    return user


# =============================================================================
# LISTING FIXTURES
# =============================================================================


@pytest.fixture
def valid_draft() -> PetDraft:
    """A draft that passes every rule."""
    return PetDraft(
        name="Luna",
        breed="Siamese Cat",
        age="2 years",
        gender="Female",
        health_info="Vaccinated and spayed, no known conditions",
        description="Luna is playful in the morning and loves sunny windowsills.",
        image="data:image/png;base64,iVBORw0KGgo=",
        seller_contact="luna.owner@example.com",
    )


@pytest.fixture
def make_pet():
    """Factory for stored pets with sensible defaults."""

    def _make(
        pet_id: str,
        owner_id: str = TEST_OWNER_ID,
        name: str = "Rex",
        breed: str = "Labrador Retriever",
        gender: Gender = Gender.MALE,
        description: str = "Rex is a calm dog who enjoys long walks.",
        created_at: datetime | None = None,
    ) -> Pet:
        return Pet(
            id=pet_id,
            name=name,
            breed=breed,
            age="3 years",
            gender=gender,
            health_info="All shots up to date",
            description=description,
            image="/img/rex.jpg",
            seller_contact="555-123-4567",
            owner_id=owner_id,
            created_at=created_at or datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    return _make


# =============================================================================
# VALKEY FIXTURES
# =============================================================================


@pytest.fixture(scope="session")
def valkey():
    """Session-scoped ValkeyClient. Skips when VALKEY_URL is not set."""
    if not os.getenv("VALKEY_URL"):
        pytest.skip("VALKEY_URL not set")

    from clients.valkey_client import ValkeyClient, get_valkey_url

    client = ValkeyClient(get_valkey_url())
    yield client
    client.close()
