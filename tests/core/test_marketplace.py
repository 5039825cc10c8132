"""Tests for Marketplace - the collaborator-facing API."""

from unittest.mock import patch

import pytest

from auth.types import RegistrationRequest
from clients.memory_client import MemoryClient
from core.marketplace import Marketplace
from core.models import PetQuery
from store.config import StoreConfig
from store.exceptions import CorruptRecordError, StorageQuotaExceededError


@pytest.fixture
def market():
    with Marketplace.in_memory() as m:
        yield m


@pytest.fixture
def empty_market():
    with Marketplace.in_memory(StoreConfig(seed_default_data=False)) as m:
        yield m


class TestLifecycle:
    """Construction and seeding."""

    def test_opens_with_sample_pets(self, market):
        assert [p.name for p in market.get_pets()] == ["Buddy", "Whiskers", "Max"]

    def test_seeding_can_be_disabled(self, empty_market):
        assert empty_market.get_pets() == []

    def test_initialize_default_data_scenario(self, empty_market):
        """Empty store -> seed -> 3 pets; seeding again keeps 3."""
        empty_market.initialize_default_data()
        assert [p.name for p in empty_market.get_pets()] == ["Buddy", "Whiskers", "Max"]

        empty_market.initialize_default_data()
        assert len(empty_market.get_pets()) == 3

    def test_instances_do_not_share_state(self):
        with Marketplace.in_memory() as a, Marketplace.in_memory() as b:
            a.register("Ana", "ana@example.com", "secret1")
            assert b.get_users() == []

    def test_backend_closed_when_seeding_fails(self):
        backend = MemoryClient()
        backend.set(StoreConfig().pets_key, "{not json")

        with patch.object(backend, "close", wraps=backend.close) as close:
            with pytest.raises(CorruptRecordError):
                Marketplace(backend)

        close.assert_called_once()

    def test_storage_failure_propagates(self, valid_draft):
        config = StoreConfig(quota_bytes=4096)
        with Marketplace.in_memory(config) as m:
            m.register("Ana", "ana@example.com", "secret1")
            big = valid_draft.model_copy(update={"image": "data:image/png;base64," + "A" * 8192})
            with pytest.raises(StorageQuotaExceededError):
                m.publish_listing(big)


class TestEndToEnd:
    """Register, publish, browse, log out."""

    def test_publish_flow(self, market, valid_draft):
        user = market.register("Ana", "ana@example.com", "secret1")
        assert market.get_auth_state().current_user == user

        outcome = market.publish_listing(valid_draft)
        assert outcome.published is True

        assert market.get_pet_by_id(outcome.pet.id) == outcome.pet
        assert market.get_pets_by_owner(user.id) == [outcome.pet]
        assert market.get_pets()[-1] == outcome.pet
        assert market.search_pets(PetQuery(search="luna")) == [outcome.pet]

        market.logout()
        assert market.get_auth_state().is_logged_in is False

    def test_register_account(self, market):
        request = RegistrationRequest(
            name="Ana", email="ana@example.com", password="secret1", confirm_password="secret1"
        )
        user = market.register_account(request)
        assert market.find_user_by_email("ana@example.com") == user

    def test_login_after_logout(self, market):
        market.register("Ana", "ana@example.com", "secret1")
        market.logout()
        assert market.login("ana@example.com", "secret1") is not None
        assert market.login("ana@example.com", "nope") is None

    def test_validate_and_chatbot(self, market, valid_draft):
        result = market.validate(valid_draft.model_copy(update={"name": ""}))
        lines = market.get_chatbot_response(result)
        assert result.is_valid is False
        assert "🚫 Pet Name is required" in lines

    def test_browse_helpers(self, market):
        assert market.list_breeds() == ["Border Collie", "Golden Retriever", "Tabby Cat"]
        assert len(market.get_featured_pets()) == 3
        assert len(market.search_pets()) == 3

    def test_save_pet_directly(self, market, make_pet):
        pet = make_pet(market.generate_id())
        market.save_pet(pet)
        assert market.get_pet_by_id(pet.id) == pet

    def test_format_date(self, market):
        assert market.format_date("2024-03-05T10:00:00Z")
