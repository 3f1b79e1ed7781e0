# =============================================================================
# tests/test_item_service.py - Item Service Tests
# =============================================================================

import pytest

from items_api.shared.core.exceptions import (
    DuplicateItemError,
    ItemNotFoundError,
    ValidationError,
)
from items_api.shared.repositories.item_store import ItemStore
from items_api.shared.services.item_service import ItemService


@pytest.fixture
def service() -> ItemService:
    return ItemService(ItemStore(shard_count=4, id_start=1000))


class TestCreateItem:
    """Tests for ItemService.create_item."""

    def test_creates_item(self, service):
        item = service.create_item("esgrove")

        assert item.name == "esgrove"
        assert item.id == 1000

    @pytest.mark.parametrize("name", ["", " ", "\t\n"])
    def test_blank_name_rejected(self, service, name):
        with pytest.raises(ValidationError) as exc_info:
            service.create_item(name)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"field": "name"}
        assert len(service.store) == 0

    def test_duplicate_name(self, service):
        service.create_item("esgrove")

        with pytest.raises(DuplicateItemError):
            service.create_item("esgrove")


class TestReadAndRemove:
    """Tests for lookup, removal and clearing."""

    def test_get_item(self, service):
        created = service.create_item("esgrove")

        assert service.get_item("esgrove") == created

    def test_get_missing_item(self, service):
        with pytest.raises(ItemNotFoundError) as exc_info:
            service.get_item("missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Item with name 'missing' not found"

    def test_remove_item(self, service):
        created = service.create_item("esgrove")

        assert service.remove_item("esgrove") == created
        with pytest.raises(ItemNotFoundError):
            service.remove_item("esgrove")

    def test_list_and_clear(self, service):
        service.create_item("b")
        service.create_item("a")

        assert [item.name for item in service.list_items()] == ["a", "b"]
        assert service.clear_items() == 2
        assert service.list_items() == []
