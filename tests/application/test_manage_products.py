"""Integration tests for the add/update/show/remove product use cases."""

import pytest

from ims.application.add_product import AddProductHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.show_product import ShowProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import FakeClock, make_product


def _repo(*products):
    return InMemoryProductRepository(list(products), clock=FakeClock())


class TestAddProduct:

    def test_add_returns_formatted_product(self):
        repo = _repo()
        dto = AddProductHandler(repo).handle(
            name="  Wireless Mouse ", sku="WM-001", price="1234.5", current_stock=45
        )
        assert dto.id == 1
        assert dto.name == "Wireless Mouse"
        assert dto.price == "$1,234.50"
        assert dto.low_stock_threshold == 10
        assert dto.status == "In Stock"
        assert dto.last_updated == "Jan 05, 2026 02:31 PM"
        assert repo.get_by_id(1).sku == "WM-001"

    def test_next_id_follows_highest_existing(self):
        repo = _repo(make_product(id=7))
        dto = AddProductHandler(repo).handle("Gadget", "G-1", "5", 1)
        assert dto.id == 8

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(_repo()).handle(" ", "G-1", "5", 1)

    def test_blank_sku_rejected(self):
        with pytest.raises(ValidationError, match="SKU is required"):
            AddProductHandler(_repo()).handle("Gadget", "", "5", 1)

    def test_bad_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(_repo()).handle("Gadget", "G-1", "five", 1)

    def test_negative_stock_rejected_and_nothing_stored(self):
        repo = _repo()
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(repo).handle("Gadget", "G-1", "5", -2)
        assert repo.list_all() == []


class TestUpdateProduct:

    def test_updates_only_given_fields(self):
        repo = _repo(make_product(id=1, name="Widget", price="10.00", current_stock=5))
        dto = UpdateProductHandler(repo).handle(1, price="12.00", low_stock_threshold=3)

        assert dto.price == "$12.00"
        assert dto.low_stock_threshold == 3
        assert dto.name == "Widget"
        assert dto.current_stock == 5

    def test_unknown_product_rejected(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateProductHandler(_repo()).handle(3, name="Ghost")

    def test_nothing_to_update_rejected(self):
        with pytest.raises(ValidationError, match="Nothing to update"):
            UpdateProductHandler(_repo(make_product(id=1))).handle(1)


class TestShowAndRemoveProduct:

    def test_show(self):
        dto = ShowProductHandler(_repo(make_product(id=2, current_stock=0))).handle(2)
        assert dto.status == "Out of Stock"
        assert dto.value == "$0.00"

    def test_show_unknown_rejected(self):
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(_repo()).handle(999)

    def test_remove_returns_deleted_product(self):
        repo = _repo(make_product(id=1, name="Widget"))
        dto = RemoveProductHandler(repo).handle(1)
        assert dto.name == "Widget"
        assert repo.list_all() == []

    def test_remove_unknown_rejected(self):
        with pytest.raises(EntityNotFoundError):
            RemoveProductHandler(_repo()).handle(1)
