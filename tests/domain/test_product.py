"""Unit tests for the Product aggregate."""

from datetime import datetime, timezone

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money, StockStatus
from tests.fakes import START, make_product

LATER = datetime(2026, 2, 1, tzinfo=timezone.utc)


class TestProductInvariants:

    def test_default_threshold_is_ten(self):
        p = Product(id=1, name="Widget", sku="W-1", price=Money.of("1"), current_stock=0)
        assert p.low_stock_threshold == 10

    def test_name_and_sku_are_stripped(self):
        p = make_product(name="  Widget ", sku=" W-1 ")
        assert p.name == "Widget"
        assert p.sku == "W-1"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name is required"):
            make_product(name=name)

    def test_blank_sku_rejected(self):
        with pytest.raises(ValidationError, match="SKU is required"):
            Product(id=1, name="Widget", sku=" ", price=Money.of("1"), current_stock=0)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="stock cannot be negative"):
            make_product(current_stock=-1)

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError, match="threshold cannot be negative"):
            make_product(low_stock_threshold=-1)

    def test_fractional_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            make_product(current_stock=2.5)

    def test_price_must_be_money(self):
        with pytest.raises(ValidationError, match="must be Money"):
            Product(id=1, name="Widget", sku="W-1", price="1.00", current_stock=0)


class TestProductDerivedValues:

    def test_inventory_value(self):
        assert make_product(price="2.50", current_stock=4).inventory_value == Money.of("10.00")

    def test_out_of_stock_is_not_low_stock(self):
        p = make_product(current_stock=0)
        assert p.is_out_of_stock
        assert not p.is_low_stock
        assert p.needs_restock
        assert p.stock_status is StockStatus.OUT

    def test_at_threshold_is_low(self):
        p = make_product(current_stock=10, low_stock_threshold=10)
        assert p.is_low_stock
        assert p.stock_status is StockStatus.LOW

    def test_above_threshold_does_not_need_restock(self):
        assert not make_product(current_stock=11, low_stock_threshold=10).needs_restock


class TestProductMerged:

    def test_applies_changes_and_stamps(self):
        p = make_product(current_stock=5)
        merged = p.merged({"current_stock": 8, "name": "Gizmo"}, LATER)
        assert merged.current_stock == 8
        assert merged.name == "Gizmo"
        assert merged.last_updated == LATER

    def test_does_not_modify_original(self):
        p = make_product(current_stock=5)
        p.merged({"current_stock": 8}, LATER)
        assert p.current_stock == 5
        assert p.last_updated == START

    def test_id_and_timestamp_in_changes_are_ignored(self):
        p = make_product(id=7)
        merged = p.merged({"id": 99, "last_updated": START, "sku": "NEW"}, LATER)
        assert merged.id == 7
        assert merged.last_updated == LATER
        assert merged.sku == "NEW"

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="Unknown product field"):
            make_product().merged({"colour": "red"}, LATER)

    def test_invalid_change_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            make_product().merged({"current_stock": -3}, LATER)
