"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Any

from ims.application.dto import ProductDTO
from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        sku: str | None = None,
        price: str | None = None,
        current_stock: int | None = None,
        low_stock_threshold: int | None = None,
    ) -> ProductDTO:
        """Change any subset of a product's editable fields.

        Fields left as None keep their stored value.
        """
        changes: dict[str, Any] = {}
        if name is not None:
            changes["name"] = name
        if sku is not None:
            changes["sku"] = sku
        if price is not None:
            changes["price"] = Money.of(price)
        if current_stock is not None:
            changes["current_stock"] = current_stock
        if low_stock_threshold is not None:
            changes["low_stock_threshold"] = low_stock_threshold

        if not changes:
            raise ValidationError("Nothing to update")

        return ProductDTO.from_product(self._product_repo.update(product_id, changes))
