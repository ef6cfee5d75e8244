"""Application service: Add Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.exceptions import ValidationError
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, ProductDraft
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        sku: str,
        price: str,
        current_stock: int,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not sku or not sku.strip():
            raise ValidationError("SKU is required")

        draft = ProductDraft(
            name=name.strip(),
            sku=sku.strip(),
            price=Money.of(price),
            current_stock=current_stock,
            low_stock_threshold=low_stock_threshold,
        )
        return ProductDTO.from_product(self._product_repo.create(draft))
