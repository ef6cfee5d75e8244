"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.application.formatting import (
    format_currency,
    format_datetime,
    format_number,
)
from ims.domain.model.product import Product
from ims.domain.service.aggregation import InventorySummary


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    name: str
    sku: str
    price: str  # formatted, e.g. "$15.00"
    current_stock: int
    low_stock_threshold: int
    status: str  # e.g. "Low Stock"
    value: str
    last_updated: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            sku=product.sku,
            price=format_currency(product.price),
            current_stock=product.current_stock,
            low_stock_threshold=product.low_stock_threshold,
            status=product.stock_status.label,
            value=format_currency(product.inventory_value),
            last_updated=format_datetime(product.last_updated),
        )


@dataclass(frozen=True)
class ProductListDTO:
    """Output: a filtered, sorted listing plus how much was filtered out."""

    products: list[ProductDTO]
    total_count: int
    search: str | None
    is_filtered: bool

    @property
    def shown_count(self) -> int:
        return len(self.products)

    @property
    def caption(self) -> str:
        text = f"Showing {self.shown_count} of {self.total_count} products"
        if self.search and self.search.strip():
            text += f' matching "{self.search.strip()}"'
        return text


@dataclass(frozen=True)
class DashboardDTO:
    """Output: headline numbers plus the low stock and recent product lists."""

    total_products: str
    low_stock_count: str
    out_of_stock_count: str
    total_value: str
    low_stock: list[ProductDTO]
    recent: list[ProductDTO]

    @staticmethod
    def build(
        summary: InventorySummary,
        low_stock: list[Product],
        recent: list[Product],
    ) -> DashboardDTO:
        return DashboardDTO(
            total_products=format_number(summary.total_products),
            low_stock_count=format_number(summary.low_stock_count),
            out_of_stock_count=format_number(summary.out_of_stock_count),
            total_value=format_currency(summary.total_value),
            low_stock=[ProductDTO.from_product(p) for p in low_stock],
            recent=[ProductDTO.from_product(p) for p in recent],
        )
