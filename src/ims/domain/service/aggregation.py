"""Dashboard aggregation over a product snapshot.

Pure functions: they read the products they are given and nothing else.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money

DEFAULT_LOW_STOCK_LIMIT = 5
RECENT_PRODUCTS_LIMIT = 10


@dataclass(frozen=True)
class InventorySummary:
    total_products: int
    low_stock_count: int
    out_of_stock_count: int
    total_value: Money


def summarize(products: Sequence[Product]) -> InventorySummary:
    """Count products and value the stock on hand.

    Out-of-stock products are not counted as low stock.
    """
    total_value = Money.zero()
    for product in products:
        total_value = total_value + product.inventory_value

    return InventorySummary(
        total_products=len(products),
        low_stock_count=sum(1 for p in products if p.is_low_stock),
        out_of_stock_count=sum(1 for p in products if p.is_out_of_stock),
        total_value=total_value,
    )


def low_stock_list(
    products: Sequence[Product], limit: int = DEFAULT_LOW_STOCK_LIMIT
) -> list[Product]:
    """Products at or below their threshold, emptiest first.

    Includes out-of-stock products. Ties keep snapshot order.
    """
    if limit < 0:
        raise ValidationError(f"Limit cannot be negative, got {limit}")
    candidates = [p for p in products if p.needs_restock]
    candidates.sort(key=lambda p: p.current_stock)
    return candidates[:limit]


def recent_products(
    products: Sequence[Product], limit: int = RECENT_PRODUCTS_LIMIT
) -> list[Product]:
    """The first ``limit`` products in snapshot order."""
    if limit < 0:
        raise ValidationError(f"Limit cannot be negative, got {limit}")
    return list(products[:limit])
