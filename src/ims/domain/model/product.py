"""Product aggregate.

The only entity in the inventory. A product knows its price, how many
units are on hand, and the threshold below which it counts as low stock.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money, StockStatus

DEFAULT_LOW_STOCK_THRESHOLD = 10


def _require_text(value: Any, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Product {label} is required")


def _require_count(value: Any, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"Product {label} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"Product {label} cannot be negative, got {value}")


@dataclass(frozen=True)
class ProductDraft:
    """Caller-supplied data for a product that has not been stored yet."""

    name: str
    sku: str
    price: Money
    current_stock: int
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``name`` and ``sku`` are non-blank
    - ``price`` is never negative (enforced by Money)
    - ``current_stock`` and ``low_stock_threshold`` are integers >= 0

    ``id`` and ``last_updated`` belong to the repository; callers
    never choose them.
    """

    id: int
    name: str
    sku: str
    price: Money
    current_stock: int
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    last_updated: datetime | None = None

    def __post_init__(self) -> None:
        _require_text(self.name, "name")
        _require_text(self.sku, "SKU")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )
        _require_count(self.current_stock, "stock")
        _require_count(self.low_stock_threshold, "low stock threshold")
        self.name = self.name.strip()
        self.sku = self.sku.strip()

    # --- Derived values -------------------------------------------------------

    @property
    def stock_status(self) -> StockStatus:
        return StockStatus.classify(self.current_stock, self.low_stock_threshold)

    @property
    def is_out_of_stock(self) -> bool:
        return self.current_stock == 0

    @property
    def is_low_stock(self) -> bool:
        """True for ``0 < current_stock <= low_stock_threshold``."""
        return 0 < self.current_stock <= self.low_stock_threshold

    @property
    def needs_restock(self) -> bool:
        """Low or out of stock, i.e. at or below the threshold."""
        return self.current_stock <= self.low_stock_threshold

    @property
    def inventory_value(self) -> Money:
        return self.price * self.current_stock

    # --- Construction helpers -------------------------------------------------

    @classmethod
    def from_draft(
        cls, draft: ProductDraft, product_id: int, stamped_at: datetime
    ) -> Product:
        return cls(
            id=product_id,
            name=draft.name,
            sku=draft.sku,
            price=draft.price,
            current_stock=draft.current_stock,
            low_stock_threshold=draft.low_stock_threshold,
            last_updated=stamped_at,
        )

    def merged(self, changes: Mapping[str, Any], stamped_at: datetime) -> Product:
        """Return a copy with ``changes`` applied over this product.

        ``id`` and ``last_updated`` in ``changes`` are ignored: the id
        never changes and the timestamp is always ``stamped_at``.
        """
        unknown = set(changes) - EDITABLE_FIELDS - _SERVER_FIELDS
        if unknown:
            raise ValidationError(
                f"Unknown product field(s): {', '.join(sorted(unknown))}"
            )
        editable = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
        return replace(self, **editable, id=self.id, last_updated=stamped_at)

    def copy(self) -> Product:
        return replace(self)


_SERVER_FIELDS = frozenset({"id", "last_updated"})
EDITABLE_FIELDS = frozenset(f.name for f in fields(Product)) - _SERVER_FIELDS
