"""Search, status filter and sort for product listings.

Every function returns a new list; the input snapshot is never
reordered or modified. Filtering always happens before sorting.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product


class StatusFilter(Enum):
    ALL = "all"
    NORMAL = "normal"
    LOW = "low"
    OUT = "out"

    def matches(self, product: Product) -> bool:
        if self is StatusFilter.NORMAL:
            return product.current_stock > product.low_stock_threshold
        if self is StatusFilter.LOW:
            return product.is_low_stock
        if self is StatusFilter.OUT:
            return product.is_out_of_stock
        return True


class SortField(Enum):
    NAME = "name"
    SKU = "sku"
    PRICE = "price"
    CURRENT_STOCK = "current_stock"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


_SORT_KEYS: dict[SortField, Callable[[Product], Any]] = {
    SortField.NAME: lambda p: p.name.casefold(),
    SortField.SKU: lambda p: p.sku.casefold(),
    SortField.PRICE: lambda p: p.price.amount,
    SortField.CURRENT_STOCK: lambda p: p.current_stock,
}


@dataclass(frozen=True)
class SortState:
    """Current column sort of a listing.

    Selecting the active field again flips the direction; selecting a
    different field starts over in ascending order.
    """

    field: SortField = SortField.NAME
    direction: SortDirection = SortDirection.ASC

    def toggle(self, field: SortField) -> SortState:
        if field is self.field:
            return SortState(field, self.direction.flipped())
        return SortState(field, SortDirection.ASC)


def parse_choice(enum_cls: type[Enum], raw: Any) -> Any:
    """Coerce ``raw`` to a member of ``enum_cls`` or raise ValidationError."""
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(
            f"Invalid {enum_cls.__name__} {raw!r} (expected one of: {allowed})"
        ) from exc


def search_products(products: Sequence[Product], term: str | None) -> list[Product]:
    """Case-insensitive substring match on name or SKU.

    A blank term matches everything.
    """
    if term is None or not term.strip():
        return list(products)
    needle = term.strip().casefold()
    return [
        p for p in products
        if needle in p.name.casefold() or needle in p.sku.casefold()
    ]


def filter_by_status(
    products: Sequence[Product], status: StatusFilter = StatusFilter.ALL
) -> list[Product]:
    return [p for p in products if status.matches(p)]


def sort_products(
    products: Sequence[Product],
    field: SortField = SortField.NAME,
    direction: SortDirection = SortDirection.ASC,
) -> list[Product]:
    """Stable sort; equal keys keep their input order in both directions."""
    key = _SORT_KEYS[field]
    # sorted(reverse=True) keeps equal elements in their original order
    return sorted(products, key=key, reverse=direction is SortDirection.DESC)


def build_view(
    products: Sequence[Product],
    search: str | None = None,
    status: StatusFilter = StatusFilter.ALL,
    sort: SortState | None = None,
) -> list[Product]:
    sort = sort or SortState()
    filtered = filter_by_status(search_products(products, search), status)
    return sort_products(filtered, sort.field, sort.direction)
