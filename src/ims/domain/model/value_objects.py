"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from ims.domain.exceptions import InvalidAmountError, ValidationError


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Uses Decimal so that inventory valuations add up to the cent.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount.is_zero() and self.amount.is_signed():
            object.__setattr__(self, "amount", self.amount.copy_abs())

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)


@dataclass(frozen=True)
class AdjustmentAmount:
    """A strictly positive whole number of units to add or remove."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidAmountError(
                f"Adjustment amount must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidAmountError(
                f"Adjustment amount must be positive, got {self.value}"
            )


class AdjustmentDirection(Enum):
    ADD = "add"
    SUBTRACT = "subtract"

    @classmethod
    def parse(cls, raw: str | AdjustmentDirection) -> AdjustmentDirection:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown adjustment direction {raw!r} (expected 'add' or 'subtract')"
            ) from exc


class StockStatus(Enum):
    """Stock level classification, derived from stock and threshold."""

    OUT = "out"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @staticmethod
    def classify(current_stock: int, low_stock_threshold: int) -> StockStatus:
        if current_stock == 0:
            return StockStatus.OUT
        if current_stock <= low_stock_threshold:
            return StockStatus.LOW
        if current_stock <= low_stock_threshold * 2:
            return StockStatus.MEDIUM
        return StockStatus.HIGH


_STATUS_LABELS = {
    StockStatus.OUT: "Out of Stock",
    StockStatus.LOW: "Low Stock",
    StockStatus.MEDIUM: "Medium Stock",
    StockStatus.HIGH: "In Stock",
}
