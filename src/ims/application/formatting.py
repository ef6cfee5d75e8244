"""Display formatting for amounts, counts and timestamps."""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from ims.domain.model.value_objects import Money

_CENTS = Decimal("0.01")


def format_currency(money: Money) -> str:
    """``$1,234.50``: two decimals, rounded half up."""
    amount = money.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"${amount:,.2f}"


def format_number(value: int) -> str:
    return f"{value:,}"


def format_datetime(moment: datetime | None) -> str:
    """``Jan 05, 2026 02:30 PM``; a dash for unknown timestamps."""
    if moment is None:
        return "-"
    return moment.strftime("%b %d, %Y %I:%M %p")
