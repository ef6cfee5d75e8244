"""Domain service: Stock Adjustment.

The single place where a requested add/subtract is turned into a new
stock level. Subtracting more than is on hand is not an error: the
result is clamped at zero.

Validate-then-mutate: the amount and direction are checked before the
repository is touched, so a rejected request never writes anything.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

import structlog

from ims.domain.model.product import Product
from ims.domain.model.value_objects import AdjustmentAmount, AdjustmentDirection
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StockAdjustment:
    """Record of one applied adjustment, handed to the audit sink."""

    product_id: int
    direction: AdjustmentDirection
    amount: int
    previous_stock: int
    new_stock: int
    notes: str
    applied_at: datetime | None


AuditSink = Callable[[StockAdjustment], None]


def compute_new_stock(
    current_stock: int, direction: AdjustmentDirection, amount: AdjustmentAmount
) -> int:
    if direction is AdjustmentDirection.ADD:
        return current_stock + amount.value
    return max(0, current_stock - amount.value)


class StockAdjustmentService:

    def __init__(
        self,
        product_repo: ProductRepository,
        audit_sink: AuditSink | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._audit_sink = audit_sink

    def adjust(
        self,
        product_id: int,
        direction: AdjustmentDirection | str,
        amount: int,
        notes: str = "",
    ) -> Product:
        """Add or subtract ``amount`` units and persist the new level.

        Raises InvalidAmountError for a non-positive or non-integer
        amount and EntityNotFoundError for an unknown product.
        """
        quantity = AdjustmentAmount(amount)
        direction = AdjustmentDirection.parse(direction)

        # Read and write happen under the repository lock
        product, updated = self._product_repo.update_with(
            product_id,
            lambda current: {
                "current_stock": compute_new_stock(
                    current.current_stock, direction, quantity
                )
            },
        )

        if direction is AdjustmentDirection.SUBTRACT and product.current_stock < quantity.value:
            logger.warning(
                "stock_subtraction_clamped",
                product_id=product_id,
                requested=quantity.value,
                available=product.current_stock,
            )
        logger.info(
            "stock_adjusted",
            product_id=product_id,
            direction=direction.value,
            amount=quantity.value,
            previous_stock=product.current_stock,
            new_stock=updated.current_stock,
        )

        if self._audit_sink is not None:
            self._audit_sink(
                StockAdjustment(
                    product_id=product_id,
                    direction=direction,
                    amount=quantity.value,
                    previous_stock=product.current_stock,
                    new_stock=updated.current_stock,
                    notes=notes,
                    applied_at=updated.last_updated,
                )
            )
        return updated
