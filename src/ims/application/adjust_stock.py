"""Application service: Adjust Stock use case.

Thin wrapper over StockAdjustmentService; the clamped arithmetic lives
there and nowhere else.
"""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.model.value_objects import AdjustmentDirection
from ims.domain.service.stock_adjustment_service import StockAdjustmentService


class AdjustStockHandler:

    def __init__(self, adjustment_service: StockAdjustmentService) -> None:
        self._adjustment_service = adjustment_service

    def handle(
        self,
        product_id: int,
        direction: AdjustmentDirection | str,
        quantity: int,
        notes: str = "",
    ) -> ProductDTO:
        product = self._adjustment_service.adjust(
            product_id, direction, quantity, notes=notes
        )
        return ProductDTO.from_product(product)
