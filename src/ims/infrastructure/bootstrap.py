"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Each CLI invocation
builds one repository here and hands it to the handlers it runs.
"""

from __future__ import annotations

import structlog

from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.stock_adjustment_service import (
    StockAdjustment,
    StockAdjustmentService,
)
from ims.infrastructure.config import Settings
from ims.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

audit_logger = structlog.get_logger("ims.audit")


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_file)


def log_adjustment(adjustment: StockAdjustment) -> None:
    """Audit sink that writes each adjustment, notes included, to the log."""
    audit_logger.info(
        "stock_adjustment",
        product_id=adjustment.product_id,
        direction=adjustment.direction.value,
        amount=adjustment.amount,
        previous_stock=adjustment.previous_stock,
        new_stock=adjustment.new_stock,
        notes=adjustment.notes,
    )


def stock_adjustment_service(product_repo: ProductRepository) -> StockAdjustmentService:
    return StockAdjustmentService(product_repo, audit_sink=log_adjustment)
