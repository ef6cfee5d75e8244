"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from ims.application.dto import DashboardDTO
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.aggregation import (
    DEFAULT_LOW_STOCK_LIMIT,
    low_stock_list,
    recent_products,
    summarize,
)


class ShowDashboardHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, limit: int = DEFAULT_LOW_STOCK_LIMIT) -> DashboardDTO:
        products = self._product_repo.list_all()
        return DashboardDTO.build(
            summarize(products),
            low_stock_list(products, limit),
            recent_products(products),
        )
