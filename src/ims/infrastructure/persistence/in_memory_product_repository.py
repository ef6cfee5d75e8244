"""Dict-backed implementation of ProductRepository.

Keeps everything in process memory; nothing survives the process.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from typing import Any

import structlog

from ims.domain.model.product import Product, ProductDraft
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.persistence.clock import Clock, utc_now

logger = structlog.get_logger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(
        self,
        products: list[Product] | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._store: dict[int, Product] = {}
        self._clock = clock
        self._lock = threading.Lock()
        for p in products or []:
            self._store[p.id] = p.copy()

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        with self._lock:
            return [p.copy() for p in self._store.values()]

    def get_by_id(self, product_id: int) -> Product:
        with self._lock:
            return self._get(product_id).copy()

    def create(self, draft: ProductDraft) -> Product:
        with self._lock:
            product = Product.from_draft(
                draft, self.next_id(self._store.values()), self._clock()
            )
            self._store[product.id] = product
        logger.info("product_created", product_id=product.id, sku=product.sku)
        return product.copy()

    def update(self, product_id: int, changes: Mapping[str, Any]) -> Product:
        _, updated = self.update_with(product_id, lambda _current: changes)
        return updated

    def update_with(
        self,
        product_id: int,
        change: Callable[[Product], Mapping[str, Any]],
    ) -> tuple[Product, Product]:
        with self._lock:
            existing = self._get(product_id)
            changes = change(existing.copy())
            updated = existing.merged(changes, self._clock())
            self._store[product_id] = updated
        logger.info("product_updated", product_id=product_id, fields=sorted(changes))
        return existing.copy(), updated.copy()

    def delete(self, product_id: int) -> Product:
        with self._lock:
            self._get(product_id)
            removed = self._store.pop(product_id)
        logger.info("product_deleted", product_id=product_id)
        return removed

    # --- Internal helpers -----------------------------------------------------

    def _get(self, product_id: int) -> Product:
        product = self._store.get(product_id)
        if product is None:
            raise self.not_found(product_id)
        return product
