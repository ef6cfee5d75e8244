"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import threading
from collections.abc import Callable, Mapping
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

import structlog

from ims.domain.model.product import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    Product,
    ProductDraft,
)
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.persistence.clock import Clock, utc_now

logger = structlog.get_logger(__name__)


class JsonProductRepository(ProductRepository):
    """Stores the catalog as a JSON list of product records.

    Every mutation reloads the file, applies the change and writes it
    back before returning, so reads always see the last committed state.
    """

    def __init__(
        self,
        file_path: Path,
        clock: Clock = utc_now,
    ) -> None:
        self._file_path = file_path
        self._clock = clock
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._load().values())

    def get_by_id(self, product_id: int) -> Product:
        with self._lock:
            product = self._load().get(product_id)
        if product is None:
            raise self.not_found(product_id)
        return product

    def create(self, draft: ProductDraft) -> Product:
        with self._lock:
            products = self._load()
            product = Product.from_draft(
                draft, self.next_id(products.values()), self._clock()
            )
            products[product.id] = product
            self._persist(products)
        logger.info("product_created", product_id=product.id, sku=product.sku)
        return product

    def update(self, product_id: int, changes: Mapping[str, Any]) -> Product:
        _, updated = self.update_with(product_id, lambda _current: changes)
        return updated

    def update_with(
        self,
        product_id: int,
        change: Callable[[Product], Mapping[str, Any]],
    ) -> tuple[Product, Product]:
        with self._lock:
            products = self._load()
            existing = products.get(product_id)
            if existing is None:
                raise self.not_found(product_id)
            changes = change(existing.copy())
            updated = existing.merged(changes, self._clock())
            products[product_id] = updated
            self._persist(products)
        logger.info("product_updated", product_id=product_id, fields=sorted(changes))
        return existing, updated

    def delete(self, product_id: int) -> Product:
        with self._lock:
            products = self._load()
            removed = products.pop(product_id, None)
            if removed is None:
                raise self.not_found(product_id)
            self._persist(products)
        logger.info("product_deleted", product_id=product_id)
        return removed

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "sku": product.sku,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "current_stock": product.current_stock,
            "low_stock_threshold": product.low_stock_threshold,
            "last_updated": (
                product.last_updated.isoformat() if product.last_updated else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        last_updated = raw.get("last_updated")
        return Product(
            id=int(raw["id"]),
            name=raw["name"],
            sku=raw["sku"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            current_stock=raw["current_stock"],
            low_stock_threshold=raw.get("low_stock_threshold", DEFAULT_LOW_STOCK_THRESHOLD),
            last_updated=datetime.fromisoformat(last_updated) if last_updated else None,
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        products = (self._to_domain(item) for item in raw)
        return {p.id: p for p in products}

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
