"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON file)
live in the infrastructure layer and are interchangeable.

Contract shared by every implementation:

- reads return copies; mutating a returned Product never touches the store
- ``list_all`` preserves insertion/update order
- ``create`` assigns ``id = max(existing ids) + 1`` (``1`` when empty), so
  the id of a deleted highest product is handed out again
- ``create`` and ``update`` stamp ``last_updated``
- ``get_by_id``, ``update``, ``update_with`` and ``delete`` raise
  EntityNotFoundError for an unknown id; updates never create a record
- ``update_with`` reads, computes and writes under one lock, so concurrent
  callers in the same process never lose each other's changes
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.product import Product, ProductDraft


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return a snapshot of every product in the catalog."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product:
        """Return a product by its ID, or raise EntityNotFoundError."""

    @abstractmethod
    def create(self, draft: ProductDraft) -> Product:
        """Store a new product and return it with its assigned ID."""

    @abstractmethod
    def update(self, product_id: int, changes: Mapping[str, Any]) -> Product:
        """Merge ``changes`` over an existing product and return the result."""

    @abstractmethod
    def update_with(
        self,
        product_id: int,
        change: Callable[[Product], Mapping[str, Any]],
    ) -> tuple[Product, Product]:
        """Apply ``change(current)`` atomically; return ``(before, after)``."""

    @abstractmethod
    def delete(self, product_id: int) -> Product:
        """Remove a product and return the removed record."""

    # --- Helpers shared by implementations ------------------------------------

    @staticmethod
    def next_id(products: Iterable[Product]) -> int:
        return max((p.id for p in products), default=0) + 1

    @staticmethod
    def not_found(product_id: int) -> EntityNotFoundError:
        return EntityNotFoundError(f"Product with ID '{product_id}' not found")
