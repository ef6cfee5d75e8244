"""Application service: Remove Product use case.

Deletion is final; the removed record is returned so the caller can
report what was deleted.
"""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.repository.product_repository import ProductRepository


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        return ProductDTO.from_product(self._product_repo.delete(product_id))
