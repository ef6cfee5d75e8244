"""Application service: List Products use case (query).

Search and status filter are applied first, then the sort.
"""

from __future__ import annotations

from ims.application.dto import ProductDTO, ProductListDTO
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.catalog_view import (
    SortDirection,
    SortField,
    SortState,
    StatusFilter,
    build_view,
    parse_choice,
)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        search: str | None = None,
        status: StatusFilter | str = StatusFilter.ALL,
        sort_field: SortField | str = SortField.NAME,
        sort_direction: SortDirection | str = SortDirection.ASC,
    ) -> ProductListDTO:
        status = parse_choice(StatusFilter, status)
        sort = SortState(
            parse_choice(SortField, sort_field),
            parse_choice(SortDirection, sort_direction),
        )

        products = self._product_repo.list_all()
        view = build_view(products, search=search, status=status, sort=sort)

        return ProductListDTO(
            products=[ProductDTO.from_product(p) for p in view],
            total_count=len(products),
            search=search,
            is_filtered=bool(search and search.strip()) or status is not StatusFilter.ALL,
        )
