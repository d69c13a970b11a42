"""Application service: Show Product use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDetailsDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork

RELATED_LIMIT = 4


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> ProductDetailsDTO:
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            related = [
                p for p in self._uow.products.list_by_filter(category=product.category)
                if p.id != product.id
            ][:RELATED_LIMIT]
        return ProductDetailsDTO(
            product=product_to_dto(product),
            related=[product_to_dto(p) for p in related],
        )
