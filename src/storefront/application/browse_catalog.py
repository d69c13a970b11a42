"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import GENDERS
from storefront.domain.repository.unit_of_work import UnitOfWork


class BrowseCatalogHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        category: str | None = None,
        sub_category: str | None = None,
        gender: str | None = None,
    ) -> list[ProductDTO]:
        """List catalog products, optionally narrowed down.

        Filters are case-insensitive; a women's listing also includes
        every dress.
        """
        category = _normalise(category)
        sub_category = _normalise(sub_category)
        gender = _normalise(gender)
        if gender and gender not in GENDERS:
            raise ValidationError(f"Invalid gender '{gender}'")

        with self._uow:
            products = self._uow.products.list_by_filter(category, sub_category, gender)
        return [product_to_dto(p) for p in products]


def _normalise(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip().upper() or None
