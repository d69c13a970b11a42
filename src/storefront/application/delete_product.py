"""Application service: Delete Product use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> None:
        """Remove a product from the catalog.

        Orders that already contain it keep their item snapshot (name,
        quantity, price); carts holding it fail the checkout pre-check.
        """
        with self._uow:
            if not self._uow.products.delete(product_id):
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            self._uow.commit()

        logger.info("Product deleted", product_id=product_id)
