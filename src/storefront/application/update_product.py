"""Application service: Update Product use cases (price and stock)."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, new_price: str) -> None:
        """Update a product's price.

        This does NOT affect any carts or orders; both captured a price
        snapshot already.
        """
        with self._uow:
            product = _require(self._uow.products.get_by_id(product_id), product_id)
            product.update_price(Money.of(new_price))
            self._uow.products.save(product)
            self._uow.commit()


class UpdateStockHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: int,
        new_stock: int | None = None,
        stock_change: int | None = None,
    ) -> int:
        """Set or adjust a product's stock; the result never drops below 0.

        An absolute ``new_stock`` wins over a relative ``stock_change``.
        Returns the resulting stock level.
        """
        if new_stock is None and stock_change is None:
            raise ValidationError("Provide a new stock level or a stock change")

        with self._uow:
            product = _require(self._uow.products.get_by_id(product_id), product_id)
            if new_stock is not None:
                product.set_stock(new_stock)
            else:
                product.adjust_stock(stock_change)  # type: ignore[arg-type]
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("Stock updated", product_id=product_id, stock=product.stock)
        return product.stock


def _require(product: Product | None, product_id: int) -> Product:
    if product is None:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product
