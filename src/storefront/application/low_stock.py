"""Application service: Low Stock use case (query)."""

from __future__ import annotations

from storefront.application.dto import StockSummary
from storefront.domain.repository.unit_of_work import UnitOfWork

LOW_STOCK_THRESHOLD = 10


class LowStockHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[StockSummary]:
        with self._uow:
            products = self._uow.products.list_low_stock(threshold)
        return [
            StockSummary(product_id=p.id, product_name=p.name, stock=p.stock)  # type: ignore[arg-type]
            for p in products
        ]
