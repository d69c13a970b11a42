"""SQLAlchemy implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.orm import Session

from storefront.domain.model.product import DRESS, MENS, WOMENS, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.tables import ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductRow, product_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    def get_many_by_id(self, product_ids: Iterable[int]) -> dict[int, Product]:
        ids = list(product_ids)
        if not ids:
            return {}
        rows = self._session.scalars(select(ProductRow).where(ProductRow.id.in_(ids)))
        return {row.id: self._to_domain(row) for row in rows}

    def get_by_name(self, name: str) -> Product | None:
        row = self._session.scalars(
            select(ProductRow).where(func.lower(ProductRow.name) == name.strip().lower())
        ).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        rows = self._session.scalars(select(ProductRow).order_by(ProductRow.id))
        return [self._to_domain(row) for row in rows]

    def list_by_filter(
        self,
        category: str | None = None,
        sub_category: str | None = None,
        gender: str | None = None,
    ) -> list[Product]:
        query = select(ProductRow)
        if category:
            query = query.where(ProductRow.category == category)
        if sub_category:
            query = query.where(ProductRow.sub_category == sub_category)
        if gender == MENS:
            query = query.where(ProductRow.sub_category == MENS)
        elif gender == WOMENS:
            query = query.where(
                or_(ProductRow.sub_category == WOMENS, ProductRow.category == DRESS)
            )
        rows = self._session.scalars(query.order_by(ProductRow.id))
        return [self._to_domain(row) for row in rows]

    def list_low_stock(self, threshold: int) -> list[Product]:
        rows = self._session.scalars(
            select(ProductRow)
            .where(ProductRow.stock < threshold)
            .order_by(ProductRow.stock, ProductRow.id)
        )
        return [self._to_domain(row) for row in rows]

    def save(self, product: Product) -> None:
        row = None
        if product.id is not None:
            row = self._session.get(ProductRow, product.id)
        if row is None:
            row = ProductRow(id=product.id)
            self._session.add(row)
        self._apply(product, row)
        self._session.flush()
        product.id = row.id

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        # Single conditional UPDATE: the stock check and the write cannot
        # be separated by a concurrent checkout.
        result = self._session.execute(
            update(ProductRow)
            .where(ProductRow.id == product_id, ProductRow.stock >= quantity)
            .values(stock=ProductRow.stock - quantity)
        )
        return result.rowcount == 1

    def delete(self, product_id: int) -> bool:
        # order_items.product_id is cleared by ON DELETE SET NULL.
        result = self._session.execute(delete(ProductRow).where(ProductRow.id == product_id))
        return result.rowcount == 1

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _apply(product: Product, row: ProductRow) -> None:
        row.name = product.name
        row.category = product.category
        row.sub_category = product.sub_category
        row.price = product.price.amount
        row.currency = product.price.currency
        row.image_path = product.image_path
        row.description = product.description
        row.stock = product.stock

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money(row.price, row.currency),
            stock=row.stock,
            image_path=row.image_path,
            category=row.category,
            sub_category=row.sub_category,
            description=row.description,
        )
