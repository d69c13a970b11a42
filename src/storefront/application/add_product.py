"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        price: str,
        stock: int = 0,
        image_path: str = "",
        category: str = "",
        sub_category: str = "",
        description: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = Product(
            id=None,
            name=name.strip(),
            price=Money.of(price),
            stock=stock,
            image_path=image_path,
            category=category.upper(),
            sub_category=sub_category.upper(),
            description=description,
        )

        with self._uow:
            existing = self._uow.products.get_by_name(product.name)
            if existing is not None:
                raise ValidationError(f"Product '{existing.name}' already exists")
            self._uow.products.save(product)
            self._uow.commit()
        return product
