"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from freshcart.domain.exceptions import EntityNotFoundError, ValidationError
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import Money, to_decimal
from freshcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        price: str | None = None,
        min_quantity: str | Decimal | None = None,
        in_stock: bool | None = None,
        description: str | None = None,
        category: str | None = None,
        image: str | None = None,
    ) -> Product:
        """Update the given fields of a product; ``None`` leaves a field as is.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None and name.strip() != product.name:
            clash = self._product_repo.get_by_name(name.strip())
            if clash is not None and clash.id != product.id:
                raise ValidationError(f"Product '{name.strip()}' already exists")
            product.rename(name)
        if price is not None:
            product.update_price(Money.of(price))
        if min_quantity is not None:
            product.update_min_quantity(to_decimal(min_quantity, "minimum quantity"))
        if in_stock is not None:
            product.in_stock = in_stock
        if description is not None:
            product.description = description
        if category is not None:
            product.category = category
        if image is not None:
            product.image = image

        self._product_repo.save(product)
        logger.info("Product #%s '%s' updated", product.id, product.name)
        return product
