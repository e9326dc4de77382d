"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import QUANTITY_STEP, Money, to_decimal
from freshcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        min_quantity: str | Decimal = QUANTITY_STEP,
        in_stock: bool = True,
        description: str = "",
        category: str = "other",
        image: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            price=Money.of(price),
            min_quantity=to_decimal(min_quantity, "minimum quantity"),
            in_stock=in_stock,
            description=description,
            category=category or "other",
            image=image,
        )
        self._product_repo.save(product)
        logger.info("Product #%s '%s' added at %s", product.id, product.name, product.price)
        return product
