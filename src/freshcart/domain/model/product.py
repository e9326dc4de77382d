"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices change, products go out of stock, products are added
to and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.value_objects import QUANTITY_STEP, Money


@dataclass
class Product:
    """A product in the catalog.

    Prices are per kilogram; ``min_quantity`` is the smallest weight a
    customer may order.
    """

    id: str
    name: str
    price: Money
    min_quantity: Decimal = QUANTITY_STEP
    in_stock: bool = True
    description: str = ""
    category: str = "other"
    image: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        if self.min_quantity <= 0:
            raise ValidationError("Minimum quantity must be greater than zero")

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def update_min_quantity(self, new_minimum: Decimal) -> None:
        if new_minimum <= 0:
            raise ValidationError("Minimum quantity must be greater than zero")
        self.min_quantity = new_minimum

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise ValidationError("Product name is required")
        self.name = new_name.strip()
