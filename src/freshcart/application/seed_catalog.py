"""Application service: Seed Catalog use case.

Initial setup only: fills an empty catalog with a handful of staple
vegetables and fruit.  A catalog that already has products is left alone.
"""

from __future__ import annotations

from freshcart.application.add_product import AddProductHandler
from freshcart.domain.model.product import Product
from freshcart.domain.repository.product_repository import ProductRepository

# name, price per kg, minimum kg, category, description
SAMPLE_PRODUCTS: list[tuple[str, str, str, str, str]] = [
    ("Potato", "45.00", "1.0", "vegetables", "Fresh locally grown potatoes"),
    ("Carrot", "60.00", "0.5", "vegetables", "Juicy carrots"),
    ("Onion", "40.00", "0.5", "vegetables", "Yellow onions"),
    ("Tomato", "180.00", "0.5", "vegetables", "Ripe tomatoes"),
    ("Cucumber", "150.00", "0.5", "vegetables", "Crisp cucumbers"),
    ("Apple", "120.00", "1.0", "fruits", "Sweet apples"),
]


class SeedCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        """Return the products added; empty if the catalog was not empty."""
        if self._product_repo.list_all():
            return []
        add = AddProductHandler(self._product_repo)
        return [
            add.handle(
                name=name,
                price=price,
                min_quantity=minimum,
                category=category,
                description=description,
            )
            for name, price, minimum, category, description in SAMPLE_PRODUCTS
        ]
