"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from freshcart.domain.exceptions import StorageError, ValidationError
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import Money
from freshcart.domain.repository.product_repository import ProductRepository
from freshcart.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        ids = [int(p.id) for p in self._load().values() if p.id.isdigit()]
        return str(max(ids, default=0) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        products = self._load()
        return products.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return sorted(self._load().values(), key=lambda p: p.name.lower())

    def save(self, product: Product) -> None:
        with self._file.locked():
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def delete(self, product_id: str) -> bool:
        with self._file.locked():
            products = self._load()
            if products.pop(product_id, None) is None:
                return False
            self._persist(products)
            return True

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            return {
                item["id"]: Product(
                    id=item["id"],
                    name=item["name"],
                    price=Money(Decimal(item["price"])),
                    min_quantity=Decimal(item["minQuantity"]),
                    in_stock=item.get("inStock", True),
                    description=item.get("description", ""),
                    category=item.get("category", "other"),
                    image=item.get("image", ""),
                )
                for item in self._file.load()
            }
        except (KeyError, TypeError, ArithmeticError, ValueError, ValidationError) as exc:
            raise StorageError(f"Corrupt product record: {exc}") from exc

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "minQuantity": str(p.min_quantity),
                "inStock": p.in_stock,
                "description": p.description,
                "category": p.category,
                "image": p.image,
            }
            for p in products.values()
        ]
        self._file.persist(raw)
