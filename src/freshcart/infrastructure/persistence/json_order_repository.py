"""JSON-file-backed implementation of OrderRepository.

Records use the storefront's field names (``customerName``,
``whatsappNumber``, ``deliveryAddress``, ``totalAmount``, ``items[]``).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from freshcart.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from freshcart.domain.model.order import Order, OrderItem, OrderStatus
from freshcart.domain.model.value_objects import ContactNumber, Money, Quantity
from freshcart.domain.repository.order_repository import OrderRepository
from freshcart.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._records():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._records()]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def add(self, order: Order) -> None:
        with self._file.locked():
            orders = self._records()
            order.id = max((o["id"] for o in orders), default=0) + 1
            orders.append(self._to_raw(order))
            self._file.persist(orders)

    def update_status(self, order: Order, expected_status: OrderStatus) -> None:
        with self._file.locked():
            orders = self._records()
            for raw in orders:
                if raw["id"] == order.id:
                    break
            else:
                raise EntityNotFoundError(f"Order #{order.id} not found")

            if raw["status"] != expected_status.value:
                raise ConflictError(
                    f"Order #{order.id} was changed to {raw['status']} "
                    f"by someone else; reload and try again"
                )
            raw["status"] = order.status.value
            raw["updatedAt"] = order.updated_at.isoformat()
            self._file.persist(orders)

    def delete(self, order_id: int) -> bool:
        with self._file.locked():
            orders = self._records()
            remaining = [raw for raw in orders if raw["id"] != order_id]
            if len(remaining) == len(orders):
                return False
            self._file.persist(remaining)
            return True

    def _records(self) -> list[dict]:
        orders = self._file.load()
        if not isinstance(orders, list) or not all(
            isinstance(raw, dict) and isinstance(raw.get("id"), int) for raw in orders
        ):
            raise StorageError("Corrupt order file: expected a list of records with integer ids")
        return orders

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customerName": order.customer_name,
            "whatsappNumber": str(order.contact_number),
            "deliveryAddress": order.delivery_address,
            "totalAmount": str(order.total_amount.amount),
            "status": order.status.value,
            "createdAt": order.created_at.isoformat(),
            "updatedAt": order.updated_at.isoformat(),
            "items": [
                {
                    "productId": item.product_id,
                    "productName": item.product_name,
                    "quantity": str(item.quantity.value),
                    "price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        try:
            items = tuple(
                OrderItem(
                    product_id=i["productId"],
                    product_name=i["productName"],
                    quantity=Quantity(Decimal(i["quantity"])),
                    unit_price=Money(Decimal(i["price"])),
                )
                for i in raw["items"]
            )
            return Order(
                id=raw["id"],
                customer_name=raw["customerName"],
                contact_number=ContactNumber(raw["whatsappNumber"]),
                delivery_address=raw["deliveryAddress"],
                items=items,
                total_amount=Money(Decimal(raw["totalAmount"])),
                status=OrderStatus(raw["status"]),
                created_at=datetime.fromisoformat(raw["createdAt"]),
                updated_at=datetime.fromisoformat(raw["updatedAt"]),
            )
        except (KeyError, TypeError, ArithmeticError, ValueError, ValidationError) as exc:
            raise StorageError(f"Corrupt order record {raw.get('id')!r}: {exc}") from exc
