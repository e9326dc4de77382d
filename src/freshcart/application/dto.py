"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from freshcart.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one submitted line (product id, quantity, unit price)."""

    product_id: str
    quantity: str | Decimal
    price: str | Decimal


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order item as displayed to the user."""

    product_id: str
    product_name: str
    quantity: str  # formatted, e.g. "2.0"
    unit_price: str  # formatted, e.g. "45.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    contact_number: str
    delivery_address: str
    status: str
    items: list[OrderItemDTO]
    total: str
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        """Wire representation using the storefront's JSON field names."""
        return {
            "id": self.id,
            "customerName": self.customer_name,
            "whatsappNumber": self.contact_number,
            "deliveryAddress": self.delivery_address,
            "totalAmount": self.total,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "items": [
                {
                    "productId": item.product_id,
                    "productName": item.product_name,
                    "quantity": item.quantity,
                    "price": item.unit_price,
                }
                for item in self.items
            ],
        }


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        contact_number=str(order.contact_number),
        delivery_address=order.delivery_address,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=str(item.quantity),
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat(),
    )
