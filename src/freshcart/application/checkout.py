"""Application service: Checkout use case.

Hands the session's cart to order creation.  The cart total is passed
along as the declared total so a mismatch is visible in the logs, and
the cart is cleared only once the order has been persisted.
"""

from __future__ import annotations

from freshcart.application.create_order import CreateOrderHandler
from freshcart.application.dto import OrderDTO, OrderItemSpec
from freshcart.domain.model.cart import Cart


class CheckoutHandler:

    def __init__(self, create_order: CreateOrderHandler) -> None:
        self._create_order = create_order

    def handle(
        self,
        cart: Cart,
        customer_name: str,
        contact_number: str,
        delivery_address: str,
    ) -> OrderDTO:
        specs = [
            OrderItemSpec(
                product_id=item.product_id,
                quantity=item.quantity.value,
                price=item.unit_price.amount,
            )
            for item in cart.to_order_items()
        ]
        dto = self._create_order.handle(
            customer_name=customer_name,
            contact_number=contact_number,
            delivery_address=delivery_address,
            item_specs=specs,
            declared_total=str(cart.total_price().amount),
        )
        cart.clear()
        return dto
