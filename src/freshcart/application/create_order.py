"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Product
lookup + Order creation).
"""

from __future__ import annotations

import logging

from freshcart.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from freshcart.domain.exceptions import EntityNotFoundError, ValidationError
from freshcart.domain.model.order import Order, OrderItem
from freshcart.domain.model.value_objects import Money, Quantity
from freshcart.domain.repository.order_repository import OrderRepository
from freshcart.domain.repository.product_repository import ProductRepository
from freshcart.domain.service.pricing import totals_match

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(
        self,
        customer_name: str,
        contact_number: str,
        delivery_address: str,
        item_specs: list[OrderItemSpec],
        declared_total: str | None = None,
    ) -> OrderDTO:
        """Create a new PENDING order.

        Steps:
        1. Resolve each product id to a Product (fail if not found).
        2. Build frozen OrderItems from the submitted quantity and price.
        3. Let the Order aggregate validate all business rules and
           compute the total.
        4. Persist and return a DTO.

        *declared_total* is what the customer saw; it is only compared
        against the computed total, never stored.
        """
        product_ids = [spec.product_id for spec in item_specs]
        if len(set(product_ids)) != len(product_ids):
            raise ValidationError("Each product may appear only once per order")

        items = [self._build_item(spec) for spec in item_specs]

        order = Order.create(
            customer_name=customer_name,
            contact_number=contact_number,
            delivery_address=delivery_address,
            items=items,
        )

        declared = Money.of(declared_total) if declared_total is not None else None
        if not totals_match(declared, order.total_amount):
            logger.warning(
                "Declared total %s differs from computed total %s for %s; "
                "storing the computed total",
                declared, order.total_amount, order.customer_name,
            )

        self._order_repo.add(order)
        logger.info(
            "Order #%s created for %s: %d item(s), total %s",
            order.id, order.customer_name, len(order.items), order.total_amount,
        )
        return order_to_dto(order)

    def _build_item(self, spec: OrderItemSpec) -> OrderItem:
        product = self._product_repo.get_by_id(spec.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{spec.product_id}'")
        if not product.in_stock:
            raise ValidationError(f"{product.name} is not available")

        quantity = Quantity.of(spec.quantity)
        if quantity.value < product.min_quantity:
            raise ValidationError(
                f"Quantity {quantity} of {product.name} is below the "
                f"minimum {product.min_quantity}"
            )

        price = Money.of(spec.price)
        if price.is_zero:
            raise ValidationError(f"Price of {product.name} must be greater than zero")

        return OrderItem(
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            unit_price=price,  # <-- price snapshot
        )
