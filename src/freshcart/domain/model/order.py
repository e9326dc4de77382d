"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its items.  Everything about an
order is frozen at creation except its ``status``, which moves only
along the transitions in ``ALLOWED_TRANSITIONS``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from freshcart.domain.exceptions import InvalidTransitionError, ValidationError
from freshcart.domain.model.value_objects import ContactNumber, Money, Quantity
from freshcart.domain.service.pricing import total_of


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus((raw or "").strip().upper())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status {raw!r} (expected one of {allowed})"
            ) from exc

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self]

    def can_transition_to(self, target: OrderStatus) -> bool:
        return target in ALLOWED_TRANSITIONS[self]


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class OrderItem:
    """Captures the product, quantity and price at order-creation time.

    Fields are duplicated from the product rather than looked up, so
    later catalog edits never reach historical orders.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_name: str
    contact_number: ContactNumber
    delivery_address: str
    items: tuple[OrderItem, ...]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        contact_number: str,
        delivery_address: str,
        items: list[OrderItem],
    ) -> Order:
        """Create a new PENDING order, enforcing all invariants.

        The total is always computed from *items*; callers cannot supply it.
        """
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        contact = ContactNumber.of(contact_number)

        if not delivery_address or not delivery_address.strip():
            raise ValidationError("Delivery address is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        now = _utcnow()
        return Order(
            id=None,
            customer_name=customer_name.strip(),
            contact_number=contact,
            delivery_address=delivery_address.strip(),
            items=tuple(items),
            total_amount=total_of(items),
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def transition_to(self, target: OrderStatus) -> None:
        if not self.status.can_transition_to(target):
            if self.status.is_terminal:
                raise InvalidTransitionError(
                    f"Order #{self.id} is {self.status.value}; no further "
                    f"status changes are allowed"
                )
            raise InvalidTransitionError(
                f"Cannot move order #{self.id} from {self.status.value} "
                f"to {target.value}"
            )
        self.status = target
        self.updated_at = _utcnow()

    def start_processing(self) -> None:
        """PENDING -> PROCESSING (admin begins fulfillment)."""
        self.transition_to(OrderStatus.PROCESSING)

    def deliver(self) -> None:
        """PROCESSING -> DELIVERED (admin confirms delivery)."""
        self.transition_to(OrderStatus.DELIVERED)

    def cancel(self) -> None:
        """PENDING -> CANCELLED.  Orders already being processed cannot be cancelled."""
        self.transition_to(OrderStatus.CANCELLED)

    # --- Computed properties --------------------------------------------------

    @property
    def items_total(self) -> Money:
        return total_of(self.items)
