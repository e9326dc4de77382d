"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from freshcart.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first by creation time."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order together with all its items.

        Assigns ``order.id``.  Either the whole order is stored or nothing is.
        """

    @abstractmethod
    def update_status(self, order: Order, expected_status: OrderStatus) -> None:
        """Store ``order.status`` and ``order.updated_at``.

        Compare-and-set: raises ConflictError if the stored status is no
        longer *expected_status*, and EntityNotFoundError if the order is gone.
        """

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Remove an order and its items.  Returns False if it did not exist."""
