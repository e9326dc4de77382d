"""Application service: List Orders use case (query)."""

from __future__ import annotations

from freshcart.application.dto import OrderDTO, order_to_dto
from freshcart.domain.model.order import OrderStatus
from freshcart.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, status: str | None = None) -> list[OrderDTO]:
        """Every order, newest first, optionally only those in *status*."""
        orders = self._order_repo.list_all()
        if status is not None:
            wanted = OrderStatus.parse(status)
            orders = [o for o in orders if o.status == wanted]
        return [order_to_dto(o) for o in orders]
