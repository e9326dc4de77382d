"""Application service: Update Order Status use case.

Loads the order, lets the aggregate check the transition table, then
stores the new status with a compare-and-set against the status that
was read.  A concurrent admin who got there first makes this call fail
with ConflictError instead of silently overwriting their change.
"""

from __future__ import annotations

import logging

from freshcart.application.dto import OrderDTO, order_to_dto
from freshcart.domain.exceptions import EntityNotFoundError
from freshcart.domain.model.order import OrderStatus
from freshcart.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, requested_status: str) -> OrderDTO:
        target = OrderStatus.parse(requested_status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        order.transition_to(target)
        self._order_repo.update_status(order, expected_status=previous)

        logger.info(
            "Order #%s moved from %s to %s", order_id, previous.value, target.value
        )
        return order_to_dto(order)
