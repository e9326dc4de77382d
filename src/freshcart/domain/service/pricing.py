"""Domain service: Pricing.

The cart and the order both derive their totals through ``total_of`` so
the amount a customer sees before checkout is computed exactly the way
the persisted order total is.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from freshcart.domain.model.value_objects import Money


class HasLineTotal(Protocol):
    @property
    def line_total(self) -> Money: ...


def total_of(lines: Iterable[HasLineTotal]) -> Money:
    """Sum of quantity x unit price over *lines*; zero when empty."""
    result = Money.zero()
    for line in lines:
        result = result + line.line_total
    return result


def totals_match(declared: Money | None, computed: Money) -> bool:
    """True when no total was declared or it equals the computed one."""
    return declared is None or declared.amount == computed.amount
