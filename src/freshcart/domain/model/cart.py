"""Cart aggregate: a customer's in-progress selection.

A cart belongs to exactly one shopping session and is never persisted as
an order itself. Its lines capture the product price at the moment the
product was added; ``to_order_items()`` is the only way line items leave
the cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import LineItem, Money, Quantity
from freshcart.domain.service.pricing import total_of


@dataclass
class CartLine:
    """One product in the cart.

    Invariant: ``quantity`` is never below ``min_quantity`` and always on
    the 0.5 step grid.  Name and minimum are copied from the product so
    the line can be clamped without the catalog.
    """

    product_id: str
    product_name: str
    min_quantity: Decimal
    quantity: Quantity
    unit_price: Money  # captured when the product was added

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


class Cart:
    """Aggregate root for a single session's cart.

    Quantity violations are corrected silently (clamped) rather than
    raised: the cart can never hold an unorderable line.
    """

    def __init__(self, lines: list[CartLine] | None = None) -> None:
        self._lines: dict[str, CartLine] = {}
        for line in lines or []:
            self._lines[line.product_id] = line

    # --- Queries ----------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines

    def get(self, product_id: str) -> CartLine | None:
        return self._lines.get(product_id)

    def total_price(self) -> Money:
        return total_of(self._lines.values())

    def to_order_items(self) -> list[LineItem]:
        """Line items in the order the products were added."""
        return [
            LineItem(
                product_id=line.product_id,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            for line in self._lines.values()
        ]

    # --- Mutations --------------------------------------------------------------

    def add_item(self, product: Product, requested_quantity: Decimal | str | int) -> CartLine:
        """Add *product* to the cart.

        If the product is already present the existing line is returned
        untouched; use ``set_quantity`` to change it.
        """
        existing = self._lines.get(product.id)
        if existing is not None:
            return existing
        if not product.in_stock:
            raise ValidationError(f"{product.name} is not available")

        line = CartLine(
            product_id=product.id,
            product_name=product.name,
            min_quantity=product.min_quantity,
            quantity=Quantity.normalize(requested_quantity, product.min_quantity),
            unit_price=product.price,
        )
        self._lines[product.id] = line
        return line

    def set_quantity(self, product_id: str, new_quantity: Decimal | str | int) -> None:
        """Clamp to the line minimum and snap to the step grid; no-op if absent."""
        line = self._lines.get(product_id)
        if line is None:
            return
        line.quantity = Quantity.normalize(new_quantity, line.min_quantity)

    def increase(self, product_id: str) -> None:
        line = self._lines.get(product_id)
        if line is None:
            return
        line.quantity = line.quantity.step_up()

    def decrease(self, product_id: str) -> None:
        line = self._lines.get(product_id)
        if line is None:
            return
        line.quantity = line.quantity.step_down(line.min_quantity)

    def remove_item(self, product_id: str) -> None:
        self._lines.pop(product_id, None)

    def clear(self) -> None:
        self._lines.clear()
