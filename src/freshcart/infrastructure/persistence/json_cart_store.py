"""JSON-file-backed storage for session carts.

Each shopping session owns one file, ``<directory>/<session>.json``.
The cart itself stays a plain domain object; this store only loads it
at the start of a command and saves it at the end.
"""

from __future__ import annotations

import re
from decimal import Decimal
from pathlib import Path

from freshcart.domain.exceptions import StorageError, ValidationError
from freshcart.domain.model.cart import Cart, CartLine
from freshcart.domain.model.value_objects import Money, Quantity
from freshcart.infrastructure.persistence.json_file import JsonFile

_SESSION_NAME = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class JsonCartStore:

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def load(self, session: str) -> Cart:
        """The session's cart; an empty cart if the session has none yet."""
        raw = self._file(session).load()
        try:
            return Cart(
                [
                    CartLine(
                        product_id=line["productId"],
                        product_name=line["productName"],
                        min_quantity=Decimal(line["minQuantity"]),
                        quantity=Quantity(Decimal(line["quantity"])),
                        unit_price=Money(Decimal(line["price"])),
                    )
                    for line in raw
                ]
            )
        except (KeyError, TypeError, ArithmeticError, ValueError, ValidationError) as exc:
            raise StorageError(f"Corrupt cart for session '{session}': {exc}") from exc

    def save(self, session: str, cart: Cart) -> None:
        if cart.is_empty:
            self.discard(session)
            return
        self._file(session).persist(
            [
                {
                    "productId": line.product_id,
                    "productName": line.product_name,
                    "minQuantity": str(line.min_quantity),
                    "quantity": str(line.quantity.value),
                    "price": str(line.unit_price.amount),
                }
                for line in cart.lines
            ]
        )

    def discard(self, session: str) -> None:
        self._file(session).remove()

    def _file(self, session: str) -> JsonFile:
        if not _SESSION_NAME.match(session):
            raise ValidationError(
                f"Invalid session name {session!r} (letters, digits, '-' and '_' only)"
            )
        return JsonFile(self._directory / f"{session}.json", empty=[])
