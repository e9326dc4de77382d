"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal, InvalidOperation

from freshcart.domain.exceptions import ValidationError

# All weight-based quantities move in half-kilogram steps.
QUANTITY_STEP = Decimal("0.5")

_CONTACT_NUMBER = re.compile(r"^\+?[0-9]{10,15}$")


def to_decimal(raw: str | float | int | Decimal, what: str) -> Decimal:
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {what}: {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid {what}: {raw!r}")
    return value


@dataclass(frozen=True)
class Money:
    """Monetary amount in the store currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int | Decimal) -> Money:
        if not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount, "money amount"))

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A positive weight, always an exact multiple of ``QUANTITY_STEP``.

    Decimal arithmetic keeps repeated +/- step adjustments exact, so a
    quantity stepped up and back down compares equal to where it started.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Quantity must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")
        if self.value % QUANTITY_STEP != 0:
            raise ValidationError(
                f"Quantity {self.value} is not a multiple of {QUANTITY_STEP}"
            )

    def __lt__(self, other: Quantity) -> bool:
        return self.value < other.value

    def __le__(self, other: Quantity) -> bool:
        return self.value <= other.value

    def __str__(self) -> str:
        return f"{self.value:.1f}"

    # --- Stepping -------------------------------------------------------------

    def step_up(self) -> Quantity:
        return Quantity(self.value + QUANTITY_STEP)

    def step_down(self, minimum: Decimal) -> Quantity:
        """One step down, never below *minimum*."""
        return Quantity.normalize(self.value - QUANTITY_STEP, minimum)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(value: str | float | int | Decimal) -> Quantity:
        return Quantity(to_decimal(value, "quantity"))

    @staticmethod
    def normalize(requested: str | float | int | Decimal, minimum: Decimal) -> Quantity:
        """Clamp *requested* to *minimum* and snap up to the step grid.

        The result is the smallest multiple of ``QUANTITY_STEP`` that is
        at or above both values, so the line stays orderable.
        """
        floor = max(to_decimal(requested, "quantity"), minimum)
        steps = max((floor / QUANTITY_STEP).to_integral_value(rounding=ROUND_CEILING), Decimal(1))
        # The division rounds to context precision and can land one step short.
        if steps * QUANTITY_STEP < floor:
            steps += 1
        return Quantity(steps * QUANTITY_STEP)


@dataclass(frozen=True)
class ContactNumber:
    """A phone number: 10 to 15 digits with an optional leading ``+``."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _CONTACT_NUMBER.fullmatch(self.value):
            raise ValidationError(
                f"Invalid contact number {self.value!r} "
                "(expected 10-15 digits with an optional leading '+')"
            )

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def of(raw: str) -> ContactNumber:
        return ContactNumber((raw or "").strip())


@dataclass(frozen=True)
class LineItem:
    """A (product, quantity, price) triple handed from the cart to ordering."""

    product_id: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value
