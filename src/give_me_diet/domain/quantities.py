"""Units of measure, quantities and amounts of things."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Generic, TypeVar

from give_me_diet.errors import UnitMismatchError, ZeroQuantityError

T = TypeVar("T")
U = TypeVar("U")


class UnitOfMeasure(Enum):
    """Units a quantity can be expressed in."""

    GRAM = "g"
    KCAL = "kcal"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Ratio:
    """Proportion between two quantities of the same unit."""

    numerator: Decimal
    denominator: Decimal

    def apply(self, amount: Decimal) -> Decimal:
        """Scale an amount, multiplying before dividing."""
        return amount * self.numerator / self.denominator


@dataclass(frozen=True)
class Quantity:
    """An exact decimal amount in a unit of measure."""

    amount: Decimal
    unit: UnitOfMeasure

    def __str__(self) -> str:
        return f"{format_amount(self.amount)}{self.unit}"

    def __add__(self, other: Quantity) -> Quantity:
        return self.try_add(other)

    def try_add(self, other: Quantity) -> Quantity:
        """Return the sum of two quantities sharing a unit."""
        if self.unit is not other.unit:
            raise UnitMismatchError(self, other)
        return Quantity(self.amount + other.amount, self.unit)

    def ratio(self, basis: Quantity) -> Ratio:
        """Return how much of `basis` this quantity is."""
        if self.unit is not basis.unit:
            raise UnitMismatchError(self, basis)
        if basis.amount == 0:
            raise ZeroQuantityError(basis)
        return Ratio(self.amount, basis.amount)

    def scaled(self, ratio: Ratio) -> Quantity:
        """Return this quantity scaled by a ratio, keeping the unit."""
        return Quantity(ratio.apply(self.amount), self.unit)

    def of(self, inner: T) -> AmountOf[T]:
        """Attach this quantity to a payload."""
        return AmountOf(quantity=self, inner=inner)


@dataclass(frozen=True)
class AmountOf(Generic[T]):
    """A quantity of some payload, e.g. 100g of a product."""

    quantity: Quantity
    inner: T

    def __str__(self) -> str:
        return f"{self.quantity} of {self.inner}"

    def map_inner(self, func: Callable[[T], U]) -> AmountOf[U]:
        return AmountOf(quantity=self.quantity, inner=func(self.inner))

    def scaled(self, ratio: Ratio) -> AmountOf[T]:
        return AmountOf(quantity=self.quantity.scaled(ratio), inner=self.inner)


def format_amount(amount: Decimal) -> str:
    """Format a decimal without trailing zeros or exponent notation."""
    normalized = amount.normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")


def sum_by_unit(quantities: list[Quantity]) -> list[Quantity]:
    """Sum quantities per unit, keeping first-seen unit order."""
    totals: dict[UnitOfMeasure, Quantity] = {}
    for quantity in quantities:
        current = totals.get(quantity.unit)
        totals[quantity.unit] = quantity if current is None else current + quantity
    return list(totals.values())
