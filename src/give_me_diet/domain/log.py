"""Domain models for GMD logs.

A log is an ordered list of entries, for example::

    define 30g of Pasibus Avocadus
     - 10g of Protein

    2024-01-20
    eat 30g of Pasibus Avocadus
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from give_me_diet.domain.quantities import AmountOf
from give_me_diet.errors import EmptyIngredientsError


@dataclass(frozen=True, order=True)
class ProductName:
    """Name of a product, used to join definitions with consumption."""

    value: str

    def __str__(self) -> str:
        return self.value


Ingredients = AmountOf[tuple[AmountOf[ProductName], ...]]


@dataclass(frozen=True)
class ProductDefinition:
    """A product, either primitive or composed of other products.

    When present, `ingredients.quantity` is the batch size the ingredient
    amounts were measured against.
    """

    name: ProductName
    ingredients: Ingredients | None = None

    def __post_init__(self) -> None:
        if self.ingredients is not None and not self.ingredients.inner:
            raise EmptyIngredientsError(self.name)

    @classmethod
    def primitive(cls, name: str) -> ProductDefinition:
        return cls(name=ProductName(name))

    @property
    def is_primitive(self) -> bool:
        return self.ingredients is None


@dataclass(frozen=True)
class StartDay:
    """Marks the day subsequent entries belong to."""

    day: date


@dataclass(frozen=True)
class Define:
    """Defines (or redefines) a product on the current day."""

    product: ProductDefinition


@dataclass(frozen=True)
class Eat:
    """Records eating an amount of a product on the current day."""

    amount: AmountOf[ProductName]


LogEntry = StartDay | Define | Eat


@dataclass(frozen=True)
class GMDLog:
    """Ordered sequence of log entries."""

    entries: tuple[LogEntry, ...]

    def first_day(self) -> date | None:
        """Return the date of the first StartDay entry, if any."""
        for entry in self.entries:
            if isinstance(entry, StartDay):
                return entry.day
        return None

    @classmethod
    def merged(cls, logs: Iterable[GMDLog]) -> GMDLog:
        """Concatenate logs ordered by their earliest start day.

        Logs without any start day go first; ties keep the given order.
        """
        ordered = sorted(logs, key=_merge_key)
        return cls(tuple(entry for log in ordered for entry in log.entries))


def _merge_key(log: GMDLog) -> tuple[bool, date]:
    first_day = log.first_day()
    if first_day is None:
        return (False, date.min)
    return (True, first_day)
