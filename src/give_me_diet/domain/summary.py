"""Per-day aggregates produced by the calculator."""

from __future__ import annotations

from bisect import bisect_right, insort
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date

from give_me_diet.domain.log import ProductDefinition, ProductName
from give_me_diet.domain.quantities import AmountOf, Quantity


@dataclass
class GMDDay:
    """Consumption and definitions recorded on a single day."""

    state: dict[ProductName, list[Quantity]] = field(default_factory=dict)
    defined_products: dict[ProductName, ProductDefinition] = field(
        default_factory=dict
    )

    def record(self, contribution: AmountOf[ProductName]) -> None:
        """Append one primitive contribution."""
        self.state.setdefault(contribution.inner, []).append(contribution.quantity)

    def define(self, product: ProductDefinition) -> None:
        """Store a definition, replacing one of the same name on this day."""
        self.defined_products[product.name] = product


@dataclass
class GMDSummary:
    """Day aggregates keyed by date."""

    days: dict[date, GMDDay] = field(default_factory=dict)
    _order: list[date] = field(default_factory=list, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._order = sorted(self.days)

    def __len__(self) -> int:
        return len(self.days)

    def __contains__(self, day: object) -> bool:
        return day in self.days

    def __getitem__(self, day: date) -> GMDDay:
        return self.days[day]

    def get(self, day: date) -> GMDDay | None:
        return self.days.get(day)

    def ensure_day(self, day: date) -> GMDDay:
        """Return the aggregate for a day, creating an empty one if needed."""
        existing = self.days.get(day)
        if existing is not None:
            return existing
        created = GMDDay()
        self.days[day] = created
        insort(self._order, day)
        return created

    def items(self) -> Iterator[tuple[date, GMDDay]]:
        """Iterate over days in date order."""
        for day in self._order:
            yield day, self.days[day]

    def definition(self, name: ProductName, as_of: date) -> ProductDefinition | None:
        """Return the latest definition of `name` made on or before `as_of`."""
        visible = self._order[: bisect_right(self._order, as_of)]
        for day in reversed(visible):
            product = self.days[day].defined_products.get(name)
            if product is not None:
                return product
        return None
