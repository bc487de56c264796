"""Day-by-day summary of primitive products eaten in a log."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import date
from typing import assert_never

from give_me_diet.domain.log import (
    Define,
    Eat,
    GMDLog,
    Ingredients,
    LogEntry,
    ProductDefinition,
    ProductName,
    StartDay,
)
from give_me_diet.domain.quantities import AmountOf, Quantity
from give_me_diet.domain.summary import GMDSummary
from give_me_diet.errors import (
    CyclicDefinitionError,
    FlatteningError,
    GmdError,
    UndefinedProductError,
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _FoldState:
    summary: GMDSummary
    current_day: date

    def definition(self, name: ProductName) -> ProductDefinition | None:
        return self.summary.definition(name, self.current_day)

    def require_definition(self, name: ProductName) -> ProductDefinition:
        product = self.definition(name)
        if product is None:
            raise UndefinedProductError(name, self.current_day)
        return product

    def flatten_once(
        self,
        ingredients: Ingredients,
        eaten: Quantity,
        resolving: tuple[ProductName, ...],
    ) -> list[AmountOf[ProductDefinition]]:
        """Split an eaten quantity of a composite into its direct ingredients."""
        batch = ingredients.quantity
        parts = []
        for ingredient in ingredients.inner:
            name = ingredient.inner
            if name in resolving:
                raise CyclicDefinitionError((*resolving, name))
            ratio = ingredient.quantity.ratio(batch)
            parts.append(eaten.scaled(ratio).of(self.require_definition(name)))
        return parts

    def flatten(
        self, product: ProductDefinition, eaten: Quantity
    ) -> list[AmountOf[ProductName]]:
        """Decompose an eaten quantity of a product into primitive products.

        Ingredients are visited depth first in their listed order. A composite
        whose ingredients cannot all be resolved is counted as primitive, and a
        warning is logged.
        """
        contributions: list[AmountOf[ProductName]] = []
        pending: list[tuple[ProductDefinition, Quantity, tuple[ProductName, ...]]]
        pending = [(product, eaten, ())]
        while pending:
            current, quantity, resolving = pending.pop()
            if current.ingredients is None:
                contributions.append(quantity.of(current.name))
                continue
            path = (*resolving, current.name)
            try:
                parts = self.flatten_once(current.ingredients, quantity, path)
            except GmdError as exc:
                error = FlatteningError(current.name, exc)
                _logger.warning(
                    "Flattening [%s] failed, treating it as primitive: %s",
                    current.name,
                    error,
                )
                contributions.append(quantity.of(current.name))
                continue
            pending.extend(
                (part.inner, part.quantity, path) for part in reversed(parts)
            )
        return contributions


def _apply_entry(state: _FoldState, entry: LogEntry) -> _FoldState:
    match entry:
        case StartDay(day=day):
            state.summary.ensure_day(day)
            return replace(state, current_day=day)
        case Define(product=product):
            state.summary.ensure_day(state.current_day).define(product)
            return state
        case Eat(amount=amount):
            product = state.require_definition(amount.inner)
            contributions = state.flatten(product, amount.quantity)
            day = state.summary.ensure_day(state.current_day)
            for contribution in contributions:
                day.record(contribution)
            return state
        case _:
            assert_never(entry)


@dataclass
class SummaryCalculator:
    """Fold a log into a per-day summary.

    Entries before the first start day belong to the day returned by `today`.
    """

    today: Callable[[], date] = field(default=date.today)

    def summarize(self, log: GMDLog) -> GMDSummary:
        """Summarize a log.

        Raises `UndefinedProductError` when a product eaten directly has no
        visible definition.
        """
        state = _FoldState(summary=GMDSummary(), current_day=self.today())
        for entry in log.entries:
            state = _apply_entry(state, entry)
        return state.summary


def summarize(log: GMDLog) -> GMDSummary:
    """Summarize a log using the wall-clock date as the initial day."""
    return SummaryCalculator().summarize(log)
