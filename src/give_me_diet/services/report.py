"""Tabular report of a summary."""

from dataclasses import dataclass
from decimal import Decimal

from give_me_diet.domain.log import ProductName
from give_me_diet.domain.quantities import Quantity, sum_by_unit
from give_me_diet.domain.summary import GMDSummary

EMPTY_CELL = "~"


@dataclass(frozen=True)
class SummaryTable:
    """Header and rows ready to be rendered."""

    header: list[str]
    rows: list[list[str]]


def tracked_products(summary: GMDSummary) -> list[ProductName]:
    """Return every eaten product, most eaten first.

    Ties keep the order in which products were first seen.
    """
    totals: dict[ProductName, Decimal] = {}
    for _, day in summary.items():
        for name, quantities in day.state.items():
            totals[name] = totals.get(name, Decimal(0)) + sum(
                (quantity.amount for quantity in quantities), Decimal(0)
            )
    return sorted(totals, key=lambda name: totals[name], reverse=True)


def format_cell(quantities: list[Quantity] | None, empty_cell: str = EMPTY_CELL) -> str:
    if not quantities:
        return empty_cell
    return " + ".join(str(total) for total in sum_by_unit(quantities))


def build_table(summary: GMDSummary, empty_cell: str = EMPTY_CELL) -> SummaryTable:
    """Build one row per day and one column per eaten product."""
    products = tracked_products(summary)
    rows = [
        [
            day.isoformat(),
            *(format_cell(aggregate.state.get(name), empty_cell) for name in products),
        ]
        for day, aggregate in summary.items()
    ]
    return SummaryTable(header=["day", *(str(name) for name in products)], rows=rows)


def render_table(table: SummaryTable) -> str:
    """Render a table as an ASCII grid."""
    lines = [table.header, *table.rows]
    widths = [
        max(len(line[column]) for line in lines) for column in range(len(table.header))
    ]
    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"
    rendered = [border]
    for line in lines:
        cells = (cell.ljust(width) for cell, width in zip(line, widths, strict=True))
        rendered.append("| " + " | ".join(cells) + " |")
        rendered.append(border)
    return "\n".join(rendered)
