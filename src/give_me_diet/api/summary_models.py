"""Pydantic models for summary requests and responses."""

from __future__ import annotations

from datetime import date  # noqa: TC003

from pydantic import BaseModel, Field

from give_me_diet.domain.summary import GMDSummary  # noqa: TC001
from give_me_diet.services.report import EMPTY_CELL, build_table


class SummaryRequest(BaseModel):
    """GMD documents to summarize together."""

    documents: list[str] = Field(min_length=1)
    strict: bool | None = None


class DaySummary(BaseModel):
    """Primitive products eaten and products defined on a day."""

    day: date
    consumed: dict[str, list[str]]
    defined_products: list[str]


class SummaryTableModel(BaseModel):
    """Rendered report table."""

    header: list[str]
    rows: list[list[str]]


class SummaryResponse(BaseModel):
    """Summary of all days in the merged log."""

    days: list[DaySummary]
    table: SummaryTableModel

    @classmethod
    def from_summary(
        cls, summary: GMDSummary, empty_cell: str = EMPTY_CELL
    ) -> SummaryResponse:
        days = [
            DaySummary(
                day=day,
                consumed={
                    str(name): [str(quantity) for quantity in quantities]
                    for name, quantities in aggregate.state.items()
                },
                defined_products=[str(name) for name in aggregate.defined_products],
            )
            for day, aggregate in summary.items()
        ]
        table = build_table(summary, empty_cell)
        return cls(
            days=days,
            table=SummaryTableModel(header=table.header, rows=table.rows),
        )
