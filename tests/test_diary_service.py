"""Tests for merging and summarizing several documents."""

from datetime import date

import pytest

from give_me_diet.domain.log import GMDLog, ProductName, StartDay
from give_me_diet.errors import GrammarError, LogSourceError, UndefinedProductError
from give_me_diet.parser.grammar import parse_log
from give_me_diet.services.diary import DiaryService
from tests.conftest import g, primitive

FEBRUARY = """
2024-02-01
eat 10g of Soup
"""

JANUARY = """
2024-01-01
define 1g of Salt
define 100g of Soup
 - 50g of Salt
"""


def test_merged_orders_logs_by_first_start_day() -> None:
    february = parse_log(FEBRUARY)
    january = parse_log(JANUARY)

    merged = GMDLog.merged([february, january])

    assert merged.entries == january.entries + february.entries


def test_merged_puts_logs_without_start_day_first() -> None:
    dated = GMDLog((StartDay(date(2024, 1, 1)),))
    undated = GMDLog((primitive("Salt"),))

    merged = GMDLog.merged([dated, undated])

    assert merged.entries == undated.entries + dated.entries


def test_definitions_from_earlier_file_are_visible_later(
    diary_service: DiaryService,
) -> None:
    summary = diary_service.summarize_documents(
        [("february.gmd", FEBRUARY), ("january.gmd", JANUARY)]
    )

    assert summary[date(2024, 2, 1)].state == {ProductName("Salt"): [g("5")]}
    assert ProductName("Soup") in summary[date(2024, 1, 1)].defined_products


def test_folding_in_given_order_would_not_resolve(diary_service: DiaryService) -> None:
    unordered = GMDLog(parse_log(FEBRUARY).entries + parse_log(JANUARY).entries)

    with pytest.raises(UndefinedProductError):
        diary_service.calculator.summarize(unordered)


def test_parse_error_names_the_document(diary_service: DiaryService) -> None:
    with pytest.raises(LogSourceError, match="reading 'broken.gmd'") as exc_info:
        diary_service.summarize_documents(
            [
                ("january.gmd", JANUARY),
                ("broken.gmd", "2024-01-02\nnibble 1g of Salt"),
            ]
        )

    assert isinstance(exc_info.value.cause, GrammarError)


def test_strict_service_rejects_entries_on_one_line(
    diary_service: DiaryService,
) -> None:
    diary_service.strict_separators = True

    with pytest.raises(LogSourceError):
        diary_service.parse_document("2024-01-01 define 1g of Salt", "inline.gmd")
