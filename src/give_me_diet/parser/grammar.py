"""Grammar of GMD log documents.

Each production below is a plain `Production` value and can be run on its own
with `from_gmd`, e.g. ``from_gmd(quantity, "10g")``.
"""

import logging
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, TypeVar

from give_me_diet.domain.log import (
    Define,
    Eat,
    GMDLog,
    ProductDefinition,
    ProductName,
    StartDay,
)
from give_me_diet.domain.quantities import AmountOf, Quantity, UnitOfMeasure
from give_me_diet.parser import keywords
from give_me_diet.parser.combinators import (
    ParseFailure,
    Production,
    alt,
    cut,
    many0,
    map_value,
    named,
    parse_complete,
    preceded,
    separated_list1,
    sequence,
    surrounded_by_whitespace,
    tag,
    take_while1,
    whitespace,
    whitespace0,
)

T = TypeVar("T")

_logger = logging.getLogger(__name__)

DATE_FORMATS = ("%Y-%m-%d", "%Y.%m.%d", "%Y/%m/%d")

_DECIMAL_CHARS = frozenset("-.0123456789")
_DECIMAL_PATTERN = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_DATE_CHARS = frozenset("0123456789.-/")
_LINE_BREAKS = frozenset("\r\n")

# Parse-time only; amounts are folded into grams.
_SUB_UNITS = {
    "mg": Decimal("0.001"),
    "µg": Decimal("0.000001"),
    "μg": Decimal("0.000001"),
}


def from_gmd(production: Production[T], text: str) -> T:
    """Parse the whole of `text` with a single production."""
    return parse_complete(production, text)


def parse_log(text: str, *, strict: bool = False) -> GMDLog:
    """Parse a GMD document into its entries.

    With `strict`, entries must be separated by line breaks rather than any
    whitespace.
    """
    log = parse_complete(strict_gmd_log if strict else gmd_log, text)
    _logger.debug("Parsed %s log entries", len(log.entries))
    return log


def _constant(production: Production[Any], value: T) -> Production[T]:
    return map_value(production, lambda _: value)


def _to_decimal(run: str) -> Decimal:
    if not _DECIMAL_PATTERN.fullmatch(run):
        raise ValueError(f"{run!r} is not a valid decimal number")
    return Decimal(run)


def _to_date(run: str) -> date:
    for date_format in DATE_FORMATS:
        try:
            return datetime.strptime(run, date_format).date()  # noqa: DTZ007
        except ValueError:
            continue
    raise ValueError(
        f"{run!r} matched no date format, supported formats are {list(DATE_FORMATS)}"
    )


def _to_product_name(run: str) -> ProductName:
    name = run.rstrip()
    if not name:
        raise ValueError("product name is blank")
    return ProductName(name)


def _to_definition(
    values: tuple[AmountOf[ProductName], list[AmountOf[ProductName]]],
) -> ProductDefinition:
    headline, ingredients = values
    if not ingredients:
        return ProductDefinition(name=headline.inner)
    return ProductDefinition(
        name=headline.inner,
        ingredients=headline.quantity.of(tuple(ingredients)),
    )


def _line_break(text: str, pos: int) -> tuple[str, int]:
    run, end = whitespace(text, pos)
    if not _LINE_BREAKS.intersection(run):
        raise ParseFailure(
            pos, "expected a line break between entries", committed=True
        )
    return run, end


def amount_of(payload: Production[T], payload_name: str) -> Production[AmountOf[T]]:
    """Build the `<quantity> of <payload>` production."""
    return named(
        f"AmountOf<{payload_name}>",
        map_value(
            sequence(quantity, surrounded_by_whitespace(keywords.OF.tag), payload),
            lambda values: values[0].of(values[2]),
        ),
    )


decimal = named(
    "Decimal",
    map_value(
        take_while1(_DECIMAL_CHARS.__contains__, "a decimal number"), _to_decimal
    ),
)

unit_of_measure = named(
    "UnitOfMeasure",
    alt(
        *(
            named(unit.name.title(), _constant(tag(unit.value), unit))
            for unit in UnitOfMeasure
        )
    ),
)

sub_unit = named(
    "SubUnit",
    alt(*(_constant(tag(token), factor) for token, factor in _SUB_UNITS.items())),
)

quantity = named(
    "Quantity",
    alt(
        map_value(
            sequence(decimal, sub_unit),
            lambda values: Quantity(values[0] * values[1], UnitOfMeasure.GRAM),
        ),
        map_value(
            sequence(decimal, unit_of_measure),
            lambda values: Quantity(values[0], values[1]),
        ),
    ),
)

date_ = named(
    "Date", map_value(take_while1(_DATE_CHARS.__contains__, "a date"), _to_date)
)

start_day = named("StartDay", map_value(date_, StartDay))

product_name = named(
    "ProductName",
    map_value(
        take_while1(lambda char: char not in _LINE_BREAKS, "a product name"),
        _to_product_name,
    ),
)

amount_of_product = amount_of(product_name, "ProductName")

ingredient = named(
    "Ingredient",
    preceded(
        sequence(whitespace0, keywords.MINUS.tag, whitespace0), cut(amount_of_product)
    ),
)

product_definition = named(
    "ProductDefinition",
    map_value(
        preceded(
            sequence(keywords.DEFINE.tag, whitespace),
            cut(sequence(amount_of_product, many0(ingredient))),
        ),
        _to_definition,
    ),
)

eat = named(
    "Eat",
    map_value(
        preceded(sequence(keywords.EAT.tag, whitespace), cut(amount_of_product)), Eat
    ),
)

log_entry = named(
    "LogEntry",
    alt(eat, map_value(product_definition, Define), start_day),
)

gmd_log = named(
    "GMDLog",
    map_value(
        separated_list1(whitespace, log_entry),
        lambda entries: GMDLog(tuple(entries)),
    ),
)

strict_gmd_log = named(
    "GMDLog",
    map_value(
        separated_list1(_line_break, log_entry),
        lambda entries: GMDLog(tuple(entries)),
    ),
)
