"""Tests for quantities and units."""

from decimal import Decimal

import pytest

from give_me_diet.domain.quantities import (
    Quantity,
    UnitOfMeasure,
    format_amount,
    sum_by_unit,
)
from give_me_diet.errors import UnitMismatchError, ZeroQuantityError
from tests.conftest import g

KCAL = UnitOfMeasure.KCAL


def test_add_same_unit() -> None:
    assert g("1.5") + g("2.25") == g("3.75")


def test_add_mismatched_units_fails() -> None:
    with pytest.raises(UnitMismatchError, match=r"\[1g, 2kcal\]"):
        g("1").try_add(Quantity(Decimal(2), KCAL))


def test_ratio_and_scaling_are_exact() -> None:
    ratio = g("3.43").ratio(g("100"))

    assert g("50").scaled(ratio) == g("1.715")


def test_ratio_requires_same_unit() -> None:
    with pytest.raises(UnitMismatchError):
        g("10").ratio(Quantity(Decimal(100), KCAL))


def test_ratio_against_zero_fails() -> None:
    with pytest.raises(ZeroQuantityError):
        g("10").ratio(g("0"))


def test_display_uses_plain_notation() -> None:
    assert str(g("100")) == "100g"
    assert str(g("3.4300")) == "3.43g"
    assert str(Quantity(Decimal("12.0"), KCAL)) == "12kcal"
    assert format_amount(Decimal("0.000")) == "0"


def test_of_attaches_payload() -> None:
    amount = g("10").of("Protein")

    assert amount.inner == "Protein"
    assert str(amount) == "10g of Protein"
    assert amount.map_inner(str.upper).inner == "PROTEIN"


def test_sum_by_unit_groups_units() -> None:
    totals = sum_by_unit([g("1"), Quantity(Decimal(5), KCAL), g("2")])

    assert totals == [g("3"), Quantity(Decimal(5), KCAL)]
