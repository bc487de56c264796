"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from datetime import date
from decimal import Decimal

import pytest

from give_me_diet.config import Settings
from give_me_diet.containers import AppContainer, build_container
from give_me_diet.domain.log import Define, ProductDefinition, ProductName
from give_me_diet.domain.quantities import Quantity, UnitOfMeasure
from give_me_diet.services.calculator import SummaryCalculator
from give_me_diet.services.diary import DiaryService

TODAY = date(2024, 3, 1)

FRYTKI_LOG = """
2024-01-27
define 1g of Carbohydrates
define 1g of Fat
define 1g of Protein
define 1g of Fiber
define 1g of Water
define 100g of Frytki
 - 41.44g of Carbohydrates
 - 14.73g of Fat
 - 3.43g of Protein
 - 3.8g of Fiber
 - 38.55g of Water

eat 100g of Frytki
"""


def g(amount: str) -> Quantity:
    return Quantity(Decimal(amount), UnitOfMeasure.GRAM)


def composite(product: str, batch: str, *ingredients: tuple[str, str]) -> Define:
    """Build a Define entry for a product made of (amount, name) ingredients."""
    return Define(
        ProductDefinition(
            name=ProductName(product),
            ingredients=g(batch).of(
                tuple(
                    g(amount).of(ProductName(ingredient))
                    for amount, ingredient in ingredients
                )
            ),
        )
    )


def primitive(product: str) -> Define:
    return Define(ProductDefinition.primitive(product))


@pytest.fixture(autouse=True)
def reset_app_logger() -> Iterator[None]:
    logger = logging.getLogger("give_me_diet")
    yield
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="INFO", empty_cell="~", strict_separators=False)


@pytest.fixture
def calculator() -> SummaryCalculator:
    return SummaryCalculator(today=lambda: TODAY)


@pytest.fixture
def diary_service(calculator: SummaryCalculator) -> DiaryService:
    return DiaryService(calculator=calculator)


@pytest.fixture
def container(settings: Settings, calculator: SummaryCalculator) -> AppContainer:
    container = build_container(settings)
    container.calculator = calculator
    container.diary_service = DiaryService(calculator=calculator)
    return container
