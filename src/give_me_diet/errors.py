"""Error types raised while parsing and summarizing GMD logs."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from give_me_diet.domain.log import ProductName
    from give_me_diet.domain.quantities import Quantity


class GmdError(Exception):
    """Base class for every error raised by give-me-diet."""


class GrammarError(GmdError):
    """Input text does not match the GMD grammar."""

    def __init__(
        self,
        contexts: tuple[str, ...],
        reason: str,
        *,
        offset: int,
        line: int,
        column: int,
        fragment: str,
    ) -> None:
        self.contexts = contexts
        self.reason = reason
        self.offset = offset
        self.line = line
        self.column = column
        self.fragment = fragment
        super().__init__(self._render())

    def _render(self) -> str:
        chain = " -> ".join(f"parsing {context}" for context in self.contexts)
        location = f"line {self.line}, column {self.column}"
        prefix = f"{chain}: " if chain else ""
        return f"{prefix}{self.reason} at {location} near {self.fragment!r}"


class UnitMismatchError(GmdError):
    """Arithmetic between quantities with different units."""

    def __init__(self, left: Quantity, right: Quantity) -> None:
        self.left = left
        self.right = right
        super().__init__(f"incompatible units of measure: [{left}, {right}]")


class ZeroQuantityError(GmdError):
    """A ratio against a zero quantity was requested."""

    def __init__(self, quantity: Quantity) -> None:
        self.quantity = quantity
        super().__init__(f"cannot calculate a ratio against [{quantity}]")


class UndefinedProductError(GmdError):
    """No definition of a product is visible on a given day."""

    def __init__(self, name: ProductName, day: date) -> None:
        self.name = name
        self.day = day
        super().__init__(f"product [{name}] is not defined as of {day.isoformat()}")


class EmptyIngredientsError(GmdError):
    """A product declares an ingredient list with no ingredients."""

    def __init__(self, name: ProductName) -> None:
        self.name = name
        super().__init__(f"product [{name}] declares an empty ingredient list")


class CyclicDefinitionError(GmdError):
    """A product was reached again while its ingredients were being resolved."""

    def __init__(self, chain: tuple[ProductName, ...]) -> None:
        self.chain = chain
        path = " -> ".join(str(name) for name in chain)
        super().__init__(f"cyclic product definition: {path}")


class FlatteningError(GmdError):
    """Flattening a composite product into its ingredients failed."""

    def __init__(self, product: ProductName, cause: GmdError) -> None:
        self.product = product
        self.cause = cause
        super().__init__(f"flattening [{product}]: {cause}")


class LogSourceError(GmdError):
    """A log document could not be read or parsed."""

    def __init__(self, source: str, cause: Exception) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"reading '{source}': {cause}")
