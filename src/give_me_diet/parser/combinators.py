"""Small parser combinator toolkit used by the GMD grammar.

A production is a callable taking the full text and a start offset and
returning the parsed value with the offset just past it. A production that
does not match raises `ParseFailure`. Failures marked as committed are not
backtracked over by `alt`, `many0` or `separated_list1`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from give_me_diet.errors import GrammarError

T = TypeVar("T")
U = TypeVar("U")

Production = Callable[[str, int], tuple[T, int]]

_FRAGMENT_LENGTH = 24


class ParseFailure(Exception):
    """A production did not match at a position."""

    def __init__(
        self,
        position: int,
        reason: str,
        contexts: tuple[str, ...] = (),
        *,
        committed: bool = False,
    ) -> None:
        super().__init__(reason)
        self.position = position
        self.reason = reason
        self.contexts = contexts
        self.committed = committed

    def within(self, context: str) -> ParseFailure:
        return ParseFailure(
            self.position,
            self.reason,
            (context, *self.contexts),
            committed=self.committed,
        )

    def commit(self) -> ParseFailure:
        return ParseFailure(self.position, self.reason, self.contexts, committed=True)


def named(name: str, production: Production[T]) -> Production[T]:
    """Tag failures of a production with its name."""

    def parse(text: str, pos: int) -> tuple[T, int]:
        try:
            return production(text, pos)
        except ParseFailure as failure:
            raise failure.within(name) from None

    return parse


def tag(literal: str) -> Production[str]:
    def parse(text: str, pos: int) -> tuple[str, int]:
        if text.startswith(literal, pos):
            return literal, pos + len(literal)
        raise ParseFailure(pos, f"expected {literal!r}")

    return parse


def take_while1(predicate: Callable[[str], bool], expected: str) -> Production[str]:
    """Match the longest non-empty run of characters satisfying `predicate`."""

    def parse(text: str, pos: int) -> tuple[str, int]:
        end = pos
        while end < len(text) and predicate(text[end]):
            end += 1
        if end == pos:
            raise ParseFailure(pos, f"expected {expected}")
        return text[pos:end], end

    return parse


def map_value(production: Production[T], func: Callable[[T], U]) -> Production[U]:
    """Transform the parsed value.

    A `ValueError` raised by `func` fails the production at its start.
    """

    def parse(text: str, pos: int) -> tuple[U, int]:
        value, end = production(text, pos)
        try:
            return func(value), end
        except ValueError as exc:
            raise ParseFailure(pos, str(exc)) from None

    return parse


def sequence(*productions: Production[Any]) -> Production[tuple[Any, ...]]:
    def parse(text: str, pos: int) -> tuple[tuple[Any, ...], int]:
        values = []
        for production in productions:
            value, pos = production(text, pos)
            values.append(value)
        return tuple(values), pos

    return parse


def preceded(prefix: Production[Any], production: Production[T]) -> Production[T]:
    return map_value(sequence(prefix, production), lambda pair: pair[1])


def cut(production: Production[T]) -> Production[T]:
    """Commit to a production: its failures are never backtracked over."""

    def parse(text: str, pos: int) -> tuple[T, int]:
        try:
            return production(text, pos)
        except ParseFailure as failure:
            raise failure.commit() from None

    return parse


def alt(*productions: Production[Any]) -> Production[Any]:
    """Return the value of the first production that matches.

    When every production fails, the failure that got furthest into the
    input is reported, preferring the deeper context chain on ties.
    """

    def parse(text: str, pos: int) -> tuple[Any, int]:
        best: ParseFailure | None = None
        for production in productions:
            try:
                return production(text, pos)
            except ParseFailure as failure:
                if failure.committed:
                    raise
                if best is None or _progress(failure) > _progress(best):
                    best = failure
        if best is None:
            raise ParseFailure(pos, "no alternatives to try")
        raise best

    return parse


def many0(production: Production[T]) -> Production[list[T]]:
    def parse(text: str, pos: int) -> tuple[list[T], int]:
        values: list[T] = []
        while True:
            try:
                value, end = production(text, pos)
            except ParseFailure as failure:
                if failure.committed:
                    raise
                return values, pos
            if end == pos:
                return values, pos
            values.append(value)
            pos = end

    return parse


def separated_list1(
    separator: Production[Any], production: Production[T]
) -> Production[list[T]]:
    """Match one or more `production`s joined by `separator`.

    Once a separator matches, the following element is mandatory.
    """

    def parse(text: str, pos: int) -> tuple[list[T], int]:
        first, pos = production(text, pos)
        values = [first]
        while True:
            try:
                _, after_separator = separator(text, pos)
            except ParseFailure as failure:
                if failure.committed:
                    raise
                return values, pos
            value, pos = cut(production)(text, after_separator)
            values.append(value)

    return parse


def whitespace0(text: str, pos: int) -> tuple[str, int]:
    end = pos
    while end < len(text) and text[end].isspace():
        end += 1
    return text[pos:end], end


whitespace = named("whitespace", take_while1(str.isspace, "whitespace"))


def surrounded_by_whitespace(production: Production[T]) -> Production[T]:
    return map_value(
        sequence(whitespace, production, whitespace), lambda values: values[1]
    )


def parse_complete(production: Production[T], text: str) -> T:
    """Run a production over the whole trimmed text.

    Raises `GrammarError` when the production fails or leaves input behind.
    """
    body = text.strip()
    offset = len(text) - len(text.lstrip())
    try:
        value, end = production(body, 0)
    except ParseFailure as failure:
        raise _grammar_error(text, offset, failure) from None
    if end != len(body):
        raise _grammar_error(
            text, offset, ParseFailure(end, "unexpected trailing input")
        )
    return value


def _progress(failure: ParseFailure) -> tuple[int, int]:
    return failure.position, len(failure.contexts)


def _grammar_error(text: str, offset: int, failure: ParseFailure) -> GrammarError:
    absolute = offset + failure.position
    consumed = text[:absolute]
    line = consumed.count("\n") + 1
    column = absolute - (consumed.rfind("\n") + 1) + 1
    return GrammarError(
        failure.contexts,
        failure.reason,
        offset=absolute,
        line=line,
        column=column,
        fragment=text[absolute : absolute + _FRAGMENT_LENGTH],
    )
