"""Fixed literals of the GMD grammar."""

from dataclasses import dataclass

from give_me_diet.parser.combinators import Production, named, tag


@dataclass(frozen=True)
class Keyword:
    """A literal token matched verbatim."""

    value: str

    def __str__(self) -> str:
        return self.value

    @property
    def tag(self) -> Production[str]:
        return named(repr(self.value), tag(self.value))


MINUS = Keyword("-")
OF = Keyword("of")
DEFINE = Keyword("define")
EAT = Keyword("eat")
