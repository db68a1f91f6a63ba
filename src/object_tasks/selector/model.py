"""Selector model: fragment kinds, combinators, and the selector value types."""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """Selector fragment kinds, declared in the order they must be appended.

    Each member carries its rank, the text wrapped around its value when
    stringified, and whether it may occur only once per selector.
    """

    ELEMENT = (0, "", "", True)
    ID = (1, "#", "", True)
    CLASS = (2, ".", "", False)
    ATTRIBUTE = (3, "[", "]", False)
    PSEUDO_CLASS = (4, ":", "", False)
    PSEUDO_ELEMENT = (5, "::", "", True)

    def __init__(self, rank: int, prefix: str, suffix: str, singular: bool) -> None:
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.singular = singular

    def render(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"


class Combinator(Enum):
    """The CSS combinators."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"
