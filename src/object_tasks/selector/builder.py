"""Fluent builder for compound CSS selectors.

Each compound selector has the shape::

    element#id.class[attr]:pseudoClass::pseudoElement

where class, attribute and pseudo-class may repeat.  Fragments must be
appended in that order; element, id and pseudo-element may appear once.

    >>> b = css_selector_builder
    >>> b.id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
    >>> b.combine(b.element("div"), "+", b.element("span")).stringify()
    'div + span'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from object_tasks.errors import DuplicateFragmentError, FragmentOrderError
from object_tasks.selector.model import Combinator, FragmentKind

__all__ = [
    "Selector",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
]

logger = logging.getLogger(__name__)


class Selector:
    """A compound selector built one fragment at a time."""

    def __init__(self) -> None:
        self._fragments: dict[FragmentKind, list[str]] = {
            kind: [] for kind in FragmentKind
        }
        self._last_rank = -1

    # --- fragment appends ----------------------------------------------------

    def element(self, value: str) -> Selector:
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def _append(self, kind: FragmentKind, value: str) -> Selector:
        """Record *value* under *kind* after checking singularity and order."""
        if kind.singular and self._fragments[kind]:
            raise DuplicateFragmentError(kind)
        if kind.rank < self._last_rank:
            raise FragmentOrderError(kind)
        self._fragments[kind].append(value)
        self._last_rank = kind.rank
        return self

    # --- inspection ------------------------------------------------------------

    def fragments(self, kind: FragmentKind) -> list[str]:
        """Return a copy of the raw values recorded for *kind*."""
        return list(self._fragments[kind])

    # --- output ----------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(
            kind.render(value)
            for kind in FragmentKind
            for value in self._fragments[kind]
        )

    def combine(
        self, combinator: Combinator | str, other: SelectorLike
    ) -> CombinedSelector:
        """Join this selector with *other*; see :meth:`SelectorBuilder.combine`."""
        return css_selector_builder.combine(self, combinator, other)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator, stored as final text."""

    text: str

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


SelectorLike = Selector | CombinedSelector


class SelectorBuilder:
    """Entry points that start a new :class:`Selector` from one fragment."""

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(
        self,
        first: SelectorLike,
        combinator: Combinator | str,
        second: SelectorLike,
    ) -> CombinedSelector:
        """Return ``"<first> <combinator> <second>"`` as a new combined selector.

        The combinator is used verbatim and is not checked against the CSS
        combinators.  Every call returns an independent result.
        """
        token = combinator.value if isinstance(combinator, Combinator) else combinator
        text = f"{first.stringify()} {token} {second.stringify()}"
        logger.debug("Combined selector: %r", text)
        return CombinedSelector(text)


css_selector_builder = SelectorBuilder()
