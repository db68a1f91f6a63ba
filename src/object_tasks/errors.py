"""Error hierarchy for object_tasks."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from object_tasks.selector.model import FragmentKind


class ObjectTasksError(Exception):
    """Base error for all object_tasks errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class MalformedJSONError(ObjectTasksError, ValueError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(ObjectTasksError):
    """A selector fragment was appended in violation of the builder contract."""

    default_message = "Invalid selector fragment"

    def __init__(self, kind: FragmentKind, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.kind = kind


class DuplicateFragmentError(SelectorError):
    """Element, id or pseudo-element set twice on the same selector."""

    default_message = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )


class FragmentOrderError(SelectorError):
    """Fragment appended after a fragment kind that must follow it."""

    default_message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )
