"""Tests for object_tasks.errors."""
from __future__ import annotations

from object_tasks import (
    DuplicateFragmentError,
    FragmentKind,
    FragmentOrderError,
    MalformedJSONError,
    ObjectTasksError,
    SelectorError,
)


class TestObjectTasksError:
    def test_is_exception(self) -> None:
        assert issubclass(ObjectTasksError, Exception)

    def test_cause_default_none(self) -> None:
        assert ObjectTasksError("boom").cause is None

    def test_cause_set(self) -> None:
        orig = ValueError("original")
        assert ObjectTasksError("wrapped", cause=orig).cause is orig


class TestMalformedJSONError:
    def test_defaults(self) -> None:
        err = MalformedJSONError("bad")
        assert str(err) == "bad"
        assert err.line is None
        assert err.column is None


class TestSelectorErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(DuplicateFragmentError, SelectorError)
        assert issubclass(FragmentOrderError, SelectorError)
        assert issubclass(SelectorError, ObjectTasksError)

    def test_default_messages(self) -> None:
        dup = DuplicateFragmentError(FragmentKind.ID)
        order = FragmentOrderError(FragmentKind.CLASS)
        assert "should not occur more then one time" in str(dup)
        assert "arranged in the following order" in str(order)
        assert dup.kind is FragmentKind.ID
        assert order.kind is FragmentKind.CLASS

    def test_custom_message(self) -> None:
        err = FragmentOrderError(FragmentKind.ELEMENT, "nope")
        assert str(err) == "nope"
