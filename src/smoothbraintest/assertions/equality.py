"""Equality and boolean assertions."""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar

from smoothbraintest.report import FailureKind, fail
from smoothbraintest.unit import UnitContext

T = TypeVar("T")


def equal(t: UnitContext, expected: Any, got: Any) -> None:
    """Tests that the supplied values are equal according to ``==``."""
    if not expected == got:
        fail(
            t, FailureKind.NOT_EQUAL,
            "The supplied values were not equal but were expected to be.",
            expected, got,
        )


def equal_one_of(t: UnitContext, expected: T, data: Sequence[T]) -> None:
    """Tests that the expected value is present in the supplied sequence."""
    for candidate in data:
        if expected == candidate:
            return
    fail(
        t, FailureKind.NOT_EQUAL,
        "The supplied value is not in the supplied sequence.",
        expected, data,
    )


def equal_float(t: UnitContext, expected: float, got: float, eps: float) -> None:
    """Tests that got is within +/- eps (absolute) of expected.

    A NaN on either side never compares within range.
    """
    if eps < 0:
        raise ValueError(f"eps must not be negative, got {eps}")
    if not abs(expected - got) <= eps:
        fail(
            t, FailureKind.NOT_EQUAL,
            f"The supplied float was not within the expected range of {eps:e} to be considered equal.",
            expected, got,
        )


def equal_func(
    t: UnitContext,
    expected: T,
    got: T,
    cmp: Callable[[T, T], bool],
) -> None:
    """Tests that got equals expected as decided by the supplied comparison function."""
    if not cmp(expected, got):
        fail(
            t, FailureKind.NOT_EQUAL,
            "The supplied values were not equal as defined by the supplied comparison "
            "function but were expected to be.",
            expected, got,
        )


def not_equal(t: UnitContext, expected: Any, got: Any) -> None:
    if not expected != got:
        fail(
            t, FailureKind.UNEXPECTED_EQUAL,
            "The supplied values were equal but were expected to not be.",
            expected, got,
        )


def true(t: UnitContext, v: bool) -> None:
    """Tests that the supplied value is the boolean True.

    Meant for predicates such as ``true(t, path.exists())``. Use ``equal`` for
    comparisons rather than ``true(t, a == b)``, so the failure shows both values.
    """
    if v is not True:
        fail(
            t, FailureKind.BOOLEAN_MISMATCH,
            "The supplied value was not true when it was expected to be.",
            True, v,
        )


def false(t: UnitContext, v: bool) -> None:
    """Tests that the supplied value is the boolean False. See ``true``."""
    if v is not False:
        fail(
            t, FailureKind.BOOLEAN_MISMATCH,
            "The supplied value was not false when it was expected to be.",
            False, v,
        )
