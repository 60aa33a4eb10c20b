"""Sequence and mapping assertions.

Each check stops at the first discrepancy it finds: a length mismatch is
reported before any element is compared. Only ``==`` is used, so elements
and values do not need to be hashable.
"""

from __future__ import annotations

from typing import Mapping, Sequence, TypeVar

from smoothbraintest.report import FailureKind, fail
from smoothbraintest.unit import UnitContext

K = TypeVar("K")
T = TypeVar("T")
V = TypeVar("V")


def sequences_match(t: UnitContext, expected: Sequence[T], got: Sequence[T]) -> None:
    """Tests that the sequences have the same length and equal values at every index."""
    if len(expected) != len(got):
        fail(
            t, FailureKind.LENGTH_MISMATCH,
            "Sequences do not match in length.",
            len(expected), len(got),
        )
        return

    for i, (want, have) in enumerate(zip(expected, got)):
        if not want == have:
            fail(
                t, FailureKind.ELEMENT_MISMATCH,
                f"Values do not match | Index: {i}",
                want, have,
            )
            return


def sequences_match_unordered(
    t: UnitContext, expected: Sequence[T], got: Sequence[T]
) -> None:
    """Tests that the sequences hold the same values, in any order.

    Duplicates count: every value of got can pair with at most one value of
    expected, so [1, 1, 2] matches [1, 2, 1] but not [1, 2, 2].
    """
    if len(expected) != len(got):
        fail(
            t, FailureKind.LENGTH_MISMATCH,
            "Sequences do not match in length.",
            len(expected), len(got),
        )
        return

    used: set[int] = set()
    for i, want in enumerate(expected):
        match = next(
            (j for j, have in enumerate(got) if j not in used and want == have),
            None,
        )
        if match is None:
            fail(
                t, FailureKind.ELEMENT_MISMATCH,
                f"Sequence value was not accounted for | Index: {i}",
                want, got,
            )
            return
        used.add(match)


def mappings_match(t: UnitContext, expected: Mapping[K, V], got: Mapping[K, V]) -> None:
    """Tests that the mappings have the same size and the same value under every key."""
    if len(expected) != len(got):
        fail(
            t, FailureKind.LENGTH_MISMATCH,
            "Mappings do not match in length.",
            len(expected), len(got),
        )
        return

    for key, want in expected.items():
        if key not in got:
            fail(
                t, FailureKind.KEY_MISSING,
                f"A key was not found | Key: {key}",
                key, list(got.keys()),
            )
            return
        have = got[key]
        if not want == have:
            fail(
                t, FailureKind.VALUE_MISMATCH,
                f"The values stored in the mapping did not match | Key: {key}",
                want, have,
            )
            return
