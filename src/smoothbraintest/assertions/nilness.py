from __future__ import annotations

from typing import Any

from smoothbraintest.optional import is_absent
from smoothbraintest.report import FailureKind, fail
from smoothbraintest.unit import UnitContext


def nil(t: UnitContext, v: Any) -> None:
    """Tests that the supplied value is absent.

    None, empty containers, dead weak references, and Absent-capable values
    reporting ``is_absent()`` (such as an empty Option) pass.
    """
    if not is_absent(v):
        fail(
            t, FailureKind.NIL_EXPECTED,
            "The supplied value was not nil when it was expected to be.",
            None, v,
        )


def not_nil(t: UnitContext, v: Any) -> None:
    """Tests that the supplied value is present. The inverse of ``nil``."""
    if is_absent(v):
        fail(
            t, FailureKind.NON_NIL_EXPECTED,
            "The supplied value was nil when it was not expected to be.",
            "!nil", v,
        )
