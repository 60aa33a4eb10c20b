"""Assertions about raised exceptions."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from smoothbraintest.report import FailureKind, fail
from smoothbraintest.unit import UnitContext


def _walk_chain(err: BaseException) -> Iterator[BaseException]:
    """Yield err and every exception linked to it, each at most once.

    Follows ``__cause__``, ``__context__`` (unless suppressed with
    ``raise ... from None``) and the members of exception groups.
    """
    seen: set[int] = set()
    stack = [err]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node

        linked: list[BaseException | None] = [node.__cause__]
        if not node.__suppress_context__:
            linked.append(node.__context__)
        if isinstance(node, BaseExceptionGroup):
            linked.extend(node.exceptions)
        stack.extend(reversed([e for e in linked if e is not None]))


def _matches(node: BaseException, expected: Any) -> bool:
    if node is expected:
        return True
    if isinstance(expected, type):
        return isinstance(node, expected)
    return node == expected


def error_contains(
    t: UnitContext,
    expected: BaseException | type[BaseException],
    got: BaseException | None,
) -> None:
    """Tests that the expected error is present anywhere in got's chain.

    expected may be an exception instance (matched by identity or ``==``) or
    an exception class (matched by isinstance).
    """
    if got is None or not any(_matches(node, expected) for node in _walk_chain(got)):
        fail(
            t, FailureKind.ERROR_CHAIN_MISS,
            "The expected error was not contained in the given error.",
            expected, got,
        )


def panics(
    t: UnitContext,
    action: Callable[[], Any],
    kind: type[Exception] = Exception,
) -> None:
    """Tests that calling action raises an exception of the given kind.

    The exception is intercepted so the rest of the test run is unaffected.
    """
    raised: Exception | None = None
    try:
        action()
    except Exception as e:
        raised = e

    if raised is None:
        fail(
            t, FailureKind.MISSING_PANIC,
            "The supplied function did not panic when it should have.",
            "panic", None,
        )
    elif not isinstance(raised, kind):
        fail(
            t, FailureKind.MISSING_PANIC,
            f"The supplied function raised {type(raised).__name__} instead of {kind.__name__}.",
            kind.__name__, raised,
        )


def does_not_panic(t: UnitContext, action: Callable[[], Any]) -> None:
    """Tests that calling action completes without raising.

    Any exception is intercepted and reported as a failure rather than propagated.
    """
    raised: Exception | None = None
    try:
        action()
    except Exception as e:
        raised = e

    if raised is not None:
        fail(
            t, FailureKind.UNEXPECTED_PANIC,
            "The supplied function panicked when it shouldn't have.",
            "", raised,
        )
