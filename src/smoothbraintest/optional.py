"""Explicit absence: what counts as "nil" for the nil/not_nil assertions."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections.abc import Sized
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Absent(ABC):
    """Capability of types that can report whether they hold a value.

    Types opt in by subclassing or with ``Absent.register``; having an
    ``is_absent`` attribute is not enough.
    """

    @abstractmethod
    def is_absent(self) -> bool:
        """Return True when no meaningful value is held."""
        ...


def _reports_absent(value: Absent) -> bool:
    return value.is_absent() is True


def _held_absent(value: Any) -> bool:
    """Absence of a value held by a wrapper. Nested options are not unwrapped."""
    if value is None:
        return True
    if isinstance(value, Option):
        return False
    if isinstance(value, Absent):
        return _reports_absent(value)
    if isinstance(value, weakref.ref):
        return value() is None
    if isinstance(value, Sized):
        return len(value) == 0
    return False


@dataclass(frozen=True)
class Option(Absent, Generic[T]):
    """Wraps a single value that may be absent.

    The option is absent when its held value is None, an empty container, a
    dead weak reference, or an Absent value reporting absence. Options held
    by an option are not unwrapped further.
    """

    value: T | None = None

    def is_absent(self) -> bool:
        return _held_absent(self.value)

    def get(self) -> T:
        if self.is_absent():
            raise ValueError("Option holds no value")
        return self.value  # type: ignore[return-value]


def is_absent(value: Any) -> bool:
    """Return True if value is None, empty, dead, or reports itself absent."""
    if value is None:
        return True
    if isinstance(value, Absent):
        return _reports_absent(value)
    if isinstance(value, weakref.ref):
        referent = value()
        return referent is None or _held_absent(referent)
    if isinstance(value, Sized):
        return len(value) == 0
    return False
