"""Test-unit contexts: where failure messages go and how a unit is halted."""

from __future__ import annotations

import unittest
from typing import Protocol, runtime_checkable

import pytest

from smoothbraintest.config import EngineConfig


@runtime_checkable
class UnitContext(Protocol):
    """The halting-report mechanism of the host test framework.

    ``fatal`` accepts a failure message, marks the current unit failed and
    stops further progress in that unit. Sibling units keep running.
    """

    def fatal(self, message: str) -> None: ...


class UnitHalted(BaseException):
    """Raised by a halting RecordingUnit to stop the code that called it."""


class PytestUnit:
    """Fails the running pytest test without a traceback."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def fatal(self, message: str) -> None:
        pytest.fail(message, pytrace=False)


class CaseUnit:
    """Fails the running unittest.TestCase."""

    def __init__(self, case: unittest.TestCase, config: EngineConfig | None = None) -> None:
        self.case = case
        self.config = config or EngineConfig()

    def fatal(self, message: str) -> None:
        self.case.fail(message)


class RecordingUnit:
    """Collects failure messages in memory.

    With ``halt=True`` each failure raises UnitHalted after it is recorded;
    otherwise the assertion returns to its caller.
    """

    def __init__(self, config: EngineConfig | None = None, halt: bool = False) -> None:
        self.config = config or EngineConfig()
        self.halt = halt
        self.messages: list[str] = []

    @property
    def failed(self) -> bool:
        return bool(self.messages)

    def fatal(self, message: str) -> None:
        self.messages.append(message)
        if self.halt:
            raise UnitHalted(message)
