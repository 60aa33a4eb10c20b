"""Failure reports: what failed, where, and how it is rendered."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from smoothbraintest.config import EngineConfig

if TYPE_CHECKING:
    from smoothbraintest.unit import UnitContext

logger = logging.getLogger(__name__)

_PACKAGE = __name__.partition(".")[0]


class FailureKind(str, Enum):
    NOT_EQUAL = "not_equal"
    UNEXPECTED_EQUAL = "unexpected_equal"
    BOOLEAN_MISMATCH = "boolean_mismatch"
    NIL_EXPECTED = "nil_expected"
    NON_NIL_EXPECTED = "non_nil_expected"
    LENGTH_MISMATCH = "length_mismatch"
    ELEMENT_MISMATCH = "element_mismatch"
    KEY_MISSING = "key_missing"
    VALUE_MISMATCH = "value_mismatch"
    ERROR_CHAIN_MISS = "error_chain_miss"
    MISSING_PANIC = "missing_panic"
    UNEXPECTED_PANIC = "unexpected_panic"


@dataclass(frozen=True)
class CallerLocation:
    file: str
    line: int


@dataclass(frozen=True)
class FailureReport:
    """A single failed assertion.

    Attributes:
        kind: Which rule failed.
        description: Human-readable detail about the failure.
        expected: The value the rule wanted.
        got: The value the rule was given.
        location: Source position of the assertion call in the test code.
    """

    kind: FailureKind
    description: str
    expected: Any
    got: Any
    location: CallerLocation

    def render(self, config: EngineConfig | None = None) -> str:
        return format_error(
            self.expected,
            self.got,
            self.description,
            self.location.file,
            self.location.line,
            config=config,
        )


def _type_name(value: Any, qualified: bool) -> str:
    cls = type(value)
    if not qualified or cls.__module__ == "builtins":
        return cls.__name__
    return f"{cls.__module__}.{cls.__qualname__}"


def _value_text(value: Any, max_length: int | None) -> str:
    text = str(value)
    if max_length is not None and len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text


def format_error(
    expected: Any,
    got: Any,
    description: str,
    file: str,
    line: int,
    config: EngineConfig | None = None,
) -> str:
    """Render a failure message in the following format:

        Error | File <file> Line <line> | <description>
        Expected: (<type>) '<value>'
        Got     : (<type>) '<value>'
    """
    config = config or EngineConfig()
    qualified = config.qualified_type_names
    limit = config.max_value_length
    return (
        f"Error | File {file} Line {line} | {description}\n"
        f"Expected: ({_type_name(expected, qualified)}) '{_value_text(expected, limit)}'\n"
        f"Got     : ({_type_name(got, qualified)}) '{_value_text(got, limit)}'"
    )


def caller_location() -> CallerLocation:
    """Return the position of the nearest calling frame outside this package."""
    frame = sys._getframe(1)
    while frame is not None:
        module = frame.f_globals.get("__name__", "")
        if module != _PACKAGE and not module.startswith(_PACKAGE + "."):
            return CallerLocation(file=frame.f_code.co_filename, line=frame.f_lineno)
        frame = frame.f_back
    return CallerLocation(file="<unknown>", line=0)


def deliver(t: UnitContext, report: FailureReport) -> None:
    """Hand a failure to the unit's halting-report mechanism."""
    config = getattr(t, "config", None)
    logger.debug(
        f"{report.kind.value} at {report.location.file}:{report.location.line}: {report.description}"
    )
    t.fatal(report.render(config))


def fail(
    t: UnitContext,
    kind: FailureKind,
    description: str,
    expected: Any,
    got: Any,
) -> None:
    deliver(
        t,
        FailureReport(
            kind=kind,
            description=description,
            expected=expected,
            got=got,
            location=caller_location(),
        ),
    )
