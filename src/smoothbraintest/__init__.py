"""A small assertion library for unit tests."""

from smoothbraintest.assertions import (
    does_not_panic,
    equal,
    equal_float,
    equal_func,
    equal_one_of,
    error_contains,
    false,
    mappings_match,
    nil,
    not_equal,
    not_nil,
    panics,
    sequences_match,
    sequences_match_unordered,
    true,
)
from smoothbraintest.config import EngineConfig, load_config
from smoothbraintest.optional import Absent, Option, is_absent
from smoothbraintest.report import CallerLocation, FailureKind, FailureReport, format_error
from smoothbraintest.unit import CaseUnit, PytestUnit, RecordingUnit, UnitContext, UnitHalted

__all__ = [
    "Absent",
    "CallerLocation",
    "CaseUnit",
    "EngineConfig",
    "FailureKind",
    "FailureReport",
    "Option",
    "PytestUnit",
    "RecordingUnit",
    "UnitContext",
    "UnitHalted",
    "does_not_panic",
    "equal",
    "equal_float",
    "equal_func",
    "equal_one_of",
    "error_contains",
    "false",
    "format_error",
    "is_absent",
    "load_config",
    "mappings_match",
    "nil",
    "not_equal",
    "not_nil",
    "panics",
    "sequences_match",
    "sequences_match_unordered",
    "true",
]
