"""Assertion functions. Each takes the test-unit context first."""

from smoothbraintest.assertions.equality import (
    equal,
    equal_float,
    equal_func,
    equal_one_of,
    false,
    not_equal,
    true,
)
from smoothbraintest.assertions.errors import does_not_panic, error_contains, panics
from smoothbraintest.assertions.nilness import nil, not_nil
from smoothbraintest.assertions.sequences import (
    mappings_match,
    sequences_match,
    sequences_match_unordered,
)

__all__ = [
    "does_not_panic",
    "equal",
    "equal_float",
    "equal_func",
    "equal_one_of",
    "error_contains",
    "false",
    "mappings_match",
    "nil",
    "not_equal",
    "not_nil",
    "panics",
    "sequences_match",
    "sequences_match_unordered",
    "true",
]
