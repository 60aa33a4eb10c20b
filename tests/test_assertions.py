"""Tests for the equality, boolean and nil assertions."""

import math
from dataclasses import dataclass

import pytest

from smoothbraintest import Option
from smoothbraintest.assertions import (
    equal,
    equal_float,
    equal_func,
    equal_one_of,
    false,
    nil,
    not_equal,
    not_nil,
    true,
)
from smoothbraintest.unit import UnitHalted


@dataclass
class Point:
    x: int
    y: int


# --- equal ---


@pytest.mark.parametrize("value", [0, 1, -5, 3.5, "abc", "", b"x", (1, 2), None, True])
def test_equal_pass(recorder, value):
    equal(recorder, value, value)
    assert recorder.messages == []


def test_equal_fail_reports_both_values(recorder):
    equal(recorder, 5, 6)
    assert len(recorder.messages) == 1
    message = recorder.messages[0]
    assert "The supplied values were not equal but were expected to be." in message
    assert "Expected: (int) '5'" in message
    assert "Got     : (int) '6'" in message


def test_equal_uses_object_equality(recorder):
    equal(recorder, Point(1, 2), Point(1, 2))
    assert recorder.messages == []

    equal(recorder, Point(1, 2), Point(2, 1))
    assert len(recorder.messages) == 1
    assert "(Point) 'Point(x=1, y=2)'" in recorder.messages[0]


def test_equal_different_types_fail(recorder):
    equal(recorder, "1", 1)
    assert "Expected: (str) '1'" in recorder.messages[0]
    assert "Got     : (int) '1'" in recorder.messages[0]


def test_equal_halts_unit(halting):
    with pytest.raises(UnitHalted):
        equal(halting, 1, 2)
    assert len(halting.messages) == 1


def test_passing_assertions_are_idempotent(recorder):
    for _ in range(3):
        equal(recorder, "x", "x")
        not_equal(recorder, "x", "y")
        true(recorder, True)
    assert recorder.failed is False


# --- equal_one_of ---


def test_equal_one_of_pass(recorder):
    equal_one_of(recorder, 2, [1, 2, 3])
    assert recorder.messages == []


def test_equal_one_of_fail(recorder):
    equal_one_of(recorder, 4, [1, 2, 3])
    assert len(recorder.messages) == 1
    assert "The supplied value is not in the supplied sequence." in recorder.messages[0]
    assert "Got     : (list) '[1, 2, 3]'" in recorder.messages[0]


def test_equal_one_of_empty_candidates_fail(recorder):
    equal_one_of(recorder, 1, [])
    assert recorder.failed


def test_equal_one_of_short_circuits(recorder):
    seen = []

    class Probe:
        def __init__(self, value):
            self.value = value

        def __eq__(self, other):
            seen.append(self.value)
            return self.value == other

    equal_one_of(recorder, 2, [Probe(1), Probe(2), Probe(3)])
    assert recorder.messages == []
    assert 3 not in seen


# --- equal_float ---


def test_equal_float_within_eps(recorder):
    equal_float(recorder, 1.0, 1.0 + 1e-9, 1e-6)
    assert recorder.messages == []


def test_equal_float_outside_eps(recorder):
    equal_float(recorder, 1.0, 1.1, 1e-6)
    assert len(recorder.messages) == 1
    assert "expected range of 1.000000e-06" in recorder.messages[0]


def test_equal_float_uses_absolute_difference(recorder):
    # A relative tolerance of 1e-6 would accept this pair.
    equal_float(recorder, 1e9, 1e9 + 10, 1e-6)
    assert recorder.failed


def test_equal_float_boundary_is_inclusive(recorder):
    equal_float(recorder, 1.0, 1.5, 0.5)
    assert recorder.messages == []


def test_equal_float_nan_fails(recorder):
    equal_float(recorder, math.nan, math.nan, 1.0)
    assert recorder.failed


def test_equal_float_negative_eps_raises(recorder):
    with pytest.raises(ValueError, match="eps"):
        equal_float(recorder, 1.0, 1.0, -1.0)


# --- equal_func ---


def test_equal_func_pass(recorder):
    equal_func(recorder, "Hello", "hello", lambda a, b: a.lower() == b.lower())
    assert recorder.messages == []


def test_equal_func_fail(recorder):
    equal_func(recorder, 1, 2, lambda a, b: a == b)
    assert len(recorder.messages) == 1
    assert "supplied comparison function" in recorder.messages[0]


# --- not_equal ---


def test_not_equal_pass(recorder):
    not_equal(recorder, 1, 2)
    assert recorder.messages == []


def test_not_equal_fail(recorder):
    not_equal(recorder, [1, 2], [1, 2])
    assert len(recorder.messages) == 1
    assert "were equal but were expected to not be" in recorder.messages[0]


# --- true / false ---


def test_true_pass(recorder):
    true(recorder, True)
    assert recorder.messages == []


def test_true_fail(recorder):
    true(recorder, False)
    assert "Expected: (bool) 'True'" in recorder.messages[0]
    assert "Got     : (bool) 'False'" in recorder.messages[0]


@pytest.mark.parametrize("value", [1, "yes", [0], object()])
def test_true_does_not_coerce_truthy_values(recorder, value):
    true(recorder, value)
    assert recorder.failed


def test_false_pass(recorder):
    false(recorder, False)
    assert recorder.messages == []


@pytest.mark.parametrize("value", [True, 0, "", None, []])
def test_false_does_not_coerce_falsy_values(recorder, value):
    false(recorder, value)
    assert len(recorder.messages) == 1
    assert "was not false when it was expected to be" in recorder.messages[0]


# --- nil / not_nil ---


@pytest.mark.parametrize("value", [None, [], {}, "", set(), Option(), Option(None), Option([])])
def test_nil_pass(recorder, value):
    nil(recorder, value)
    assert recorder.messages == []


@pytest.mark.parametrize("value", [[1], {"a": 1}, "x", 0, Option(5), Option(Option())])
def test_nil_fail(recorder, value):
    nil(recorder, value)
    assert len(recorder.messages) == 1
    assert "was not nil when it was expected to be" in recorder.messages[0]


def test_not_nil_pass(recorder):
    not_nil(recorder, [1, 2])
    not_nil(recorder, Option("value"))
    assert recorder.messages == []


@pytest.mark.parametrize("value", [None, [], Option()])
def test_not_nil_fail(recorder, value):
    not_nil(recorder, value)
    assert len(recorder.messages) == 1
    assert "Expected: (str) '!nil'" in recorder.messages[0]
