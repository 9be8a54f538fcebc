"""Tests for opcalc.writer and the calculate() pipeline."""

import logging

import pytest

from opcalc.calculator import calculate
from opcalc.models import ERROR_TEXT, Outcome
from opcalc.writer import format_number, format_result


@pytest.mark.parametrize("value,expected", [
    (7.0, "7"),
    (5.5, "5.5"),
    (10.0, "10"),
    (1 / 3, "0.333333"),
    (1e20, "1e+20"),
    (-0.25, "-0.25"),
    (123456789.0, "1.23457e+08"),
    (float("inf"), "inf"),
])
def test_format_number_default(value, expected):
    assert format_number(value) == expected


def test_format_number_precision():
    assert format_number(1 / 3, 10) == "0.3333333333"
    assert format_number(2 / 3, 1) == "0.7"


def test_format_result_failure():
    assert format_result(Outcome.failure("division_by_zero")) == ERROR_TEXT


def test_format_result_success():
    assert format_result(Outcome.success(7.0)) == "7"


def test_outcome_needs_exactly_one_field():
    with pytest.raises(ValueError):
        Outcome()
    with pytest.raises(ValueError):
        Outcome(value=1.0, error="division_by_zero")


# --- Pipeline ---

@pytest.mark.parametrize("text,expected", [
    ("+ 3 4", "7"),
    ("- 10 4.5", "5.5"),
    ("/ 5 0", "Error!"),
    ("? 1 2", "Error!"),
    ("* 2.5 4", "10"),
])
def test_scenarios(text, expected):
    assert format_result(calculate(text)) == expected


def test_calculate_success_outcome():
    outcome = calculate("/ 1 4")
    assert outcome.ok
    assert outcome.value == 0.25
    assert outcome.error is None


@pytest.mark.parametrize("text,reason", [
    ("/ 5 0", "division_by_zero"),
    ("? 1 2", "unknown_operator"),
    ("+ a 2", "invalid_operand"),
    ("+ 1", "missing_operand"),
    ("", "missing_operator"),
    ("+ 1e400 1", "invalid_operand"),
    ("+ ３ 4", "invalid_operand"),
])
def test_calculate_failure_reason(text, reason):
    outcome = calculate(text)
    assert not outcome.ok
    assert outcome.value is None
    assert outcome.error == reason


def test_rejection_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="opcalc"):
        calculate("/ 5 0")
    assert "division_by_zero" in caplog.text
