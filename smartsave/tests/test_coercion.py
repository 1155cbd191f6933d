from __future__ import annotations

import math

import pytest

from smartsave.core.projection import ProjectionInput, coerce_float, coerce_int, project


@pytest.mark.parametrize(
    "raw, expected",
    [
        (12.5, 12.5),
        (7, 7.0),
        ("7", 7.0),
        (" 7.25 ", 7.25),
        ("12abc", 12.0),
        ("7%", 7.0),
        ("1,000", 1.0),
        (".5", 0.5),
        ("-3.5", -3.5),
        ("1e3", 1000.0),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        (True, 0.0),
        ("NaN", 0.0),
        (float("nan"), 0.0),
        ([1, 2], 0.0),
    ],
)
def test_coerce_float(raw, expected):
    assert coerce_float(raw) == expected


def test_coerce_float_keeps_infinity():
    assert coerce_float("Infinity") == math.inf
    assert coerce_float("-Infinity") == -math.inf


@pytest.mark.parametrize(
    "raw, expected",
    [
        (30, 30),
        ("30", 30),
        ("30.9", 30),
        (30.9, 30),
        ("-4", -4),
        ("25 years", 25),
        ("x", 0),
        (None, 0),
        ("Infinity", 0),
        ("1e3", 1),
        (" 42", 42),
        (".5", 0),
        (float("inf"), 0),
    ],
)
def test_coerce_int(raw, expected):
    assert coerce_int(raw) == expected


def test_malformed_input_never_raises():
    plan = ProjectionInput.model_validate(
        {
            "initial_capital": "abc",
            "current_age": "30.9",
            "target_age": "",
            "annual_rate": "7%",
            "monthly_contribution": None,
        }
    )

    assert plan == ProjectionInput(initial_capital=0, current_age=30, target_age=0, annual_rate=7, monthly_contribution=0)
    result = project(plan)
    assert result.years == 0
    assert result.final_value == 0


def test_missing_fields_default_to_zero():
    plan = ProjectionInput.model_validate({})

    assert plan.initial_capital == 0
    assert plan.current_age == 0
    assert plan.target_age == 0
    assert plan.annual_rate == 0
    assert plan.monthly_contribution == 0
