from __future__ import annotations

import math
import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict, field_validator

PERIODS_PER_YEAR = 12

# leading numeric prefix of free text, e.g. "12.5abc" -> "12.5"
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_PREFIX = re.compile(r"^\s*[+-]?\d+")
_INFINITY = re.compile(r"^\s*([+-]?)Infinity")


# -----------------------------
# Silent-default coercion
# -----------------------------


def coerce_float(value: Any) -> float:
    """Parse ``value`` as a float; anything unparsable (or NaN) becomes 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if match:
            number = float(match.group(0))
        else:
            inf = _INFINITY.match(value)
            if not inf:
                return 0.0
            number = -math.inf if inf.group(1) == "-" else math.inf
    else:
        return 0.0
    return 0.0 if math.isnan(number) else number


def coerce_int(value: Any) -> int:
    """Parse ``value`` as an integer, truncating decimals; unparsable becomes 0.

    Text only reads its leading digits, so "1e3" is 1 and "30.9" is 30.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        match = _INTEGER_PREFIX.match(value)
        return int(match.group(0)) if match else 0
    number = coerce_float(value)
    if math.isinf(number):
        return 0
    return int(number)


# -----------------------------
# Engine records
# -----------------------------


class ProjectionInput(BaseModel):
    """Raw plan inputs. Every field is coerced, never rejected."""

    model_config = ConfigDict(frozen=True)

    initial_capital: float = 0.0
    current_age: int = 0
    target_age: int = 0
    annual_rate: float = 0.0  # percent, e.g. 7 for 7%
    monthly_contribution: float = 0.0

    @field_validator("initial_capital", "annual_rate", "monthly_contribution", mode="before")
    @classmethod
    def _coerce_float_fields(cls, value: Any) -> float:
        return coerce_float(value)

    @field_validator("current_age", "target_age", mode="before")
    @classmethod
    def _coerce_int_fields(cls, value: Any) -> int:
        return coerce_int(value)

    @property
    def years(self) -> int:
        return max(0, self.target_age - self.current_age)

    @property
    def periodic_rate(self) -> float:
        return self.annual_rate / 100 / PERIODS_PER_YEAR


class YearPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: int
    total: float
    invested: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    final_value: float
    total_invested: float
    total_interest: float
    yield_ratio: float  # percent of total invested
    monthly_rate: float  # percent
    years: int
    yearly: List[YearPoint]


# -----------------------------
# Closed-form future values
# -----------------------------


def _growth(rate: float, periods: int) -> float:
    # float ** raises instead of overflowing to inf
    try:
        return (1 + rate) ** periods
    except OverflowError:
        return math.inf


def future_value_of_capital(principal: float, rate: float, periods: int) -> float:
    return principal * _growth(rate, periods)


def future_value_of_contributions(payment: float, rate: float, periods: int) -> float:
    """Ordinary annuity: ``periods`` payments made at the end of each period.

    Non-positive rates take the linear branch ``payment * periods``.
    """
    if rate > 0:
        return payment * ((_growth(rate, periods) - 1) / rate)
    return payment * periods


def _point_at(inputs: ProjectionInput, rate: float, year: int) -> YearPoint:
    months = year * PERIODS_PER_YEAR
    total = future_value_of_capital(inputs.initial_capital, rate, months) + future_value_of_contributions(
        inputs.monthly_contribution, rate, months
    )
    invested = inputs.initial_capital + inputs.monthly_contribution * months
    return YearPoint(age=inputs.current_age + year, total=total, invested=invested)


def yearly_series(inputs: ProjectionInput) -> List[YearPoint]:
    """One closed-form evaluation per year from current age to target age inclusive."""
    rate = inputs.periodic_rate
    return [_point_at(inputs, rate, year) for year in range(inputs.years + 1)]


def accumulate_series(inputs: ProjectionInput) -> List[YearPoint]:
    """
    Same series as yearly_series, built by stepping month by month.

    Capital and contributions are tracked separately so a non-positive rate
    follows the same linear contribution branch as the closed form.
    """
    rate = inputs.periodic_rate
    capital = inputs.initial_capital
    contributions = 0.0
    invested = inputs.initial_capital

    points: List[YearPoint] = [YearPoint(age=inputs.current_age, total=capital, invested=invested)]
    for year in range(1, inputs.years + 1):
        for _ in range(PERIODS_PER_YEAR):
            capital *= 1 + rate
            if rate > 0:
                contributions = contributions * (1 + rate) + inputs.monthly_contribution
            else:
                contributions += inputs.monthly_contribution
            invested += inputs.monthly_contribution
        points.append(
            YearPoint(age=inputs.current_age + year, total=capital + contributions, invested=invested)
        )
    return points


def project(inputs: ProjectionInput) -> ProjectionResult:
    """
    Project a monthly-compounded savings plan to the target age.

    Order of operations:
      1) years = max(0, target - current); months = years * 12
      2) final value = FV(capital) + FV(ordinary annuity of contributions)
      3) invested = capital + contribution * months (no compounding)
      4) yield = interest / invested * 100, 0 when nothing positive was invested
    """
    rate = inputs.periodic_rate
    total_months = inputs.years * PERIODS_PER_YEAR

    final_value = future_value_of_capital(inputs.initial_capital, rate, total_months) + (
        future_value_of_contributions(inputs.monthly_contribution, rate, total_months)
    )
    total_invested = inputs.initial_capital + inputs.monthly_contribution * total_months
    total_interest = final_value - total_invested
    yield_ratio = (total_interest / total_invested) * 100 if total_invested > 0 else 0.0

    return ProjectionResult(
        final_value=final_value,
        total_invested=total_invested,
        total_interest=total_interest,
        yield_ratio=yield_ratio,
        monthly_rate=rate * 100,
        years=inputs.years,
        yearly=yearly_series(inputs),
    )


__all__ = [
    "PERIODS_PER_YEAR",
    "ProjectionInput",
    "ProjectionResult",
    "YearPoint",
    "accumulate_series",
    "coerce_float",
    "coerce_int",
    "future_value_of_capital",
    "future_value_of_contributions",
    "project",
    "yearly_series",
]
