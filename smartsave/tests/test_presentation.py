from __future__ import annotations

from smartsave.core.presentation import active_preset, build_summary, tier_message
from smartsave.core.projection import ProjectionInput, project
from smartsave.core.tiers import Tier

PRESETS = [4.0, 7.0, 10.0, 12.0]


def test_no_horizon_message():
    result = project(ProjectionInput(initial_capital=100, current_age=30, target_age=30, annual_rate=7))
    message = tier_message(result)

    assert message.tier is Tier.NO_HORIZON
    assert message.icon == "⏳"
    assert "target age" in message.message


def test_exceptional_message_quotes_yield():
    result = project(
        ProjectionInput(initial_capital=10000, current_age=20, target_age=60, annual_rate=8, monthly_contribution=200)
    )
    message = tier_message(result)

    assert message.tier is Tier.EXCEPTIONAL
    assert f"{result.yield_ratio:,.2f}%" in message.message


def test_excellent_message_quotes_years_and_final_value():
    result = project(ProjectionInput(initial_capital=10000, current_age=30, target_age=50, annual_rate=8))
    message = tier_message(result)

    assert message.tier is Tier.EXCELLENT
    assert "In 20 years" in message.message
    assert f"${result.final_value:,.2f}" in message.message


def test_active_preset():
    assert active_preset(7.0, PRESETS) == 7.0
    assert active_preset(7.5, PRESETS) is None
    assert active_preset(7.0, []) is None


def test_build_summary_formats_every_field():
    inputs = ProjectionInput(initial_capital=1000, current_age=30, target_age=31, annual_rate=0, monthly_contribution=100)
    summary = build_summary(inputs, project(inputs), PRESETS)

    assert summary.final_value == "$2,200.00"
    assert summary.total_invested == "$2,200.00"
    assert summary.total_interest == "$0.00"
    assert summary.monthly_rate == "0.00%"
    assert summary.yield_ratio == "0.00%"
    assert summary.years == 1
    assert summary.outcome.tier is Tier.NONE
    assert summary.active_preset is None
