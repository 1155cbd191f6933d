"""Formatted summary of a projection: result fields, tier message and active rate preset."""

from __future__ import annotations

from typing import Optional, Sequence

from pydantic import BaseModel

from smartsave.core.formatting import format_currency, format_percent
from smartsave.core.projection import ProjectionInput, ProjectionResult
from smartsave.core.tiers import Tier, classify_outcome


class TierMessage(BaseModel):
    tier: Tier
    icon: str
    message: str


class ProjectionSummary(BaseModel):
    final_value: str
    total_invested: str
    total_interest: str
    monthly_rate: str
    yield_ratio: str
    years: int
    outcome: TierMessage
    active_preset: Optional[float] = None


TIER_ICONS = {
    Tier.NO_HORIZON: "\u23f3",
    Tier.EXCEPTIONAL: "\U0001f3c6",
    Tier.EXCELLENT: "\U0001f680",
    Tier.STRONG: "\U0001f4aa",
    Tier.POSITIVE: "\U0001f4c8",
    Tier.MODEST: "\U0001f331",
    Tier.NONE: "\U0001f4a1",
}


def tier_message(result: ProjectionResult) -> TierMessage:
    tier = classify_outcome(result.years, result.yield_ratio)
    yield_text = format_percent(result.yield_ratio)

    if tier is Tier.NO_HORIZON:
        message = "Adjust your target age to project your savings over time."
    elif tier is Tier.EXCEPTIONAL:
        message = (
            f"Impressive! Your interest amounts to {yield_text} of what you invested. "
            "Compound interest is your best ally!"
        )
    elif tier is Tier.EXCELLENT:
        message = (
            "Excellent! Your money will multiply significantly. "
            f"In {result.years} years you will have {format_currency(result.final_value)}."
        )
    elif tier is Tier.STRONG:
        message = "Very good! You will more than double your investment. Consistency and time are the key."
    elif tier is Tier.POSITIVE:
        message = f"On the right track! Your savings will grow {yield_text} beyond what you put in."
    elif tier is Tier.MODEST:
        message = "Every dollar counts. With consistency and time you will see your savings grow."
    else:
        message = "Start investing today. The best time to start was yesterday, the second best is now!"

    return TierMessage(tier=tier, icon=TIER_ICONS[tier], message=message)


def active_preset(rate: float, presets: Sequence[float]) -> Optional[float]:
    """Return the preset equal to ``rate``, if any."""
    for preset in presets:
        if float(preset) == rate:
            return float(preset)
    return None


def build_summary(
    inputs: ProjectionInput,
    result: ProjectionResult,
    presets: Sequence[float] = (),
) -> ProjectionSummary:
    return ProjectionSummary(
        final_value=format_currency(result.final_value),
        total_invested=format_currency(result.total_invested),
        total_interest=format_currency(result.total_interest),
        monthly_rate=format_percent(result.monthly_rate),
        yield_ratio=format_percent(result.yield_ratio),
        years=result.years,
        outcome=tier_message(result),
        active_preset=active_preset(inputs.annual_rate, presets),
    )
