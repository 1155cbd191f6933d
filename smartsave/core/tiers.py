"""Qualitative outcome tiers for a projection."""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple


class Tier(str, Enum):
    NO_HORIZON = "no horizon"
    EXCEPTIONAL = "exceptional"
    EXCELLENT = "excellent"
    STRONG = "strong"
    POSITIVE = "positive"
    MODEST = "modest"
    NONE = "none"


# evaluated top to bottom, first strictly-greater threshold wins
YIELD_THRESHOLDS: List[Tuple[float, Tier]] = [
    (500, Tier.EXCEPTIONAL),
    (200, Tier.EXCELLENT),
    (100, Tier.STRONG),
    (50, Tier.POSITIVE),
    (0, Tier.MODEST),
]


def classify_outcome(years: int, yield_ratio: float) -> Tier:
    """Map a projection's duration and yield ratio to a tier.

    A zero-year horizon is checked before any yield threshold.
    """
    if years == 0:
        return Tier.NO_HORIZON
    for threshold, tier in YIELD_THRESHOLDS:
        if yield_ratio > threshold:
            return tier
    return Tier.NONE
