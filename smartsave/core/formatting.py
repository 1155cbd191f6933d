"""Display formatting for the single supported locale (``$1,234.56``)."""

from __future__ import annotations


def format_currency(value: float) -> str:
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def format_percent(value: float) -> str:
    return f"{value:,.2f}%"


def format_axis_currency(value: float, _pos=None) -> str:
    """Compact tick label; also usable directly as a matplotlib FuncFormatter."""
    if value >= 1e6:
        return f"${value / 1e6:.1f}M"
    if value >= 1e3:
        return f"${value / 1e3:.0f}K"
    return f"${value:g}"
