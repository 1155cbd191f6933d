"""
Chart rendering for projection results.

Provides:
  - Distribution doughnut: total invested vs interest earned
  - Growth chart: cumulative total (filled) and cumulative invested (dashed) by age
  - PNG / base64 capture used by the web API and the PDF report

Every figure created here is owned by the caller of the render function and
must be closed once captured; render_charts() does that itself.
"""

from __future__ import annotations

import base64
import io
import math
from dataclasses import dataclass
from typing import Dict, List, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter

from smartsave.core.formatting import format_axis_currency, format_currency
from smartsave.core.projection import ProjectionResult
from smartsave.core.theme import Theme

# ═══════════════════════════════════════════════════════════════════
# Style constants
# ═══════════════════════════════════════════════════════════════════

INVESTED = "#3b82f6"
INTEREST = "#10b981"
TOTAL = "#6366f1"
EMPTY = "#cbd5e1"

CHART_W, CHART_H = 8, 5
PIE_W, PIE_H = 5, 5

CURRENCY_FMT = FuncFormatter(format_axis_currency)


@dataclass(frozen=True)
class Palette:
    background: str
    grid: str
    text: str
    fill_alpha: float


PALETTES = {
    Theme.LIGHT: Palette(background="#ffffff", grid="#0000000f", text="#64748b", fill_alpha=0.25),
    Theme.DARK: Palette(background="#0f172a", grid="#ffffff14", text="#94a3b8", fill_alpha=0.40),
}


def _style(fig, ax, palette: Palette) -> None:
    fig.patch.set_facecolor(palette.background)
    ax.set_facecolor(palette.background)
    ax.tick_params(colors=palette.text, labelsize=9)
    ax.xaxis.label.set_color(palette.text)
    ax.yaxis.label.set_color(palette.text)
    for spine in ax.spines.values():
        spine.set_visible(False)


def _legend(ax, palette: Palette, **kwargs) -> None:
    legend = ax.legend(frameon=False, fontsize=9, **kwargs)
    for text in legend.get_texts():
        text.set_color(palette.text)


def _finite(value: float) -> float:
    # overflowed projections (inf/nan) are drawn as 0
    return value if math.isfinite(value) else 0.0


# ═══════════════════════════════════════════════════════════════════
# Label thinning
# ═══════════════════════════════════════════════════════════════════

def thin_labels(ages: Sequence[int]) -> List[str]:
    """Every 2nd label above 15 points, every 5th above 30; the last is always kept."""
    count = len(ages)
    step = 1
    if count > 30:
        step = 5
    elif count > 15:
        step = 2
    return [
        str(age) if index % step == 0 or index == count - 1 else ""
        for index, age in enumerate(ages)
    ]


# ═══════════════════════════════════════════════════════════════════
# Charts
# ═══════════════════════════════════════════════════════════════════

def render_distribution_chart(result: ProjectionResult, theme: Theme = Theme.LIGHT,
                              figsize=(PIE_W, PIE_H)) -> plt.Figure:
    palette = PALETTES[theme]
    fig, ax = plt.subplots(figsize=figsize)
    _style(fig, ax, palette)

    invested = max(0.0, _finite(result.total_invested))
    interest = max(0.0, _finite(result.total_interest))
    ring = dict(width=0.35, edgecolor=palette.background)

    if invested + interest > 0:
        total = invested + interest
        wedges, _ = ax.pie(
            [invested, interest],
            colors=[INVESTED, INTEREST],
            startangle=90,
            counterclock=False,
            wedgeprops=ring,
        )
        labels = [
            f"Capital contributed: {format_currency(invested)} ({invested / total * 100:.1f}%)",
            f"Interest earned: {format_currency(interest)} ({interest / total * 100:.1f}%)",
        ]
        _legend(ax, palette, handles=wedges, labels=labels, loc="upper center",
                bbox_to_anchor=(0.5, 0.02))
    else:
        # nothing to split; draw a neutral ring
        ax.pie([1], colors=[EMPTY], startangle=90, wedgeprops=ring)
        ax.text(0, 0, "No data", ha="center", va="center", color=palette.text, fontsize=11)

    ax.set_aspect("equal")
    return fig


def render_growth_chart(result: ProjectionResult, theme: Theme = Theme.LIGHT,
                        figsize=(CHART_W, CHART_H)) -> plt.Figure:
    palette = PALETTES[theme]
    fig, ax = plt.subplots(figsize=figsize)
    _style(fig, ax, palette)

    ages = [point.age for point in result.yearly]
    totals = [_finite(point.total) for point in result.yearly]
    invested = [_finite(point.invested) for point in result.yearly]

    ax.fill_between(ages, totals, color=TOTAL, alpha=palette.fill_alpha, linewidth=0)
    ax.plot(ages, totals, color=TOTAL, linewidth=2.5, label="Accumulated value")
    ax.plot(ages, invested, color=INVESTED, linewidth=2, linestyle=(0, (6, 4)),
            label="Capital invested")

    ax.set_xticks(ages)
    ax.set_xticklabels(thin_labels(ages))
    ax.set_xlabel("Age", fontweight="bold")
    ax.yaxis.set_major_formatter(CURRENCY_FMT)
    ax.grid(True, color=palette.grid)
    _legend(ax, palette, loc="upper left")
    return fig


# ═══════════════════════════════════════════════════════════════════
# Capture
# ═══════════════════════════════════════════════════════════════════

def figure_to_png(fig: plt.Figure, dpi: int = 150) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", facecolor=fig.get_facecolor(), dpi=dpi,
                bbox_inches="tight")
    return buf.getvalue()


def figure_to_base64(fig: plt.Figure) -> str:
    """Convert a matplotlib figure to a base64-encoded PNG string."""
    return base64.b64encode(figure_to_png(fig)).decode()


def render_charts(result: ProjectionResult, theme: Theme = Theme.LIGHT) -> Dict[str, str]:
    """Return both charts as base64 PNGs keyed ``distribution`` and ``growth``."""
    figs = {
        "distribution": render_distribution_chart(result, theme),
        "growth": render_growth_chart(result, theme),
    }
    try:
        return {name: figure_to_base64(fig) for name, fig in figs.items()}
    finally:
        for fig in figs.values():
            plt.close(fig)
