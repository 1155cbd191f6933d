"""
PDF report for a savings projection.

One A4 page: title, generation date, the plan inputs, the projected results,
the distribution and growth charts, and a footer. A chart that cannot be
captured is logged and left out; the rest of the page is still produced.
"""

from __future__ import annotations

import io
import logging
from datetime import date
from typing import Callable, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.image as mpimg
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from smartsave.core import charts
from smartsave.core.formatting import format_currency, format_percent
from smartsave.core.projection import ProjectionInput, ProjectionResult
from smartsave.core.theme import Theme

logger = logging.getLogger(__name__)

A4W, A4H = 8.27, 11.69

TITLE = "#6366f1"
HEADING = "#1e1e1e"
BODY = "#3c3c3c"
MUTED = "#646464"
FOOTER = "#969696"

TITLE_TEXT = "SmartSave - Savings Report"
FOOTER_TEXT = "SmartSave - Smart Savings Calculator"


def _mm(x_mm: float, y_mm: float) -> tuple:
    """Page millimetres (origin top-left) to figure fractions (origin bottom-left)."""
    return x_mm / 210.0, 1.0 - y_mm / 297.0


def _capture(name: str, render: Callable[..., plt.Figure], result: ProjectionResult,
             theme: Theme):
    """Render a chart and read it back as an image array, or None on failure."""
    fig = None
    try:
        fig = render(result, theme)
        png = charts.figure_to_png(fig)
        return mpimg.imread(io.BytesIO(png), format="png")
    except Exception:
        logger.warning("Could not capture %s chart; leaving it out of the report", name,
                       exc_info=True)
        return None
    finally:
        if fig is not None:
            plt.close(fig)


def _place_image(fig: plt.Figure, image, x_mm: float, y_mm: float, w_mm: float,
                 h_mm: float) -> None:
    left, top = _mm(x_mm, y_mm)
    ax = fig.add_axes([left, top - h_mm / 297.0, w_mm / 210.0, h_mm / 297.0])
    ax.imshow(image)
    ax.set_axis_off()


def _page(inputs: ProjectionInput, result: ProjectionResult, theme: Theme,
          generated_on: date) -> plt.Figure:
    fig = plt.figure(figsize=(A4W, A4H))
    fig.patch.set_facecolor("white")

    # Title and date
    fig.text(*_mm(20, 25), TITLE_TEXT, fontsize=22, color=TITLE, fontweight="bold")
    fig.text(*_mm(20, 33), f"Generated on {generated_on:%d %B %Y}", fontsize=10, color=MUTED)
    x0, y0 = _mm(20, 37)
    x1, _ = _mm(190, 37)
    fig.add_artist(plt.Line2D([x0, x1], [y0, y0], color=TITLE, linewidth=1.2))

    # Inputs
    fig.text(*_mm(20, 47), "Investment details", fontsize=13, color=HEADING, fontweight="bold")
    input_lines = [
        f"Initial capital: {format_currency(inputs.initial_capital)}",
        f"Current age: {inputs.current_age} years",
        f"Target age: {inputs.target_age} years",
        f"Annual interest rate: {inputs.annual_rate:g}%",
        f"Monthly contribution: {format_currency(inputs.monthly_contribution)}",
        f"Investment period: {result.years} years",
    ]
    for i, line in enumerate(input_lines):
        fig.text(*_mm(24, 56 + i * 7), line, fontsize=11, color=BODY)

    # Results
    fig.text(*_mm(20, 103), "Results", fontsize=13, color=HEADING, fontweight="bold")
    result_lines = [
        ("Projected final value:", format_currency(result.final_value), TITLE),
        ("Total invested:", format_currency(result.total_invested), charts.INVESTED),
        ("Earned from interest:", format_currency(result.total_interest), charts.INTEREST),
        ("Return on investment:", format_percent(result.yield_ratio), BODY),
    ]
    for i, (label, value, color) in enumerate(result_lines):
        y = 112 + i * 9
        fig.text(*_mm(24, y), label, fontsize=11, color=BODY)
        fig.text(*_mm(100, y), value, fontsize=11, color=color, fontweight="bold")

    # Charts
    distribution = _capture("distribution", charts.render_distribution_chart, result, theme)
    if distribution is not None:
        fig.text(*_mm(20, 155), "Capital distribution", fontsize=12, color=HEADING,
                 fontweight="bold")
        _place_image(fig, distribution, 30, 158, 70, 70)

    growth = _capture("growth", charts.render_growth_chart, result, theme)
    if growth is not None:
        fig.text(*_mm(110, 155), "Growth by year", fontsize=12, color=HEADING,
                 fontweight="bold")
        _place_image(fig, growth, 105, 158, 85, 55)

    fig.text(*_mm(20, 285), FOOTER_TEXT, fontsize=9, color=FOOTER)
    return fig


def build_report(
    inputs: ProjectionInput,
    result: ProjectionResult,
    theme: Theme = Theme.LIGHT,
    generated_on: Optional[date] = None,
) -> bytes:
    """Lay the projection out on a one-page PDF and return the document bytes."""
    fig = _page(inputs, result, theme, generated_on or date.today())
    buf = io.BytesIO()
    try:
        with PdfPages(buf) as pdf:
            pdf.savefig(fig)
    finally:
        plt.close(fig)
    return buf.getvalue()
