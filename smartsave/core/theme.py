"""Light/dark display theme. Only chart and report colours depend on it."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def parse_theme(value: Optional[str]) -> Theme:
    # anything other than an explicit "dark" falls back to light
    return Theme.DARK if value == Theme.DARK.value else Theme.LIGHT


def toggle(theme: Theme) -> Theme:
    return Theme.LIGHT if theme is Theme.DARK else Theme.DARK
