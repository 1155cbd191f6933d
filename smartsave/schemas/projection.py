"""Data contracts for the projection endpoints."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from smartsave.core.presentation import ProjectionSummary
from smartsave.core.projection import ProjectionInput, ProjectionResult
from smartsave.core.theme import Theme


class ProjectionResponse(BaseModel):
    """Coerced inputs echoed back with the raw result and its formatted summary."""

    inputs: ProjectionInput
    result: ProjectionResult
    summary: ProjectionSummary


class ChartsResponse(BaseModel):
    theme: Theme
    charts: Dict[str, str] = Field(..., description="Base64-encoded PNG images keyed by chart name.")


class PresetsResponse(BaseModel):
    presets: List[float]


class ThemeResponse(BaseModel):
    theme: Theme
