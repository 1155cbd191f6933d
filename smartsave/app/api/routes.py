"""HTTP routes for the Flask API."""

from __future__ import annotations

import io
import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request, send_file
from pydantic import BaseModel, ValidationError

from smartsave.core.charts import render_charts
from smartsave.core.ping import get_ping
from smartsave.core.presentation import build_summary
from smartsave.core.projection import ProjectionInput, project
from smartsave.core.report import build_report
from smartsave.core.theme import Theme, parse_theme, toggle
from smartsave.schemas.projection import (
    ChartsResponse,
    PresetsResponse,
    ProjectionResponse,
    ThemeResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


def _read_inputs() -> ProjectionInput:
    """Parse the request body; a missing or empty body means every field is 0."""
    raw_payload = request.get_json(force=True, silent=True)
    if raw_payload is None:
        raw_payload = {}
    return ProjectionInput.model_validate(raw_payload)


def _json_response(model: BaseModel):
    # pydantic writes inf/nan as null; jsonify would emit bare Infinity
    return current_app.response_class(model.model_dump_json(), mimetype="application/json")


def _current_theme() -> Theme:
    # explicit ?theme= wins over the persisted cookie
    value = request.args.get("theme") or request.cookies.get(current_app.config["THEME_COOKIE"])
    return parse_theme(value)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping().model_dump())


@api_bp.get("/presets")
def presets() -> Any:
    response = PresetsResponse(presets=current_app.config["RATE_PRESETS"])
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Project the plan and return raw figures plus their display strings."""
    inputs = _read_inputs()
    result = project(inputs)
    summary = build_summary(inputs, result, current_app.config["RATE_PRESETS"])
    logger.debug("projection years=%s tier=%s", result.years, summary.outcome.tier.value)

    response = ProjectionResponse(inputs=inputs, result=result, summary=summary)
    return _json_response(response)


@api_bp.post("/projection/charts")
def projection_charts() -> Any:
    """Both charts as base64 PNGs, coloured for the active theme."""
    inputs = _read_inputs()
    theme = _current_theme()
    response = ChartsResponse(theme=theme, charts=render_charts(project(inputs), theme))
    return _json_response(response)


@api_bp.post("/projection/report")
def projection_report() -> Any:
    """Download the one-page PDF report."""
    inputs = _read_inputs()
    pdf = build_report(inputs, project(inputs), _current_theme())
    logger.debug("report built (%d bytes)", len(pdf))
    return send_file(
        io.BytesIO(pdf),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=current_app.config["REPORT_FILENAME"],
    )


@api_bp.get("/theme")
def theme() -> Any:
    return _json_response(ThemeResponse(theme=_current_theme()))


@api_bp.post("/theme/toggle")
def theme_toggle() -> Any:
    """Flip the persisted theme; clients re-fetch charts afterwards."""
    new_theme = toggle(_current_theme())
    response = _json_response(ThemeResponse(theme=new_theme))
    response.set_cookie(
        current_app.config["THEME_COOKIE"],
        new_theme.value,
        max_age=current_app.config["THEME_COOKIE_MAX_AGE"],
        samesite="Lax",
    )
    return response
