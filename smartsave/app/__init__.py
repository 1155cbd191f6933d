"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Flask
from flask_cors import CORS

from smartsave.app.api.routes import api_bp
from smartsave.config import DefaultConfig


def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env("SMARTSAVE")
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
