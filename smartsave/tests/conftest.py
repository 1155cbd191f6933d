from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from smartsave.app import create_app


@pytest.fixture()
def app() -> Flask:
    return create_app({"TESTING": True, "RATE_PRESETS": [4.0, 7.0, 10.0, 12.0]})


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
