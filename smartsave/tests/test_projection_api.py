from __future__ import annotations

import base64
from math import isclose

from flask.testing import FlaskClient


def projection_payload() -> dict:
    return {
        "initial_capital": 0,
        "current_age": 30,
        "target_age": 31,
        "annual_rate": 12,
        "monthly_contribution": 100,
    }


def test_projection_endpoint_returns_result_and_summary(client: FlaskClient):
    resp = client.post("/api/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert isclose(body["result"]["final_value"], 1268.25, abs_tol=0.01)
    assert body["result"]["total_invested"] == 1200
    assert [point["age"] for point in body["result"]["yearly"]] == [30, 31]
    assert body["summary"]["monthly_rate"] == "1.00%"
    assert body["summary"]["outcome"]["tier"] == "modest"
    assert body["summary"]["active_preset"] == 12.0
    assert body["inputs"]["annual_rate"] == 12.0


def test_projection_coerces_malformed_text(client: FlaskClient):
    payload = {
        "initial_capital": "1000 dollars",
        "current_age": "30",
        "target_age": "31.7",
        "annual_rate": "zero",
        "monthly_contribution": "100",
    }
    resp = client.post("/api/projection", json=payload)

    assert resp.status_code == 200
    result = resp.get_json()["result"]
    assert result["final_value"] == 2200
    assert result["total_interest"] == 0
    assert result["years"] == 1


def test_empty_body_projects_all_zero_plan(client: FlaskClient):
    resp = client.post("/api/projection")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["result"]["years"] == 0
    assert body["result"]["yield_ratio"] == 0
    assert body["summary"]["outcome"]["tier"] == "no horizon"


def test_non_object_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/projection", json=[1, 2, 3])

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_presets_endpoint(client: FlaskClient):
    resp = client.get("/api/presets")

    assert resp.status_code == 200
    assert resp.get_json() == {"presets": [4.0, 7.0, 10.0, 12.0]}


def test_charts_endpoint_returns_png_images(client: FlaskClient):
    resp = client.post("/api/projection/charts?theme=dark", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["theme"] == "dark"
    assert set(body["charts"]) == {"distribution", "growth"}
    assert base64.b64decode(body["charts"]["growth"]).startswith(b"\x89PNG")


def test_report_endpoint_downloads_pdf(client: FlaskClient):
    resp = client.post("/api/projection/report", json=projection_payload())

    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert "SmartSave-Savings-Report.pdf" in resp.headers["Content-Disposition"]
    assert resp.data.startswith(b"%PDF")


def test_theme_toggle_persists_in_cookie(client: FlaskClient):
    assert client.get("/api/theme").get_json() == {"theme": "light"}

    resp = client.post("/api/theme/toggle")
    assert resp.get_json() == {"theme": "dark"}
    assert "smartsave-theme=dark" in resp.headers["Set-Cookie"]

    assert client.get("/api/theme").get_json() == {"theme": "dark"}
    assert client.post("/api/theme/toggle").get_json() == {"theme": "light"}


def overflow_payload() -> dict:
    return {
        "initial_capital": 1,
        "current_age": 0,
        "target_age": 100,
        "annual_rate": 1e6,
        "monthly_contribution": 1,
    }


def test_overflowed_values_serialise_as_null(client: FlaskClient):
    resp = client.post("/api/projection", json=overflow_payload())

    assert resp.status_code == 200
    assert b"Infinity" not in resp.data
    body = resp.get_json()
    assert body["result"]["final_value"] is None
    assert body["result"]["yearly"][-1]["total"] is None
    assert body["result"]["total_invested"] == 1201


def test_charts_endpoint_survives_overflow(client: FlaskClient):
    resp = client.post("/api/projection/charts", json=overflow_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body["charts"]) == {"distribution", "growth"}
