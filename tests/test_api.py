"""
FastAPI endpoint tests for the Numeral Speller API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from numeral_speller.pipeline import NumeralSpeller

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_speller() -> None:
    """Initialise the speller once for all API tests (bypasses lifespan)."""
    api._speller = NumeralSpeller(default_lang="nl")
    yield  # type: ignore[misc]
    api._speller = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["languages_loaded"] >= 2


class TestReferenceEndpoints:
    def test_languages(self) -> None:
        data = client.get("/languages").json()
        codes = {lang["code"] for lang in data}
        assert {"nl", "fy"} <= codes
        dutch = next(lang for lang in data if lang["code"] == "nl")
        assert dutch["max_digits"] == 66

    def test_currencies(self) -> None:
        data = client.get("/currencies").json()
        assert "EUR" in data
        assert data == sorted(data)


class TestConvertEndpoint:
    def test_cardinal_default(self) -> None:
        resp = client.post("/convert", json={"value": "38123147081932"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["output"] == "cardinal"
        assert data["lang"] == "nl"
        assert data["words"].startswith("achtendertig biljoen")

    def test_year(self) -> None:
        data = client.post(
            "/convert", json={"value": 1990, "output": "year"}
        ).json()
        assert data["words"] == "negentiennegentig"

    def test_frisian_ordinal(self) -> None:
        data = client.post(
            "/convert", json={"value": "73", "lang": "fy", "output": "ordinal"}
        ).json()
        assert data["words"] == "trijeënsantichste"

    def test_currency_with_code(self) -> None:
        data = client.post(
            "/convert",
            json={"value": "1.01", "output": "currency", "currency": "EUR"},
        ).json()
        assert data["words"] == "één euro en één cent"
        assert data["value"] == "1.01"

    def test_currency_with_explicit_names(self) -> None:
        data = client.post(
            "/convert",
            json={
                "value": "2.50",
                "output": "currency",
                "major_unit": "gulden",
                "minor_unit": "stuiver",
            },
        ).json()
        assert data["words"] == "twee gulden en vijftig stuiver"


class TestConvertErrors:
    def test_negative_ordinal_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "-1", "output": "ordinal"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "NEGATIVE_ORDINAL"

    def test_overflow_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "1e100"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "CANNOT_CONVERT"

    def test_far_overflow_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "1e300000"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "CANNOT_CONVERT"
        assert resp.json()["detail"]["details"]["max_digits"] == 66

    def test_huge_ordinal_num_is_spelled(self) -> None:
        resp = client.post(
            "/convert", json={"value": "1e5000", "output": "ordinal_num"}
        )
        assert resp.status_code == 200
        assert resp.json()["words"] == "1" + "0" * 5000 + "e"

    def test_infinite_year_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "inf", "output": "year"})
        assert resp.json()["detail"]["code"] == "INFINITE_YEAR"

    def test_garbage_value_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "twelve"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_NUMBER"

    def test_unknown_currency_returns_422(self) -> None:
        resp = client.post(
            "/convert",
            json={"value": "1", "output": "currency", "currency": "XYZ"},
        )
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "UNKNOWN_CURRENCY"

    def test_unknown_language_returns_404(self) -> None:
        resp = client.post("/convert", json={"value": "1", "lang": "xx"})
        assert resp.status_code == 404
        assert resp.json()["detail"]["code"] == "UNSUPPORTED_LANGUAGE"

    def test_unknown_output_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "1", "output": "roman"})
        assert resp.status_code == 422

    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422
