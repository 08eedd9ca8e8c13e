"""
FastAPI endpoint tests for the Numtext API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

from api import app
from fastapi.testclient import TestClient

from numtext import __version__

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__


class TestConvertEndpoint:
    def test_int_value_is_spelled_out(self) -> None:
        resp = client.post("/convert", json={"value": 60502})
        assert resp.status_code == 200
        data = resp.json()
        assert data["direction"] == "TO_TEXT"
        assert data["text"] == "sixty thousand, five hundred and two"
        assert data["number"] == 60502

    def test_digit_string_is_spelled_out(self) -> None:
        data = client.post("/convert", json={"value": "102"}).json()
        assert data["direction"] == "TO_TEXT"
        assert data["text"] == "one hundred and two"

    def test_text_is_parsed(self) -> None:
        data = client.post(
            "/convert", json={"value": "sixty thousand five hundred and two"}
        ).json()
        assert data["direction"] == "TO_NUMBER"
        assert data["number"] == 60502
        assert data["input"] == "sixty thousand five hundred and two"

    def test_out_of_range_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "999000000000000000"})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "OUT_OF_RANGE"
        assert detail["details"]["limit"] == 999 * 10**15

    def test_boolean_value_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": True})
        assert resp.status_code == 422

    def test_text_beyond_spelling_range_still_parses(self) -> None:
        resp = client.post(
            "/convert", json={"value": "nine hundred and ninety nine quadrillion"}
        )
        assert resp.status_code == 200
        assert resp.json()["number"] == 999 * 10**15

    def test_unrecognized_token_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "sixty frobnicate two"})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "UNRECOGNIZED_TOKEN"
        assert detail["details"]["token"] == "frobnicate"


class TestTextEndpoint:
    def test_spells_numeral(self) -> None:
        data = client.get("/text/102").json()
        assert data["text"] == "one hundred and two"
        assert data["direction"] == "TO_TEXT"

    def test_rejects_words(self) -> None:
        resp = client.get("/text/sixty")
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_NUMERAL"


class TestNumberEndpoint:
    def test_parses_text(self) -> None:
        data = client.get("/number", params={"text": "six hundred, sixty five"}).json()
        assert data["number"] == 665
        assert data["text"] == "six hundred and sixty-five"

    def test_no_upper_bound_on_parsing(self) -> None:
        resp = client.get(
            "/number", params={"text": "nine hundred and ninety nine quadrillion"}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["number"] == 999 * 10**15
        assert data["text"] is None

    def test_digits_are_parsed_not_spelled(self) -> None:
        data = client.get("/number", params={"text": "42"}).json()
        assert data["direction"] == "TO_NUMBER"
        assert data["number"] == 42


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422

    def test_missing_query_returns_422(self) -> None:
        resp = client.get("/number")
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/convert")
        assert resp.status_code == 422
