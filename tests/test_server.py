"""Tests for the HTTP service."""

from __future__ import annotations

import time

import pytest
from fastapi.testclient import TestClient

from dumbdown.exceptions import ConversionError, InvalidInputError
from server.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_convert_html(client: TestClient) -> None:
    response = client.post("/convert", json={"text": "<h1>Hi</h1><p>there</p>"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["dumbdown"] == "Hi\n==\n\nthere"
    assert "estimated_tokens" in body


def test_convert_reports_integer_token_count(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("server.routers.convert.count_tokens", lambda text: 7)

    response = client.post("/convert", json={"text": "<p>seven</p>"})

    assert response.json()["estimated_tokens"] == 7


def test_convert_markdown(client: TestClient) -> None:
    response = client.post("/convert-markdown", json={"markdown": "# T\n\n- a"})

    assert response.status_code == 200
    assert response.json()["dumbdown"] == "T\n=\n\n- a"


@pytest.mark.parametrize(
    "payload",
    [{}, {"text": ""}, {"text": "   "}, {"text": 123}, {"text": None}, {"html": "<p>x</p>"}],
)
def test_convert_rejects_bad_payloads(client: TestClient, payload: dict) -> None:
    response = client.post("/convert", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request"
    assert "{ text:" in body["message"]


def test_convert_markdown_rejects_wrong_field(client: TestClient) -> None:
    response = client.post("/convert-markdown", json={"text": "# T"})

    assert response.status_code == 400
    assert "{ markdown:" in response.json()["message"]


def test_conversion_error_maps_to_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(html: str) -> str:
        raise ConversionError("boom")

    monkeypatch.setattr("server.routers.convert.convert", boom)

    response = client.post("/convert", json={"text": "<p>x</p>"})

    assert response.status_code == 500
    assert response.json() == {"error": "Conversion failed", "message": "boom"}


def test_invalid_input_error_maps_to_400(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def reject(markdown: str) -> str:
        raise InvalidInputError("not a string")

    monkeypatch.setattr("server.routers.convert.convert_markdown", reject)

    response = client.post("/convert-markdown", json={"markdown": "# T"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request", "message": "not a string"}


def test_slow_conversion_times_out(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def slow(html: str) -> str:
        time.sleep(0.5)
        return "late"

    monkeypatch.setattr("server.routers.convert.convert", slow)
    monkeypatch.setattr("server.routers.convert.CONVERT_TIMEOUT_S", 0.05)

    response = client.post("/convert", json={"text": "<p>x</p>"})

    assert response.status_code == 500
    assert response.json()["message"] == "Conversion timed out"


def test_unknown_route(client: TestClient) -> None:
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {
        "error": "Not found",
        "message": "Endpoint not found. Try POST /convert or GET /health",
    }


def test_cors_preflight(client: TestClient) -> None:
    response = client.options(
        "/convert",
        headers={
            "Origin": "https://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
