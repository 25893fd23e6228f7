import random
import re

import pytest
from fastapi.testclient import TestClient

from src.analyzer.api.server import app, get_service
from src.analyzer.config import Settings
from src.analyzer.service import AnalysisService


class _ExplodingService:
    def analyze(self, symbol):
        raise RuntimeError("boom")

    def price_series(self, symbol):
        raise RuntimeError("chart boom")


@pytest.fixture
def client():
    app.dependency_overrides[get_service] = lambda: AnalysisService.from_settings(
        Settings(fmp_api_key="demo"), rng=random.Random(7)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_service] = lambda: _ExplodingService()
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_analyze_known_symbol_in_mock_mode(client):
    response = client.get("/api/analyze", params={"symbol": "AAPL"})

    assert response.status_code == 200
    body = response.json()
    assert "Mock" in body["dataSource"]
    assert body["sector"] == "Technology"
    assert re.fullmatch(r"\d+\.\d{2}", body["price"])
    assert 3 <= len(body["news"]) <= 5


def test_analyze_normalizes_symbol(client):
    body = client.get("/api/analyze", params={"symbol": " tsla "}).json()

    assert body["symbol"] == "TSLA"
    assert body["name"] == "Tesla Inc."


@pytest.mark.parametrize("query", ["", "?symbol=", "?symbol=%20%20"])
def test_analyze_without_symbol_is_400(client, query):
    response = client.get(f"/api/analyze{query}")

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Stock symbol is required"
    assert "news" not in body
    assert "price" not in body


def test_analyze_rejects_other_methods(client):
    response = client.post("/api/analyze?symbol=AAPL")

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


def test_analyze_preflight_is_empty_200(client):
    response = client.options("/api/analyze")

    assert response.status_code == 200
    assert response.content == b""


@pytest.mark.parametrize("path", ["/api/analyze", "/api/chart"])
def test_browser_preflight_is_empty_200(client, path):
    response = client.options(
        path,
        headers={
            "Origin": "http://dashboard.test",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"


def test_browser_preflight_accepts_any_requested_header(client):
    response = client.options(
        "/api/analyze",
        headers={
            "Origin": "http://dashboard.test",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "authorization",
        },
    )

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-headers"] == "authorization"


def test_head_gets_method_not_allowed(client):
    response = client.head("/api/analyze", params={"symbol": "AAPL"})

    assert response.status_code == 405


def test_analyze_unexpected_error_is_500(broken_client):
    response = broken_client.get("/api/analyze", params={"symbol": "AAPL"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to analyze stock",
        "symbol": "AAPL",
        "message": "boom",
    }


def test_chart_returns_series(client):
    response = client.get("/api/chart", params={"symbol": "NVDA"})

    assert response.status_code == 200
    points = response.json()
    assert len(points) == 31
    assert set(points[0]) == {"date", "price", "volume", "high", "low"}
    dates = [p["date"] for p in points]
    assert dates == sorted(dates)


def test_chart_without_symbol_is_400(client):
    assert client.get("/api/chart").status_code == 400


def test_chart_unexpected_error_is_500(broken_client):
    response = broken_client.get("/api/chart", params={"symbol": "NVDA"})

    assert response.status_code == 500
    assert response.json()["message"] == "chart boom"
