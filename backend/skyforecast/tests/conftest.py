from __future__ import annotations

import httpx
import pytest


@pytest.fixture()
def api_key(monkeypatch):
    monkeypatch.setenv("DARKSKY_API_KEY", "test-key")
    monkeypatch.delenv("DARKSKY_API_HOST", raising=False)
    monkeypatch.delenv("DARKSKY_TIMEOUT", raising=False)
    return "test-key"


@pytest.fixture()
def full_payload() -> dict:
    return {
        "latitude": 37.8267,
        "longitude": -122.423,
        "timezone": "America/Los_Angeles",
        "currently": {"time": 1620000000, "summary": "Clear", "temperature": 70.1},
        "minutely": {
            "summary": "Clear for the hour.",
            "data": [
                {"time": 1620000000, "precipIntensity": 0},
                {"time": 1620000060, "precipIntensity": 0, "precipProbability": 0.1},
            ],
        },
        "hourly": {
            "summary": "Clear throughout the day.",
            "data": [
                {"time": 1620000000, "temperature": 70.1, "windSpeed": 4.2},
                {"time": 1620003600, "temperature": 68.3},
            ],
        },
        "daily": {
            "data": [
                {
                    "time": 1619938800,
                    "sunriseTime": 1619960000,
                    "sunsetTime": 1620010000,
                    "temperatureMax": 75.2,
                    "temperatureMaxTime": 1619990000,
                    "moonPhase": 0.71,
                }
            ]
        },
        "alerts": [{"title": "Wind Advisory", "time": 1620000000}],
        "flags": {"units": "us", "sources": ["isd"]},
    }


@pytest.fixture()
def recorder():
    """Collects requests seen by a mock transport."""
    return []


@pytest.fixture()
def make_transport(recorder):
    def _make(payload, status_code: int = 200, headers: dict | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            recorder.append(request)
            return httpx.Response(status_code, json=payload, headers=headers or {})

        return httpx.MockTransport(handler)

    return _make
