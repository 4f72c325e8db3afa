from __future__ import annotations

import os

API_KEY_ENV = "DARKSKY_API_KEY"
HOST_ENV = "DARKSKY_API_HOST"
TIMEOUT_ENV = "DARKSKY_TIMEOUT"
DEFAULT_API_HOST = "api.darksky.net"
DEFAULT_TIMEOUT = 30.0


def darksky_api_key() -> str:
    """Resolve the API key from the environment at call time."""
    key = os.getenv(API_KEY_ENV, "").strip()
    if not key:
        raise RuntimeError(f"{API_KEY_ENV} is required to query the forecast API")
    return key


def api_host() -> str:
    return os.getenv(HOST_ENV, "").strip() or DEFAULT_API_HOST


def request_timeout() -> float:
    raw = os.getenv(TIMEOUT_ENV, "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}") from exc
