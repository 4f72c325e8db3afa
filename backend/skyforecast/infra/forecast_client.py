from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from skyforecast.config import api_host, darksky_api_key, request_timeout
from skyforecast.domain.models import ForecastRequest
from skyforecast.domain.timestamps import TimestampInput

logger = logging.getLogger(__name__)


def build_request(
    latitude: str,
    longitude: str,
    timestamp: Optional[TimestampInput] = None,
    units: str = "us",
    language: str = "en",
    exclude: Optional[str] = None,
    *,
    api_key: Optional[str] = None,
) -> Tuple[str, Dict[str, str]]:
    """Return the URL path and query parameters for a forecast call.

    ``units``, ``language`` and ``exclude`` are sent verbatim; the API rejects
    values it does not know. Without a timestamp the path asks for the current
    forecast.
    """
    request = ForecastRequest(
        latitude=latitude,
        longitude=longitude,
        timestamp=timestamp,
        units=units,
        language=language,
        exclude=exclude,
    )
    return path_for(request, api_key or darksky_api_key()), params_for(request)


def path_for(request: ForecastRequest, api_key: str) -> str:
    location = f"{request.latitude},{request.longitude}"
    if request.timestamp is not None:
        location = f"{location},{request.timestamp}"
    return f"/forecast/{api_key}/{location}"


def params_for(request: ForecastRequest) -> Dict[str, str]:
    params = {"units": request.units, "lang": request.language}
    if request.exclude is not None:
        params["exclude"] = request.exclude
    return params


class ForecastClient:
    """Single-shot GET against the forecast API.

    Extra keyword arguments (``proxy``, ``verify``, ``transport``, ...) go to
    ``httpx.Client`` untouched.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        timeout: Optional[float] = None,
        **client_options: Any,
    ):
        self.host = host or api_host()
        self.timeout = request_timeout() if timeout is None else timeout
        self.client_options = client_options

    @property
    def base_url(self) -> str:
        return f"https://{self.host}"

    def get(self, path: str, params: Dict[str, str]) -> httpx.Response:
        logger.debug("GET %s%s params=%s", self.base_url, _redact(path), params)
        with httpx.Client(base_url=self.base_url, timeout=self.timeout, **self.client_options) as client:
            resp = client.get(path, params=params)
            resp.raise_for_status()
        return resp


def _redact(path: str) -> str:
    parts = path.split("/")
    if len(parts) > 2 and parts[1] == "forecast":
        parts[2] = "***"
    return "/".join(parts)
