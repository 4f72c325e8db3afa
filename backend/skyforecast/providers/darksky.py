from __future__ import annotations

import logging
from typing import Any, Optional

from skyforecast.domain.assemble import assemble
from skyforecast.domain.models import CURRENTLY, ForecastResult
from skyforecast.domain.normalize import normalize, normalize_currently
from skyforecast.domain.timestamps import TimestampInput
from skyforecast.infra.forecast_client import ForecastClient, build_request

from .base import ForecastProvider

logger = logging.getLogger(__name__)


class DarkSkyForecastProvider(ForecastProvider):
    def __init__(self, client: Optional[ForecastClient] = None, api_key: Optional[str] = None):
        self.client = client or ForecastClient()
        self.api_key = api_key

    def fetch_forecast(
        self,
        *,
        latitude: str,
        longitude: str,
        timestamp: Optional[TimestampInput] = None,
        units: str = "us",
        language: str = "en",
        exclude: Optional[str] = None,
        add_json: bool = False,
        add_headers: bool = False,
    ) -> ForecastResult:
        path, params = build_request(
            latitude,
            longitude,
            timestamp,
            units,
            language,
            exclude,
            api_key=self.api_key,
        )
        resp = self.client.get(path, params)
        payload = resp.json()
        blocks = normalize(payload)
        currently = normalize_currently(payload)
        if currently is not None:
            blocks[CURRENTLY] = currently
        logger.info(
            "forecast lat=%s lon=%s time=%s blocks=%s",
            latitude,
            longitude,
            timestamp,
            ",".join(blocks) or "-",
        )
        return assemble(
            blocks,
            raw_json=payload if add_json else None,
            headers=resp.headers if add_headers else None,
        )


def get_forecast_for(
    latitude: str,
    longitude: str,
    timestamp: TimestampInput,
    units: str = "us",
    language: str = "en",
    exclude: Optional[str] = None,
    add_json: bool = False,
    add_headers: bool = False,
    **client_options: Any,
) -> ForecastResult:
    """Forecast (or observed weather) for a place at a given time.

    ``timestamp`` is a ``[YYYY]-[MM]-[DD]T[HH]:[MM]:[SS]`` string with an optional
    ``Z`` or ``[+|-][HH][MM]`` suffix, UNIX seconds, or a ``date``/``datetime``.
    Without an offset the API assumes local time at the coordinates.
    ``client_options`` are passed to ``httpx.Client`` (proxies, TLS settings).
    """
    provider = DarkSkyForecastProvider(ForecastClient(**client_options))
    return provider.fetch_forecast(
        latitude=latitude,
        longitude=longitude,
        timestamp=timestamp,
        units=units,
        language=language,
        exclude=exclude,
        add_json=add_json,
        add_headers=add_headers,
    )


def get_current_forecast(
    latitude: str,
    longitude: str,
    units: str = "us",
    language: str = "en",
    exclude: Optional[str] = None,
    add_json: bool = False,
    add_headers: bool = False,
    **client_options: Any,
) -> ForecastResult:
    provider = DarkSkyForecastProvider(ForecastClient(**client_options))
    return provider.fetch_forecast(
        latitude=latitude,
        longitude=longitude,
        units=units,
        language=language,
        exclude=exclude,
        add_json=add_json,
        add_headers=add_headers,
    )
