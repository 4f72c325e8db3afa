from __future__ import annotations

from typing import Optional, Protocol

from skyforecast.domain.models import ForecastResult
from skyforecast.domain.timestamps import TimestampInput


class ForecastProvider(Protocol):
    """Contract for forecast providers."""

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
        raise NotImplementedError
