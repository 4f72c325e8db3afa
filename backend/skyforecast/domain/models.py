from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .timestamps import TimestampInput, canonicalize_timestamp

ROW_BLOCKS = ("minutely", "hourly", "daily")
CURRENTLY = "currently"
BLOCK_ORDER = ROW_BLOCKS + (CURRENTLY,)
RAW_JSON_KEY = "json"
FORECAST_KIND = "forecast"

TIME_FIELDS = (
    "time",
    "sunriseTime",
    "sunsetTime",
    "temperatureMinTime",
    "temperatureMaxTime",
    "apparentTemperatureMinTime",
    "apparentTemperatureMaxTime",
    "precipIntensityMaxTime",
)

HEADER_ALLOWLIST = (
    "cache-control",
    "expires",
    "x-forecast-api-calls",
    "x-response-time",
)


@dataclass(frozen=True)
class ForecastRequest:
    latitude: str
    longitude: str
    timestamp: Optional[TimestampInput] = None
    units: str = "us"
    language: str = "en"
    exclude: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "timestamp", canonicalize_timestamp(self.timestamp))


@dataclass(frozen=True)
class Table:
    """Rows of a forecast block laid out against a fixed column set.

    Cells for fields a source record did not carry hold ``None``.
    """

    columns: Tuple[str, ...] = ()
    rows: Tuple[Tuple[Any, ...], ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def __contains__(self, name: object) -> bool:
        return name in self.columns

    def column(self, name: str) -> List[Any]:
        try:
            idx = self.columns.index(name)
        except ValueError as exc:
            raise KeyError(f"Column '{name}' is not in this table") from exc
        return [row[idx] for row in self.rows]

    def to_records(self) -> List[Dict[str, Any]]:
        return [dict(zip(self.columns, row)) for row in self.rows]


@dataclass(frozen=True, eq=False)
class ForecastResult(Mapping):
    """Read-only mapping of blocks, raw JSON and headers for one forecast call.

    ``kind`` identifies the value for :func:`skyforecast.domain.formatting.format_result`.
    Iteration order is the assembly order: blocks first, then ``json``, then headers.
    """

    entries: Mapping[str, Any] = field(default_factory=dict)
    kind: str = FORECAST_KIND

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __getitem__(self, key: str) -> Any:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def blocks(self) -> Dict[str, Table]:
        return {name: self.entries[name] for name in BLOCK_ORDER if name in self.entries}

    @property
    def raw_json(self) -> Optional[dict]:
        return self.entries.get(RAW_JSON_KEY)

    @property
    def headers(self) -> Dict[str, str]:
        return {name: self.entries[name] for name in HEADER_ALLOWLIST if name in self.entries}
