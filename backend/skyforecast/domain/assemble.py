from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional

from .models import BLOCK_ORDER, HEADER_ALLOWLIST, RAW_JSON_KEY, ForecastResult, Table


def assemble(
    blocks: Mapping[str, Table],
    raw_json: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> ForecastResult:
    entries: Dict[str, Any] = {}
    for name in BLOCK_ORDER:
        if name in blocks:
            entries[name] = blocks[name]
    if raw_json is not None:
        entries[RAW_JSON_KEY] = copy.deepcopy(raw_json)
    if headers is not None:
        entries.update(select_headers(headers))
    return ForecastResult(entries=entries)


def select_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Pick the allow-listed response headers that are present, keyed in lowercase."""
    lowered = {str(name).lower(): value for name, value in headers.items()}
    return {name: lowered[name] for name in HEADER_ALLOWLIST if name in lowered}
