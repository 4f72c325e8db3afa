from __future__ import annotations

from datetime import datetime
from typing import List

from .models import FORECAST_KIND, ForecastResult, Table


def format_result(value, max_rows: int = 5) -> str:
    kind = getattr(value, "kind", None)
    if kind == FORECAST_KIND:
        return _format_forecast(value, max_rows)
    raise ValueError(f"Don't know how to format a value of kind {kind!r}")


def _format_forecast(result: ForecastResult, max_rows: int) -> str:
    lines: List[str] = []
    for name, table in result.blocks.items():
        lines.append(f"{name}: {len(table)} rows x {len(table.columns)} columns")
        lines.extend(_format_table(table, max_rows))
    if result.raw_json is not None:
        lines.append(f"json: {len(result.raw_json)} top-level keys")
    for name, header in result.headers.items():
        lines.append(f"{name}: {header}")
    if not lines:
        lines.append("(empty forecast)")
    return "\n".join(lines)


def _format_table(table: Table, max_rows: int) -> List[str]:
    if not table.columns:
        return []
    lines = ["  " + "\t".join(table.columns)]
    for row in table.rows[:max_rows]:
        lines.append("  " + "\t".join(_format_cell(cell) for cell in row))
    hidden = len(table) - max_rows
    if hidden > 0:
        lines.append(f"  ... {hidden} more rows")
    return lines


def _format_cell(value) -> str:
    if value is None:
        return "NA"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)
