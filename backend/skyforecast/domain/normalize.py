from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .models import CURRENTLY, ROW_BLOCKS, TIME_FIELDS, Table
from .timestamps import epoch_to_utc


def build_table(records: Iterable[Mapping[str, Any]]) -> Table:
    """Outer-join a sequence of records into a table.

    The column set is the union of keys in first-seen order; a record lacking a
    key gets ``None`` in that column. Record order is kept.
    """
    records = list(records)
    columns: List[str] = []
    seen = set()
    for record in records:
        for key in record:
            if key not in seen:
                seen.add(key)
                columns.append(key)
    rows = tuple(tuple(record.get(col) for col in columns) for record in records)
    return Table(columns=tuple(columns), rows=rows)


def convert_time_columns(table: Table, candidates: Sequence[str] = TIME_FIELDS) -> Table:
    targets = {idx for idx, col in enumerate(table.columns) if col in candidates}
    if not targets:
        return table
    rows = tuple(
        tuple(epoch_to_utc(value) if idx in targets else value for idx, value in enumerate(row))
        for row in table.rows
    )
    return Table(columns=table.columns, rows=rows)


def normalize(raw_json: Mapping[str, Any]) -> Dict[str, Table]:
    """Tabulate the ``minutely``, ``hourly`` and ``daily`` blocks present in a response.

    Blocks the response does not carry are left out of the result. Other
    top-level keys (``alerts``, ``flags``, ...) are ignored.
    """
    _require_object(raw_json)
    tables: Dict[str, Table] = {}
    for name in ROW_BLOCKS:
        if name not in raw_json:
            continue
        block = raw_json[name] or {}
        table = build_table(block.get("data") or [])
        tables[name] = convert_time_columns(table)
    return tables


def normalize_currently(raw_json: Mapping[str, Any]) -> Optional[Table]:
    _require_object(raw_json)
    if CURRENTLY not in raw_json:
        return None
    table = build_table([raw_json[CURRENTLY] or {}])
    return convert_time_columns(table, candidates=("time",))


def _require_object(raw_json) -> None:
    if not isinstance(raw_json, Mapping):
        raise TypeError(f"Forecast payload must be a JSON object, got {type(raw_json).__name__}")
