from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Union

TimestampInput = Union[str, int, date, datetime]

REQUEST_FORMAT = "%Y-%m-%dT%H:%M:%S"


def canonicalize_timestamp(value: Optional[TimestampInput]) -> Optional[str]:
    """Render a request timestamp as the API expects it in the URL path.

    Strings are already in ``[YYYY]-[MM]-[DD]T[HH]:[MM]:[SS]`` form (optionally
    followed by ``Z`` or ``+HHMM``) and go out untouched. ``date`` and
    ``datetime`` values are formatted without an offset, so the API reads them as
    local time at the requested coordinates. Integers are UNIX seconds.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        return value.strftime(REQUEST_FORMAT)
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time()).strftime(REQUEST_FORMAT)
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")


def epoch_to_utc(value) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)
