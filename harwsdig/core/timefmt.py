"""Timestamp normalization for transcript lines."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import TypeAdapter

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_datetime_adapter = TypeAdapter(datetime)


def to_datetime(value: float | int | str) -> datetime:
    """Parse Unix epoch seconds or an ISO-8601 string into an aware UTC datetime.

    Sub-millisecond precision is truncated. Strings without an offset are UTC.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        # int() truncates toward zero, the same clipping browsers apply
        return _EPOCH + timedelta(milliseconds=int(value * 1000))

    parsed = _datetime_adapter.validate_python(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    parsed = parsed.astimezone(timezone.utc)
    return parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)


def format_time(value: float | int | str) -> str:
    """Render a timestamp as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    dt = to_datetime(value)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
