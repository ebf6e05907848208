from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional


def now_utc() -> datetime:
    """Current UTC time (naive).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a backend timestamp into a naive UTC datetime.

    Accepts datetime/date objects and ISO 8601 strings (with or without a
    trailing ``Z``). Anything unparseable yields None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def parse_date(value: Any) -> Optional[date]:
    dt = parse_timestamp(value)
    return dt.date() if dt else None


def to_input_date(value: Any) -> str:
    """Format for an <input type=date>; invalid or missing values become ''."""
    d = parse_date(value)
    return d.strftime("%Y-%m-%d") if d else ""


def to_input_datetime(value: Any) -> str:
    """Format for an <input type=datetime-local>; invalid or missing values become ''."""
    dt = parse_timestamp(value)
    return dt.strftime("%Y-%m-%dT%H:%M") if dt else ""


def to_backend_date(value: Any) -> Optional[str]:
    d = parse_date(value)
    return d.isoformat() if d else None


def to_backend_timestamp(value: Any) -> Optional[str]:
    dt = parse_timestamp(value)
    if not dt:
        return None
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def inclusive_days(start: Optional[date], end: Optional[date]) -> int:
    """Number of calendar days covered by [start, end], both endpoints included."""
    if not start or not end:
        return 0
    return (end - start).days + 1


def epoch_millis(value: datetime) -> int:
    """Milliseconds since the epoch for a naive UTC datetime."""
    return int((value - datetime(1970, 1, 1)).total_seconds() * 1000)
