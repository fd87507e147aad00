from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union


def parse_iso_datetime(value) -> Optional[datetime]:
    """Parse 'YYYY-MM-DD' or a full ISO-8601 timestamp.

    Returns None for empty, malformed or non-string input so callers can let the
    service report the field as missing.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        # Offsets are converted to server local time, the clock now_local() uses.
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def as_date(value: Union[date, datetime]) -> date:
    """Drop the time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    return value


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
