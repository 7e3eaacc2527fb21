"""
Date and time helpers.
"""

import re
import time
from datetime import date, datetime, timezone
from typing import Any, Callable, Optional

# Returns the current time as epoch milliseconds.
Clock = Callable[[], int]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def epoch_ms(dt: Optional[datetime] = None) -> int:
    """Epoch milliseconds for ``dt`` (naive values are taken as UTC), or now."""
    if dt is None:
        return time.time_ns() // 1_000_000
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)


def system_clock() -> int:
    return epoch_ms()


def parse_epoch_ms(raw: Optional[str]) -> Optional[int]:
    """
    Parse a stored epoch-milliseconds string.

    Leading digits are accepted the way ``parseInt`` reads them, so
    ``"1700000000000.5"`` gives ``1700000000000``. Returns None when no
    integer can be read.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def coerce_date(value: Any) -> Optional[date]:
    """
    Normalise a stored booking date to ``datetime.date``.

    Accepts dates, datetimes, ISO strings with or without a time part
    (``Z`` suffix allowed) and epoch milliseconds.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc).date()
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise ValueError(f"Unsupported date value: {value!r}")
