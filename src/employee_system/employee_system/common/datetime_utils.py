from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any, Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    """Form date input to date; empty input means no date."""
    v = (value or "").strip()
    if not v:
        return None
    try:
        return parse_iso_date(v[:10])
    except ValueError:
        raise ValidationError("Due date must be YYYY-MM-DD")


_TIMESTAMP_PARTS = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2})(?:\.(?P<fraction>\d+))?(?P<offset>Z|[+-]\d{2}(?::?\d{2})?)?$"
)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Normalize timestamps returned by the remote store.

    PostgREST returns ISO-8601 strings with a trailing 'Z' or offset and with
    trailing zeros trimmed from the fractional seconds; in-memory stores used
    by tests may hand back datetime objects directly.
    """

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Unsupported timestamp value type: {type(value)!r}")

    m = _TIMESTAMP_PARTS.match(value.strip())
    if m is None:
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = m.group("base")
    if m.group("fraction"):
        # fromisoformat before 3.11 wants exactly 3 or 6 digits
        text += "." + m.group("fraction")[:6].ljust(6, "0")

    offset = m.group("offset")
    if offset == "Z":
        text += "+00:00"
    elif offset:
        digits = offset[1:].replace(":", "")
        text += f"{offset[0]}{digits[:2]}:{digits[2:4] or '00'}"
    return datetime.fromisoformat(text)


def date_input_value(value: Optional[date]) -> str:
    """Value for an <input type="date"> field."""
    return value.strftime("%Y-%m-%d") if value else ""


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc)
