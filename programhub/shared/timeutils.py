# programhub/shared/timeutils.py
"""
Timestamp helpers.

Records keep their timestamps as ISO-8601 strings (``2025-03-01T09:30:00.000Z``)
so that a stored document round-trips byte for byte. These helpers produce
such strings and turn them back into sortable numbers.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """Format an aware or naive (assumed UTC) datetime with millisecond precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO date or datetime string. Returns None for empty or
    unparsable input instead of raising.
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(text[:10]), datetime.min.time())
        except ValueError:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_timestamp(value: Optional[str]) -> float:
    """Sortable epoch seconds; missing or invalid timestamps sort as oldest (0)."""
    parsed = parse_iso(value)
    return parsed.timestamp() if parsed is not None else 0.0
