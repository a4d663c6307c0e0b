"""Date parsing helpers for transaction filters.

Bare ``YYYY-MM-DD`` bounds expand to the whole day in UTC; datetimes without
an offset are read as UTC.
"""

import re
from datetime import datetime, time, timezone
from typing import Optional

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_now_iso() -> str:
    """Current UTC time as ``2024-01-31T12:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime into an aware UTC datetime."""
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_bound(date_str: Optional[str], day_time: time) -> Optional[datetime]:
    if not date_str or not date_str.strip():
        return None
    value = date_str.strip()
    if _DATE_ONLY.match(value):
        day = datetime.strptime(value, "%Y-%m-%d").date()
        return datetime.combine(day, day_time, tzinfo=timezone.utc)
    return parse_iso(value)


def parse_from_date(date_str: Optional[str]) -> Optional[datetime]:
    return _parse_bound(date_str, time.min)


def parse_to_date(date_str: Optional[str]) -> Optional[datetime]:
    return _parse_bound(date_str, time.max)
