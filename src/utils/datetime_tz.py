from __future__ import annotations

from datetime import date, datetime, timezone


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, assuming UTC for naive values."""
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_utc_date(value: date | datetime | str) -> date:
    """Normalize a birth date to a calendar date.

    Datetimes keep only their UTC calendar day; the time of birth is not tracked.
    Accepts ISO strings (with optional trailing 'Z').
    """
    if isinstance(value, str):
        s = value.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(s)
        except ValueError:
            value = date.fromisoformat(s)
    if isinstance(value, datetime):
        return to_utc(value).date()
    return value
