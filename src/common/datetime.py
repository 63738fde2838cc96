"""Datetime utilities."""

from datetime import datetime, timezone


def parse_datetime(value) -> datetime:
    """Parse datetime from ISO string or return as-is if already datetime.

    Naive values are assumed to be UTC.
    """
    if value is None:
        return datetime.now(timezone.utc)
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def to_iso(value: datetime) -> str:
    """Format a datetime as ISO-8601 with a Z suffix for UTC."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
