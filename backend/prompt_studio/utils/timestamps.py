from datetime import datetime, timezone
from dateutil.parser import parse


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def parse_ts(value):
    """Parse an ISO timestamp string (or pass a datetime through) as aware UTC."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return normalize_ts(value)
    return normalize_ts(parse(value))


def iso(ts) -> str | None:
    if ts is None:
        return None
    return normalize_ts(ts).isoformat()
