"""Datetime utilities."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil.parser import parse as parse_date

# Timezone abbreviations for date parsing
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "BST": timezone(timedelta(hours=1)),
}


def now_ms() -> int:
    """Current UTC time as epoch milliseconds."""
    return to_epoch_ms(datetime.now(timezone.utc))


def to_epoch_ms(dt: datetime) -> int:
    """Convert a datetime to epoch milliseconds, treating naive values as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)


def from_epoch_ms(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def parse_epoch_ms(value: Optional[str], fallback_ms: int) -> int:
    """Parse a feed date string into epoch milliseconds.

    Args:
        value: Date string as published in the feed (RFC 2822, ISO 8601, ...).
        fallback_ms: Value returned when the date is missing or unparsable.

    Returns:
        Epoch milliseconds.
    """
    if not value:
        return fallback_ms

    try:
        return to_epoch_ms(parse_date(value, tzinfos=TZINFOS))
    except (ValueError, OverflowError):
        return fallback_ms
