"""Date helpers."""

from datetime import UTC, date, datetime


def utc_today() -> date:
    """Return the current calendar date in UTC."""
    return datetime.now(tz=UTC).date()
