"""
Recetario API - Calendar Day Helpers.

Daily plans are keyed by the UTC calendar day; these helpers keep that
normalization in one place.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Union


def utc_today(now: Optional[datetime] = None) -> date:
    """Return the current calendar day in UTC."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date()


def utc_midnight(day: date) -> datetime:
    """Return midnight UTC of ``day`` as an aware datetime."""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def to_utc_day(value: Union[datetime, date]) -> date:
    """
    Truncate a stored plan date to its UTC calendar day.

    Naive datetimes are taken to already be UTC (SQLite drops the offset).
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value
