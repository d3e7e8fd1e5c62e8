"""
Calendar-day normalization.

All "today" / "entry day" comparisons go through ``day_key`` so that a day
always means a UTC calendar date with no time component.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def day_key(ts: datetime) -> date:
    """
    Map an instant to its UTC calendar date.
    Naive datetimes are interpreted as UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).date()


def today(now: Optional[datetime] = None) -> date:
    """The current UTC calendar day."""
    return day_key(now or utc_now())


def previous_day(day: date) -> date:
    return day - timedelta(days=1)
