"""Date manipulation utilities"""

from datetime import date, datetime, time, timedelta, timezone
from typing import List

MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def to_date(value: date) -> date:
    """Calendar day of a date or datetime, in the datetime's own timezone"""
    if isinstance(value, datetime):
        return value.date()
    return value


def to_datetime(value: date) -> datetime:
    """
    Naive UTC datetime for comparisons.

    Plain dates become midnight of that day; offset-aware datetimes are
    converted to UTC and stripped of their tzinfo.
    """
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def utc_date(value: date) -> date:
    """UTC calendar day of a timestamp; plain dates are returned as is"""
    return to_datetime(value).date()


def days_between(start: date, end: date) -> int:
    """
    Whole days from start to end, floored.

    Negative when end precedes start. Plain dates count from midnight and
    offset-aware datetimes are compared in UTC.
    """
    return (to_datetime(end) - to_datetime(start)) // timedelta(days=1)


def month_label(value: date) -> str:
    """Short English month name (Jan..Dec)"""
    return MONTH_LABELS[value.month - 1]
