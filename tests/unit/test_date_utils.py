"""Unit tests for date helpers"""

from datetime import date, datetime, timedelta, timezone
from finance_tracker.utils.date_utils import (
    days_between,
    generate_date_range,
    month_label,
    to_date,
    to_datetime,
    utc_date,
)

IST = timezone(timedelta(hours=5, minutes=30))


def test_generate_date_range_inclusive():
    days = generate_date_range(date(2024, 2, 27), date(2024, 3, 1))

    assert days == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


def test_generate_date_range_reversed_is_empty():
    assert generate_date_range(date(2024, 3, 2), date(2024, 3, 1)) == []


def test_days_between_floors():
    """Partial days round down, in both directions"""
    assert days_between(date(2024, 1, 1), datetime(2024, 1, 3, 23, 0)) == 2
    assert days_between(datetime(2024, 1, 3, 1, 0), date(2024, 1, 1)) == -3
    assert days_between(date(2024, 1, 1), date(2024, 1, 1)) == 0


def test_to_date_and_month_label():
    assert to_date(datetime(2024, 3, 13, 10, 0)) == date(2024, 3, 13)
    assert month_label(date(2024, 9, 1)) == "Sep"


def test_days_between_offset_aware_datetime():
    """Aware timestamps are measured in UTC against plain dates"""
    assert days_between(date(2024, 1, 1), datetime(2024, 1, 3, 23, 0, tzinfo=timezone.utc)) == 2
    # 01:00 at +05:30 is still January 1st in UTC
    assert days_between(date(2024, 1, 1), datetime(2024, 1, 2, 1, 0, tzinfo=IST)) == 0
    assert days_between(datetime(2024, 2, 1, tzinfo=timezone.utc), date(2024, 1, 1)) == -31


def test_to_datetime_and_utc_date_normalise_offsets():
    aware = datetime(2024, 3, 6, 2, 0, tzinfo=IST)

    assert to_datetime(aware) == datetime(2024, 3, 5, 20, 30)
    assert to_datetime(aware).tzinfo is None
    assert utc_date(aware) == date(2024, 3, 5)
    assert utc_date(date(2024, 3, 6)) == date(2024, 3, 6)
