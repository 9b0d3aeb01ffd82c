"""Time-bucketed aggregation of transactions and users for report charts"""

from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from finance_tracker.domain.models import Distribution, PaymentMode, SeriesPoint, Transaction, User, UserScheme
from finance_tracker.utils.date_utils import MONTH_LABELS, generate_date_range, utc_date

UNKNOWN_SCHEME = "Unknown"


def simple_moving_average(values: Sequence[float], window_size: int = 7) -> List[float]:
    """
    Trailing moving average with the same length as the input.

    The first window_size - 1 points average over whatever is available
    instead of being left empty:
        [1, 2, 3, 4, 5], window 3 -> [1, 1.5, 2, 3, 4]
    """
    if window_size <= 1:
        return list(values)

    result = []
    running = 0.0
    for i, value in enumerate(values):
        running += value
        if i >= window_size:
            running -= values[i - window_size]
        result.append(running / min(i + 1, window_size))
    return result


def group_transactions_by_day(
    transactions: Iterable[Transaction],
    days: int = 30,
    today: Optional[date] = None,
) -> List[SeriesPoint]:
    """
    Daily collection totals for the last `days` calendar days ending today.

    Payments are bucketed by their UTC calendar day. Days without payments
    are zero-filled; labels are ISO dates, ascending.
    """
    end = utc_date(today or date.today())
    start = end - timedelta(days=days - 1)

    # Empty when days <= 0 since start then falls after end
    totals: Dict[date, float] = {day: 0 for day in generate_date_range(start, end)}
    for txn in transactions:
        day = utc_date(txn.date)
        if day in totals:
            totals[day] += txn.amount

    return [SeriesPoint(label=day.isoformat(), value=totals[day]) for day in sorted(totals)]


def _monthly_series(dates_and_values: Iterable[tuple], year: int) -> List[SeriesPoint]:
    totals = [0] * 12
    for when, value in dates_and_values:
        day = utc_date(when)
        if day.year != year:
            continue
        totals[day.month - 1] += value
    return [SeriesPoint(label=MONTH_LABELS[m], value=totals[m]) for m in range(12)]


def group_transactions_by_month(
    transactions: Iterable[Transaction],
    year: Optional[int] = None,
) -> List[SeriesPoint]:
    """Collection totals per month of `year` (default current), Jan..Dec"""
    year = year or datetime.now().year
    return _monthly_series(((t.date, t.amount) for t in transactions), year)


def user_growth_by_month(users: Iterable[User], year: Optional[int] = None) -> List[SeriesPoint]:
    """New customers per month of `year` (default current), Jan..Dec"""
    year = year or datetime.now().year
    return _monthly_series(((u.created_at, 1) for u in users), year)


def payment_mode_distribution(transactions: Iterable[Transaction]) -> Distribution:
    """
    Count of payments per payment mode.

    Every known mode is present even when unused, in declaration order.
    """
    counts: Dict[str, int] = {mode.value: 0 for mode in PaymentMode}
    for txn in transactions:
        mode = PaymentMode(txn.payment_mode).value
        counts[mode] += 1

    labels = list(counts)
    return Distribution(labels=labels, values=[counts[label] for label in labels])


def amount_by_scheme_type(
    transactions: Iterable[Transaction],
    user_schemes: Iterable[UserScheme],
) -> Distribution:
    """
    Collection totals per scheme name, in first-seen order.

    Transactions whose scheme id matches no user scheme go under "Unknown".
    """
    scheme_names = {s.id: s.scheme_type for s in user_schemes}
    sums: Dict[str, float] = {}
    for txn in transactions:
        name = scheme_names.get(txn.scheme_id) or UNKNOWN_SCHEME
        sums[name] = sums.get(name, 0) + txn.amount

    labels = list(sums)
    return Distribution(labels=labels, values=[sums[label] for label in labels])
