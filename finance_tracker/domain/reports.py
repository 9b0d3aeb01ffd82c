"""Report filters, headline statistics and dashboard figures"""

from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional

from finance_tracker.domain.exceptions import InvalidPeriodError
from finance_tracker.domain.interest import calculate_remaining_amount
from finance_tracker.domain.models import (
    DashboardStats,
    PaymentMode,
    ReportFilter,
    ReportStats,
    SchemeStatus,
    Transaction,
    User,
    UserScheme,
)
from finance_tracker.utils.date_utils import month_label, to_datetime, utc_date

REPORT_PERIODS = ("weekly", "monthly", "yearly")


def period_start(period: str, now: datetime) -> datetime:
    """
    First instant covered by a report period.

    - weekly:  the last 7 x 24 hours
    - monthly: since the 1st of the current month
    - yearly:  since January 1st

    Offset-aware times are measured in UTC.
    """
    now = to_datetime(now)
    if period == "weekly":
        return now - timedelta(days=7)
    elif period == "monthly":
        return datetime(now.year, now.month, 1)
    elif period == "yearly":
        return datetime(now.year, 1, 1)
    raise InvalidPeriodError(f"Unknown report period '{period}', expected one of {REPORT_PERIODS}")


def filter_transactions_by_period(
    transactions: Iterable[Transaction],
    period: str,
    now: Optional[datetime] = None,
) -> List[Transaction]:
    """Transactions dated within the report period"""
    start = period_start(period, now or datetime.now())
    return [t for t in transactions if to_datetime(t.date) >= start]


def apply_report_filter(
    transactions: Iterable[Transaction],
    report_filter: ReportFilter,
    user_schemes: Iterable[UserScheme] = (),
) -> List[Transaction]:
    """
    Narrow transactions by the drill-down filters that are set.

    A scheme-type filter drops transactions whose scheme is unknown.
    """
    scheme_names = {s.id: s.scheme_type for s in user_schemes}
    selected = []

    for txn in transactions:
        if report_filter.amount_min is not None and txn.amount < report_filter.amount_min:
            continue
        if report_filter.amount_max is not None and txn.amount > report_filter.amount_max:
            continue
        if report_filter.payment_mode is not None and PaymentMode(txn.payment_mode) != report_filter.payment_mode:
            continue
        if report_filter.user_id is not None and txn.user_id != report_filter.user_id:
            continue
        if report_filter.scheme_type is not None and scheme_names.get(txn.scheme_id) != report_filter.scheme_type:
            continue
        if report_filter.month is not None and month_label(utc_date(txn.date)) != report_filter.month:
            continue
        selected.append(txn)

    return selected


def compute_report_stats(transactions: Iterable[Transaction]) -> ReportStats:
    """Headline figures for a (filtered) set of transactions"""
    transactions = list(transactions)
    total_amount = sum(t.amount for t in transactions)
    cash = sum(1 for t in transactions if PaymentMode(t.payment_mode) == PaymentMode.CASH)

    return ReportStats(
        total_transactions=len(transactions),
        total_amount=total_amount,
        avg_transaction_amount=total_amount / len(transactions) if transactions else 0.0,
        unique_customers=len(set(t.user_id for t in transactions)),
        total_interest=sum(t.interest for t in transactions),
        cash_payments=cash,
        online_payments=len(transactions) - cash,
    )


def _previous_month(day: date) -> tuple:
    if day.month == 1:
        return day.year - 1, 12
    return day.year, day.month - 1


def compute_dashboard_stats(
    users: Iterable[User],
    user_schemes: Iterable[UserScheme],
    transactions: Iterable[Transaction],
    today: Optional[date] = None,
) -> DashboardStats:
    """
    Landing dashboard figures.

    Pending dues are the outstanding amounts of active schemes. Monthly
    growth compares this month's collection with last month's, in percent,
    and is 0 when nothing was collected last month.
    """
    today = utc_date(today or date.today())
    users = list(users)
    user_schemes = list(user_schemes)
    transactions = list(transactions)

    paid_by_scheme: Dict[str, float] = defaultdict(float)
    monthly_totals: Dict[tuple, float] = defaultdict(float)
    today_collection = 0.0
    for txn in transactions:
        paid_by_scheme[txn.scheme_id] += txn.amount
        day = utc_date(txn.date)
        monthly_totals[(day.year, day.month)] += txn.amount
        if day == today:
            today_collection += txn.amount

    active = [s for s in user_schemes if SchemeStatus(s.status) == SchemeStatus.ACTIVE]
    pending_dues = sum(calculate_remaining_amount(s.total_amount, paid_by_scheme[s.id]) for s in active)

    this_month = monthly_totals[(today.year, today.month)]
    last_month = monthly_totals[_previous_month(today)]
    monthly_growth = (this_month - last_month) / last_month * 100 if last_month else 0.0

    return DashboardStats(
        total_customers=sum(1 for u in users if u.status == "active"),
        active_schemes=len(active),
        completed_cycles=sum(1 for s in user_schemes if SchemeStatus(s.status) == SchemeStatus.COMPLETED),
        total_investment=sum(t.amount for t in transactions),
        today_collection=today_collection,
        pending_dues=pending_dues,
        monthly_growth=monthly_growth,
    )
