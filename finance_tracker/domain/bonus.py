"""Weekly bonus rules for scheme payments"""

from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from finance_tracker.domain.models import BonusPayment, BonusStatus, WeekNumber
from finance_tracker.utils.date_utils import to_date, to_datetime

BONUS_AMOUNT = 5
PAYMENT_INTERVAL_DAYS = 7
BONUS_WEEKDAYS = 5  # Monday..Friday


def get_week_number(value: Optional[date]) -> Optional[WeekNumber]:
    """
    ISO-style week number of a date.

    The date is moved to the Thursday of its Monday-based week, so the week
    belongs to whichever year holds that Thursday. Week 1 is the week that
    contains January 4th.

    A missing date propagates as None.
    """
    if value is None:
        return None

    day = to_date(value)
    thursday = day + timedelta(days=3 - day.weekday())
    jan4 = date(thursday.year, 1, 4)
    week1_thursday = jan4 + timedelta(days=3 - jan4.weekday())

    week = 1 + (thursday - week1_thursday).days // 7
    return WeekNumber(year=thursday.year, week=week)


def is_eligible_for_bonus(payment_date: Optional[date], scheme_start_date: Optional[date]) -> bool:
    """
    Payments made Monday through Friday earn the weekly bonus.

    scheme_start_date is accepted but not part of the rule.
    """
    if payment_date is None:
        return False
    return payment_date.weekday() < BONUS_WEEKDAYS


def calculate_bonus(payment_date: Optional[date], start_date: Optional[date]) -> int:
    """Flat bonus for an eligible payment, 0 otherwise"""
    return BONUS_AMOUNT if is_eligible_for_bonus(payment_date, start_date) else 0


def get_next_payment_date(last_payment_date: Optional[date]) -> Optional[date]:
    """Same weekday one week later; no holiday adjustment"""
    if last_payment_date is None:
        return None
    return last_payment_date + timedelta(days=PAYMENT_INTERVAL_DAYS)


def build_bonus_payment(
    user_id: str,
    scheme_id: str,
    amount: float,
    payment_date: datetime,
    scheme_start_date: Optional[date] = None,
) -> BonusPayment:
    """Apply the weekly bonus to a payment"""
    bonus = calculate_bonus(payment_date, scheme_start_date)
    week = get_week_number(payment_date)
    return BonusPayment(
        user_id=user_id,
        scheme_id=scheme_id,
        date=payment_date,
        amount=amount,
        bonus=bonus,
        total_amount=amount + bonus,
        week=week.week,
        year=week.year,
    )


def calculate_total_bonus(bonus_payments: Iterable[BonusPayment]) -> float:
    """Sum of bonuses earned"""
    return sum(p.bonus or 0 for p in bonus_payments)


def bonus_status(
    last_payment_date: Optional[datetime],
    scheme_start_date: Optional[date] = None,
    now: Optional[datetime] = None,
) -> BonusStatus:
    """
    Whether a customer owes this week's payment and would earn the bonus.

    With no recorded payment nothing is due yet.
    """
    now = to_datetime(now or datetime.now())
    next_due = get_next_payment_date(last_payment_date)
    is_due = next_due is not None and to_datetime(next_due) <= now
    return BonusStatus(
        next_payment_due=next_due,
        is_payment_due=is_due,
        is_eligible_for_bonus=is_due and is_eligible_for_bonus(now, scheme_start_date),
    )
