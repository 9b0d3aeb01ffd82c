"""Simple-interest and maturity calculations for savings schemes"""

from datetime import date, datetime
from typing import Optional

from finance_tracker.domain.models import UserScheme
from finance_tracker.utils.date_utils import days_between

DAYS_PER_YEAR = 365


def calculate_interest(principal: float, rate: float, days: float) -> float:
    """
    Simple interest: principal * rate * (days / 365) / 100.

    No compounding. Inputs are not validated: negative principal or days
    produce a negative result.

    Example:
        1000 at 10% for 365 days -> 100.0
    """
    return principal * rate * (days / DAYS_PER_YEAR) / 100


def calculate_maturity_amount(principal: float, rate: float, days: float) -> float:
    """Principal plus simple interest at the end of the term"""
    return principal + calculate_interest(principal, rate, days)


def calculate_daily_interest(scheme: UserScheme, as_of: Optional[date] = None) -> float:
    """
    Interest accrued on the scheme's current balance since its start date.

    Elapsed days are floored to whole days. When as_of precedes the start
    date the elapsed count is negative and so is the result; callers decide
    whether that is an error.
    """
    if as_of is None:
        as_of = datetime.now()
    elapsed_days = days_between(scheme.start_date, as_of)
    return calculate_interest(scheme.current_balance, scheme.interest_rate, elapsed_days)


def calculate_remaining_amount(total_amount: float, paid_amount: float) -> float:
    """Outstanding amount, never below zero"""
    return max(0, total_amount - paid_amount)


def calculate_entry_interest(amount: float, rate: float) -> float:
    """One day of simple interest, stored on a transaction when it is entered"""
    return calculate_interest(amount, rate, 1)
