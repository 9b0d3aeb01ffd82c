"""Scheme enrollment, payment entry and progress tracking"""

import uuid
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from finance_tracker.domain.exceptions import InvalidSchemeError
from finance_tracker.domain.interest import calculate_entry_interest, calculate_remaining_amount
from finance_tracker.domain.models import (
    PaymentMode,
    Scheme,
    SchemeProgress,
    SchemeStatus,
    Transaction,
    UserScheme,
)
from finance_tracker.utils.date_utils import days_between

RECEIPT_PREFIX = "FST"


def resolve_total_amount(
    duration: int,
    total_amount: Optional[float] = None,
    daily_amount: Optional[float] = None,
    min_amount: float = 0,
) -> float:
    """
    Target amount for an enrollment.

    An explicit total wins; otherwise the daily contribution over the whole
    duration, falling back to the scheme minimum per day.
    """
    if total_amount is not None:
        return total_amount
    if daily_amount:
        return daily_amount * duration
    return min_amount * duration


def enroll_user_scheme(
    user_id: str,
    scheme: Scheme,
    start_date: Optional[date] = None,
    duration: Optional[int] = None,
    daily_amount: Optional[float] = None,
    total_amount: Optional[float] = None,
    interest_rate: Optional[float] = None,
) -> UserScheme:
    """
    Build a new enrollment of a user in a scheme.

    Duration and interest rate default to the scheme's own, the start date
    to today. The enrollment starts active with an empty balance.
    """
    duration = scheme.duration if duration is None else duration
    rate = scheme.interest_rate if interest_rate is None else interest_rate

    return UserScheme(
        id=uuid.uuid4().hex,
        user_id=user_id,
        scheme_type=scheme.name,
        start_date=start_date or date.today(),
        duration=duration,
        total_amount=resolve_total_amount(duration, total_amount, daily_amount, scheme.min_amount),
        interest_rate=rate,
        current_balance=0.0,
        status=SchemeStatus.ACTIVE,
        daily_amount=daily_amount,
    )


def generate_receipt_number(now: Optional[datetime] = None) -> str:
    """
    Receipt identifier: FST + yymmdd + last 6 digits of the epoch millis.

    Example:
        2024-03-05 10:00 -> "FST240305" + "123456"
    """
    now = now or datetime.now()
    millis = str(int(now.timestamp() * 1000))
    return f"{RECEIPT_PREFIX}{now:%y%m%d}{millis[-6:]}"


def record_transaction(
    user_scheme: UserScheme,
    amount: float,
    payment_mode: PaymentMode,
    on: Optional[datetime] = None,
    remarks: Optional[str] = None,
) -> Transaction:
    """Build a payment against a user scheme, with entry interest and receipt"""
    on = on or datetime.now()
    return Transaction(
        id=uuid.uuid4().hex,
        user_id=user_scheme.user_id,
        scheme_id=user_scheme.id,
        amount=amount,
        date=on,
        payment_mode=PaymentMode(payment_mode),
        interest=calculate_entry_interest(amount, user_scheme.interest_rate),
        remarks=remarks,
        receipt_number=generate_receipt_number(on),
    )


def calculate_scheme_progress(
    scheme: UserScheme,
    transactions: Iterable[Transaction],
    as_of: Optional[datetime] = None,
) -> SchemeProgress:
    """
    Summarize payments made towards a user scheme.

    Only transactions referencing this scheme count towards total_paid.
    Days remaining are measured to start_date + duration, floored, never
    below zero.

    Raises:
        InvalidSchemeError: total_amount is not positive, so no completion
            percentage exists
    """
    if scheme.total_amount <= 0:
        raise InvalidSchemeError(
            f"Scheme {scheme.id} has non-positive total amount {scheme.total_amount}"
        )

    total_paid = sum(t.amount for t in transactions if t.scheme_id == scheme.id)
    remaining = calculate_remaining_amount(scheme.total_amount, total_paid)
    completion = total_paid / scheme.total_amount * 100

    as_of = as_of or datetime.now()
    end_date = scheme.start_date + timedelta(days=scheme.duration)
    days_remaining = max(0, days_between(as_of, end_date))

    return SchemeProgress(
        total_paid=total_paid,
        remaining_amount=remaining,
        completion_percentage=completion,
        days_remaining=days_remaining,
    )
