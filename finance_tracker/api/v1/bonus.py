"""POST /v1/bonus - Weekly bonus check for a payment"""

import time
from fastapi import APIRouter, Request

from finance_tracker.api.v1.schemas import BonusRequest, BonusResponse
from finance_tracker.api.dependencies import get_request_id
from finance_tracker.domain.bonus import (
    build_bonus_payment,
    get_next_payment_date,
    is_eligible_for_bonus,
)
from finance_tracker.infrastructure.observability.logging import log_calculation
from finance_tracker.infrastructure.observability.metrics import record_bonus, record_calculation

router = APIRouter()


@router.post("/bonus", response_model=BonusResponse)
def check_bonus(request_body: BonusRequest, request: Request):
    """Apply the weekday bonus rule to a payment and schedule the next one"""
    start_time = time.time()

    payment = build_bonus_payment(
        user_id=request_body.user_id,
        scheme_id=request_body.scheme_id,
        amount=request_body.amount,
        payment_date=request_body.payment_date,
        scheme_start_date=request_body.scheme_start_date,
    )

    record_bonus(payment.bonus)
    record_calculation("bonus")
    log_calculation(get_request_id(request), "bonus", 1, (time.time() - start_time) * 1000)

    return BonusResponse(
        year=payment.year,
        week=payment.week,
        eligible=is_eligible_for_bonus(request_body.payment_date, request_body.scheme_start_date),
        bonus=payment.bonus,
        total_amount=payment.total_amount,
        next_payment_date=get_next_payment_date(request_body.payment_date),
    )
