"""POST /v1/interest - Simple interest and maturity quote"""

import time
from fastapi import APIRouter, Request

from finance_tracker.api.v1.schemas import InterestRequest, InterestResponse
from finance_tracker.api.dependencies import get_request_id
from finance_tracker.domain.interest import (
    calculate_entry_interest,
    calculate_interest,
    calculate_maturity_amount,
)
from finance_tracker.infrastructure.observability.logging import log_calculation
from finance_tracker.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post("/interest", response_model=InterestResponse)
def quote_interest(request_body: InterestRequest, request: Request):
    """
    Quote simple interest for a principal over a number of days.

    Returns the interest, the maturity amount, and the one-day interest
    that would be stored on a payment of that size.
    """
    start_time = time.time()

    response = InterestResponse(
        interest=calculate_interest(request_body.principal, request_body.rate, request_body.days),
        maturity_amount=calculate_maturity_amount(request_body.principal, request_body.rate, request_body.days),
        entry_interest=calculate_entry_interest(request_body.principal, request_body.rate),
    )

    record_calculation("interest")
    log_calculation(get_request_id(request), "interest", 1, (time.time() - start_time) * 1000)
    return response
