"""POST /v1/schemes/progress - Progress of user schemes against their targets"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from finance_tracker.api.v1.schemas import SchemeProgressItem, SchemeProgressRequest, SchemeProgressResponse
from finance_tracker.api.dependencies import get_request_id
from finance_tracker.domain.exceptions import DomainException
from finance_tracker.domain.interest import calculate_daily_interest
from finance_tracker.domain.schemes import calculate_scheme_progress
from finance_tracker.infrastructure.observability.logging import log_calculation
from finance_tracker.infrastructure.observability.metrics import (
    calculation_failure_counter,
    record_calculation,
)

router = APIRouter()


@router.post("/schemes/progress", response_model=SchemeProgressResponse)
def scheme_progress(request_body: SchemeProgressRequest, request: Request):
    """
    Compute progress for every posted user scheme.

    Payments are matched to schemes by scheme id; accrued interest is
    measured on each scheme's current balance up to as_of.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    transactions = [t.to_domain() for t in request_body.transactions]

    try:
        items = []
        for schema in request_body.schemes:
            scheme = schema.to_domain()
            progress = calculate_scheme_progress(scheme, transactions, as_of=request_body.as_of)
            items.append(
                SchemeProgressItem(
                    scheme_id=scheme.id,
                    total_paid=progress.total_paid,
                    remaining_amount=progress.remaining_amount,
                    completion_percentage=progress.completion_percentage,
                    days_remaining=progress.days_remaining,
                    accrued_interest=calculate_daily_interest(scheme, request_body.as_of),
                )
            )

    except DomainException as e:
        calculation_failure_counter.labels(calculation="scheme_progress").inc()
        logging.warning(f"Scheme progress rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_calculation("scheme_progress")
    log_calculation(request_id, "scheme_progress", len(items), (time.time() - start_time) * 1000)
    return SchemeProgressResponse(schemes=items)
