"""POST /v1/reports/summary - Chart series and headline figures for the reports screen"""

import time
import logging
from dataclasses import asdict
from datetime import datetime
from fastapi import APIRouter, HTTPException, Request

from finance_tracker.api.v1.schemas import (
    DashboardStatsSchema,
    DistributionSchema,
    ReportStatsSchema,
    ReportSummaryRequest,
    ReportSummaryResponse,
    series_schema,
)
from finance_tracker.api.dependencies import get_request_id
from finance_tracker.config import settings
from finance_tracker.domain.analytics import (
    amount_by_scheme_type,
    group_transactions_by_day,
    group_transactions_by_month,
    payment_mode_distribution,
    simple_moving_average,
    user_growth_by_month,
)
from finance_tracker.domain.exceptions import DomainException
from finance_tracker.domain.reports import (
    apply_report_filter,
    compute_dashboard_stats,
    compute_report_stats,
    filter_transactions_by_period,
)
from finance_tracker.infrastructure.observability.logging import log_calculation
from finance_tracker.infrastructure.observability.metrics import (
    calculation_failure_counter,
    record_calculation,
)
from finance_tracker.utils.date_utils import utc_date

router = APIRouter()


@router.post("/reports/summary", response_model=ReportSummaryResponse)
def report_summary(request_body: ReportSummaryRequest, request: Request):
    """
    Build every report chart from the posted records.

    Flow:
    1. Narrow transactions to the period, then to the drill-down filters
    2. Distributions and stats use the narrowed transactions
    3. Daily/monthly series, user growth and dashboard use everything
    """
    start_time = time.time()
    request_id = get_request_id(request)

    now = request_body.as_of or datetime.now()
    users = [u.to_domain() for u in request_body.users]
    user_schemes = [s.to_domain() for s in request_body.user_schemes]
    transactions = [t.to_domain() for t in request_body.transactions]

    try:
        drilled = transactions
        if request_body.period:
            drilled = filter_transactions_by_period(drilled, request_body.period, now=now)
        if request_body.filters:
            drilled = apply_report_filter(drilled, request_body.filters.to_domain(), user_schemes)

    except DomainException as e:
        calculation_failure_counter.labels(calculation="report_summary").inc()
        logging.warning(f"Report rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    days = request_body.days if request_body.days is not None else settings.daily_series_days
    window = request_body.window or settings.moving_average_window
    year = request_body.year or utc_date(now).year

    daily = group_transactions_by_day(transactions, days=days, today=utc_date(now))
    payment_modes = payment_mode_distribution(drilled)
    scheme_amounts = amount_by_scheme_type(drilled, user_schemes)

    response = ReportSummaryResponse(
        daily=series_schema(daily),
        daily_moving_average=simple_moving_average([p.value for p in daily], window),
        monthly=series_schema(group_transactions_by_month(transactions, year)),
        user_growth=series_schema(user_growth_by_month(users, year)),
        payment_modes=DistributionSchema(labels=payment_modes.labels, values=payment_modes.values),
        scheme_amounts=DistributionSchema(labels=scheme_amounts.labels, values=scheme_amounts.values),
        stats=ReportStatsSchema(**asdict(compute_report_stats(drilled))),
        dashboard=DashboardStatsSchema(
            **asdict(compute_dashboard_stats(users, user_schemes, transactions, today=utc_date(now)))
        ),
    )

    record_calculation("report_summary")
    log_calculation(request_id, "report_summary", len(transactions), (time.time() - start_time) * 1000)
    return response
