"""Prometheus metrics for calculation volume, bonuses awarded and request latency"""

from prometheus_client import Counter, Histogram

calculation_counter = Counter(
    "finance_tracker_calculation_total",
    "Total calculations served",
    ["calculation"],  # interest | scheme_progress | bonus | report_summary
)

calculation_failure_counter = Counter(
    "finance_tracker_calculation_failures_total",
    "Calculations rejected with a domain error",
    ["calculation"],
)

bonus_counter = Counter(
    "finance_tracker_bonus_total",
    "Bonus checks by outcome",
    ["outcome"],  # awarded | not_eligible
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(calculation: str) -> None:
    """Count a successfully served calculation"""
    calculation_counter.labels(calculation=calculation).inc()


def record_bonus(bonus: float) -> None:
    """Track how often payments earn the weekly bonus"""
    outcome = "awarded" if bonus > 0 else "not_eligible"
    bonus_counter.labels(outcome=outcome).inc()
