"""Prometheus metrics for monitoring approval rates and approved amounts"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | invalid_personal_code | invalid_loan_amount | invalid_loan_period | no_valid_loan | error
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: str, loan_amount: Optional[int] = None) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if outcome != "approved" or loan_amount is None:
        return

    if loan_amount < 4000:
        bucket = "2000-3999"
    elif loan_amount < 7000:
        bucket = "4000-6999"
    else:
        bucket = "7000+"

    approved_amount_bucket_counter.labels(bucket=bucket).inc()
