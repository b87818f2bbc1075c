"""Prometheus metrics for monitoring scheduling runs and funding shortfalls"""

from typing import Sequence
from prometheus_client import Counter, Histogram

from paycheck_planner.domain.models import UnassignedPayment

# Scheduling metrics
schedule_runs_counter = Counter(
    "planner_schedule_runs_total",
    "Total scheduling runs",
    ["outcome"],  # funded | shortfall | error
)

unassigned_payments_counter = Counter(
    "planner_unassigned_payments_total",
    "Obligations left without a funding paycheck",
    ["type"],  # bill | debt | budget
)

unassigned_amount_histogram = Histogram(
    "planner_unassigned_amount",
    "Total unfunded amount per scheduling run",
    buckets=[0, 50, 100, 250, 500, 1000, 2500, 5000],
)

extra_shortfall_counter = Counter(
    "planner_extra_shortfall_total",
    "Focus-debt extra payment amount that did not fit any paycheck",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_schedule(unassigned: Sequence[UnassignedPayment], extra_shortfall: float) -> None:
    """Record run outcome and shortfalls by obligation type"""
    outcome = "shortfall" if unassigned else "funded"
    schedule_runs_counter.labels(outcome=outcome).inc()

    for payment in unassigned:
        unassigned_payments_counter.labels(type=payment.type.value).inc()

    unassigned_amount_histogram.observe(sum(p.amount for p in unassigned))

    if extra_shortfall > 0:
        extra_shortfall_counter.inc(extra_shortfall)


def record_schedule_error() -> None:
    schedule_runs_counter.labels(outcome="error").inc()
