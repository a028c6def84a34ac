"""Prometheus metrics for calculator usage and request latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "fincalc_calculation_total",
    "Total loan/deposit calculations served",
    ["kind", "outcome"],  # kind: loan | deposit, outcome: ok | rejected
)

term_months_histogram = Histogram(
    "fincalc_term_months",
    "Requested term lengths in months",
    ["kind"],
    buckets=[3, 6, 12, 24, 36, 60, 120, 240, 360],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(kind: str, term_months: int) -> None:
    """Record a successful calculation and its term length"""
    calculation_counter.labels(kind=kind, outcome="ok").inc()
    term_months_histogram.labels(kind=kind).observe(term_months)


def record_rejection(kind: str) -> None:
    """Record terms rejected by the engine"""
    calculation_counter.labels(kind=kind, outcome="rejected").inc()
