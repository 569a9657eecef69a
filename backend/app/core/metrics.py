"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Write pipeline metrics
record_writes = Counter(
    'record_writes_total',
    'Validated write attempts',
    ['record', 'outcome']  # record: event/booking, outcome: committed or error code
)

# Referential integrity metrics
existence_checks = Counter(
    'existence_checks_total',
    'Event existence checks performed for bookings',
    ['result']  # found, missing, error
)

existence_check_latency = Histogram(
    'existence_check_latency_seconds',
    'Event existence check latency',
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 5.0]
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_write(record: str, outcome: str):
    """Record a write attempt. Outcome: committed, or the failure code."""
    record_writes.labels(record=record, outcome=outcome).inc()


def record_existence_check(result: str):
    """Record existence check result: found, missing, error"""
    existence_checks.labels(result=result).inc()
