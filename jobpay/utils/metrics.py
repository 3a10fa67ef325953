"""
Prometheus metrics for observability
"""

import re
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from prometheus_client.core import CollectorRegistry

# Create a custom registry to avoid conflicts
metrics_registry = CollectorRegistry()

# HTTP request metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["path", "method", "status"],
    registry=metrics_registry,
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["path", "method"],
    registry=metrics_registry,
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# Ledger metrics
job_payments_total = Counter(
    "job_payments_total",
    "Total job payment attempts",
    ["outcome"],  # paid, JOB_ALREADY_PAID, INSUFFICIENT_FUNDS, ...
    registry=metrics_registry,
)

deposits_total = Counter(
    "deposits_total",
    "Total deposit attempts",
    ["outcome"],  # deposited, DEPOSIT_EXCEEDS_CAP, NO_UNPAID_JOBS, ...
    registry=metrics_registry,
)


def record_http_request(
    path: str,
    method: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """
    Record HTTP request metrics.

    Args:
        path: Request path (normalized)
        method: HTTP method
        status_code: Response status code
        duration_seconds: Request duration in seconds
    """
    normalized_path = _normalize_path(path)

    http_requests_total.labels(
        path=normalized_path,
        method=method.upper(),
        status=str(status_code),
    ).inc()

    http_request_duration_seconds.labels(
        path=normalized_path,
        method=method.upper(),
    ).observe(duration_seconds)


def record_job_payment(outcome: str) -> None:
    """Record a job payment outcome (success or error code)"""
    job_payments_total.labels(outcome=outcome).inc()


def record_deposit(outcome: str) -> None:
    """Record a deposit outcome (success or error code)"""
    deposits_total.labels(outcome=outcome).inc()


def _normalize_path(path: str) -> str:
    """
    Normalize path for metrics (replace numeric IDs with placeholders).

    Examples:
        /jobs/unpaid -> /jobs/unpaid
        /jobs/42/pay -> /jobs/{id}/pay
        /balances/deposit/7 -> /balances/deposit/{id}
    """
    return re.sub(r'/\d+', '/{id}', path)


def get_metrics_output() -> bytes:
    """Get Prometheus metrics output"""
    return generate_latest(metrics_registry)


__all__ = [
    "CONTENT_TYPE_LATEST",
    "get_metrics_output",
    "record_deposit",
    "record_http_request",
    "record_job_payment",
]
