"""Prometheus metrics for the Loan API service.

Metrics are organized into two categories:

Business Metrics (for Product/Risk):
- loan_api_assessment_total: Loan application assessments by status
- loan_api_capacity_estimate_total: Borrowing capacity estimates
- loan_api_capacity_estimate_amount: Distribution of estimated capacities
- loan_api_borrower_registration_total: Registrations by outcome

Technical Metrics (for Engineering/SRE):
- loan_api_engine_latency_seconds: Latency of each use case
- loan_api_store_failures_total: Financial data store failures
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Risk dashboards)
# =============================================================================

assessment_total = Counter(
    "loan_api_assessment_total",
    "Total number of loan applications assessed",
    ["status"],  # APPROVED, REJECTED, REVIEW
)

capacity_estimate_total = Counter(
    "loan_api_capacity_estimate_total",
    "Total number of borrowing capacity estimates",
    ["employment_status", "recorded"],
)

capacity_estimate_amount = Histogram(
    "loan_api_capacity_estimate_amount",
    "Estimated borrowing capacity in whole currency units",
    buckets=[0, 50_000, 100_000, 250_000, 500_000, 750_000, 1_000_000, 2_000_000],
)

borrower_registration_total = Counter(
    "loan_api_borrower_registration_total",
    "Total number of borrower registration requests",
    ["outcome"],  # created, existing
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

engine_latency = Histogram(
    "loan_api_engine_latency_seconds",
    "Use case latency in seconds",
    ["operation"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

store_failures = Counter(
    "loan_api_store_failures_total",
    "Total number of financial data store failures",
    ["operation"],  # put, append, get, query
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_assessment(status: str) -> None:
    """Record a loan application outcome."""
    assessment_total.labels(status=status).inc()


def record_capacity_estimate(
    employment_status: str,
    estimated_capacity: int,
    recorded: bool,
) -> None:
    """Record a borrowing capacity estimate."""
    capacity_estimate_total.labels(
        employment_status=employment_status,
        recorded="true" if recorded else "false",
    ).inc()
    capacity_estimate_amount.observe(estimated_capacity)


def record_borrower_registration(created: bool) -> None:
    """Record a borrower registration outcome."""
    outcome = "created" if created else "existing"
    borrower_registration_total.labels(outcome=outcome).inc()


def record_store_failure(operation: str) -> None:
    """Record a failed store operation."""
    store_failures.labels(operation=operation).inc()


@contextmanager
def track_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track use case latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        engine_latency.labels(operation=operation).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
