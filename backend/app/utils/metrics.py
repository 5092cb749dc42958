"""Prometheus metrics for trip writes."""

from prometheus_client import Counter, Histogram

trip_write_latency_ms = Histogram(
    "trip_write_latency_ms",
    "Trip write latency in milliseconds",
    ["operation", "outcome"],
    buckets=[5, 10, 25, 50, 100, 250, 500, 1000, 2500],
)

trip_write_errors_total = Counter(
    "trip_write_errors_total",
    "Total failed trip writes",
    ["operation", "reason"],
)


class PrometheusTripMetrics:
    """Prometheus-based trip write metrics."""

    def record_latency(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record trip write latency."""
        trip_write_latency_ms.labels(operation=operation, outcome=outcome).observe(latency_ms)

    def inc_error(self, operation: str, reason: str) -> None:
        """Increment error counter."""
        trip_write_errors_total.labels(operation=operation, reason=reason).inc()
