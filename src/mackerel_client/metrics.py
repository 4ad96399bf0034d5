"""Prometheus metrics for API calls made by the client.

Metrics are registered on the default prometheus_client registry so that
an application exposing its own metrics picks them up automatically.
"""

from prometheus_client import Counter, Histogram

# Buckets tuned for calls to a remote HTTP API
DEFAULT_BUCKETS_EXTERNAL_API = (0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0)

TRANSPORT_ERROR_STATUS = "error"

api_requests = Counter(
    "mackerel_client_requests_total",
    "Total number of Mackerel API requests",
    ["endpoint", "method", "status"],
)

api_request_duration = Histogram(
    "mackerel_client_request_duration_seconds",
    "Mackerel API request duration in seconds",
    ["endpoint", "method"],
    buckets=DEFAULT_BUCKETS_EXTERNAL_API,
)


def observe_request(
    endpoint: str, method: str, status: int | str, duration: float
) -> None:
    """Record one finished API request.

    Args:
        endpoint: Operation name (e.g., "list_hosts").
        method: HTTP method.
        status: Response status code, or "error" if no response arrived.
        duration: Seconds spent waiting for the transport.
    """
    api_requests.labels(endpoint, method, str(status)).inc()
    api_request_duration.labels(endpoint, method).observe(duration)
