# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the mailchimp-proxy service."""
from prometheus_client import Counter, Gauge, Histogram

SYNC_OPERATIONS = Counter(
    "mailchimp_sync_operations_total",
    "Mutating operations by entity, operation and terminal state",
    ["entity", "operation", "outcome"],
)
MAILCHIMP_CALLS = Counter(
    "mailchimp_api_calls_total", "Calls made to the Mailchimp API", ["method", "outcome"]
)
MAILCHIMP_LATENCY = Histogram(
    "mailchimp_api_call_duration_seconds",
    "Mailchimp API call latency",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)
LISTS_STORED = Gauge(
    "mailchimp_lists_stored", "Lists currently stored locally"
)
MEMBERS_STORED = Gauge(
    "mailchimp_members_stored", "List members currently stored locally"
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
