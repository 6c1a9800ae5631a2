"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Database metrics
db_connection_attempts = Counter(
    'db_connection_attempts_total',
    'Database connection attempts',
    ['result']  # success, failure
)

documents_persisted = Counter(
    'documents_persisted_total',
    'Rows written through the persistence pipelines',
    ['collection', 'operation']  # events/bookings, create/update
)

# Validation metrics
validation_failures = Counter(
    'validation_failures_total',
    'Writes rejected by normalization/validation pipelines',
    ['entity']  # event, booking
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_connection_attempt(success: bool):
    """Record the outcome of a database connection attempt."""
    result = "success" if success else "failure"
    db_connection_attempts.labels(result=result).inc()


def record_persisted(collection: str, operation: str):
    """Record a persisted row. Operation: create, update"""
    documents_persisted.labels(collection=collection, operation=operation).inc()


def record_validation_failure(entity: str):
    validation_failures.labels(entity=entity).inc()
