"""Media relay Prometheus metrics."""

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, generate_latest

REGISTRY = CollectorRegistry(auto_describe=True)
METRICS_PATH = "/metrics/status"

RELAY_REQUESTS = Counter(
    "media_relay_requests_total",
    "Relay operations by outcome",
    ["operation", "outcome"],
    registry=REGISTRY,
)
RELAY_STORED_BYTES = Counter(
    "media_relay_stored_bytes_total",
    "Bytes written to the bucket",
    registry=REGISTRY,
)


def register_metrics(app: FastAPI) -> None:
    """Expose the Prometheus scrape endpoint."""

    @app.get(METRICS_PATH, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
