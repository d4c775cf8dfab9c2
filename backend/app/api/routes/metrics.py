"""Prometheus metrics endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint.

    Exposes:
    - upstream_latency_ms{source, outcome}
    - upstream_errors_total{source, reason}
    - response_cache_hits_total{endpoint}
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
