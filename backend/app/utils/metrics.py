"""Prometheus metrics for upstream sources and the response cache."""

from prometheus_client import Counter, Histogram

upstream_latency_ms = Histogram(
    "upstream_latency_ms",
    "Upstream source latency in milliseconds",
    ["source", "outcome"],
    buckets=[10, 50, 100, 200, 500, 1000, 2000, 4000, 8000],
)

upstream_errors_total = Counter(
    "upstream_errors_total",
    "Total upstream source failures",
    ["source", "reason"],
)

response_cache_hits_total = Counter(
    "response_cache_hits_total",
    "Total aggregated responses served from cache",
    ["endpoint"],
)


class PrometheusSourceMetrics:
    """Prometheus-based source metrics implementation."""

    def record_latency(self, source: str, outcome: str, latency_ms: float) -> None:
        """Record upstream latency."""
        upstream_latency_ms.labels(source=source, outcome=outcome).observe(latency_ms)

    def inc_error(self, source: str, reason: str) -> None:
        """Increment error counter."""
        upstream_errors_total.labels(source=source, reason=reason).inc()

    def inc_cache_hit(self, endpoint: str) -> None:
        """Increment cache hit counter."""
        response_cache_hits_total.labels(endpoint=endpoint).inc()
