"""Prometheus metrics for LLM calls and recommendation outcomes."""

from prometheus_client import Counter, Histogram

llm_latency_ms = Histogram(
    "llm_latency_ms",
    "Text-generation call latency in milliseconds",
    ["model", "outcome"],
    buckets=[250, 500, 1000, 2000, 4000, 8000, 16000, 32000, 60000],
)

llm_errors_total = Counter(
    "llm_errors_total",
    "Total failed text-generation calls",
    ["model", "reason"],
)

recommendations_placeholder_total = Counter(
    "recommendations_placeholder_total",
    "Recommendations answered with the no-results placeholder",
)


class PrometheusLLMMetrics:
    """Prometheus-based LLM metrics implementation."""

    def record_latency(self, model: str, outcome: str, latency_ms: float) -> None:
        """Record call latency."""
        llm_latency_ms.labels(model=model, outcome=outcome).observe(latency_ms)

    def inc_error(self, model: str, reason: str) -> None:
        """Increment error counter."""
        llm_errors_total.labels(model=model, reason=reason).inc()

    def inc_placeholder(self) -> None:
        """Increment placeholder counter."""
        recommendations_placeholder_total.inc()
