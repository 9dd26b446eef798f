"""
Prometheus metrics for monitoring the parsing pipeline.

Defines and exposes metrics for:
- Parse call volume
- Raw and final result counts
- Parser pattern errors
- Parse latency

Metrics are exposed via HTTP endpoint for Prometheus scraping.
"""

import logging

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Histogram,
    start_http_server,
)

from chronoparse.config.settings import get_settings

logger = logging.getLogger(__name__)

# Buckets for latency histograms (in seconds)
LATENCY_BUCKETS = (0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 1.0)


class MetricsCollector:
    """
    Prometheus metrics collector for chronoparse.

    Usage:
        metrics = MetricsCollector()
        metrics.start_server()

        # Record metrics
        metrics.record_parse(raw_count=3, final_count=2, latency=0.004)
        metrics.record_parser_error("ENTimeExpressionParser")
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY):
        """Initialize Prometheus metrics."""
        self.registry = registry

        self.parse_calls = Counter(
            "chronoparse_parse_calls_total",
            "Total number of parse calls",
            registry=registry,
        )

        self.results = Counter(
            "chronoparse_results_total",
            "Total number of results produced",
            ["stage"],  # stage: raw, final
            registry=registry,
        )

        self.parser_errors = Counter(
            "chronoparse_parser_errors_total",
            "Total parser pattern compilation errors",
            ["parser"],
            registry=registry,
        )

        self.parse_latency = Histogram(
            "chronoparse_parse_latency_seconds",
            "Time spent in a full parse call",
            buckets=LATENCY_BUCKETS,
            registry=registry,
        )

        logger.info("Prometheus metrics initialized")

    def start_server(self, port: int | None = None) -> None:
        """
        Start Prometheus metrics HTTP server.

        Args:
            port: Port to expose metrics on (default from settings)
        """
        settings = get_settings()
        port = port or settings.metrics_port

        start_http_server(port, registry=self.registry)
        logger.info(f"Prometheus metrics server started on port {port}")

    # Convenience methods

    def record_parse(self, raw_count: int, final_count: int, latency: float) -> None:
        """
        Record one completed parse call.

        Args:
            raw_count: Results produced by parsers before refinement
            final_count: Results returned to the caller
            latency: Wall time of the call in seconds
        """
        self.parse_calls.inc()
        self.results.labels(stage="raw").inc(raw_count)
        self.results.labels(stage="final").inc(final_count)
        self.parse_latency.observe(latency)

    def record_parser_error(self, parser: str) -> None:
        self.parser_errors.labels(parser=parser).inc()


# Global metrics instance
_metrics: MetricsCollector | None = None


def get_metrics() -> MetricsCollector:
    """Get global metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics
