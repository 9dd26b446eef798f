"""Observability layer - logging and metrics."""

from chronoparse.observability.logging import setup_logging
from chronoparse.observability.metrics import MetricsCollector, get_metrics

__all__ = ["setup_logging", "MetricsCollector", "get_metrics"]
