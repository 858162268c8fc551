"""Logging, run correlation and metrics for index builds and searches."""

from tracker_search.observability.context import IndexRun, current_run, index_context
from tracker_search.observability.logging import JsonFormatter, configure_logging
from tracker_search.observability.metrics import (
    INDEX_BUILD_COUNT,
    INDEX_BUILD_LATENCY,
    INDEX_PREFIX_COUNT,
    INDEX_RECORD_COUNT,
    SEARCH_COUNT,
    SEARCH_LATENCY,
    get_metrics,
    track_latency,
)


__all__ = [
    "INDEX_BUILD_COUNT",
    "INDEX_BUILD_LATENCY",
    "INDEX_PREFIX_COUNT",
    "INDEX_RECORD_COUNT",
    "SEARCH_COUNT",
    "SEARCH_LATENCY",
    "IndexRun",
    "JsonFormatter",
    "configure_logging",
    "current_run",
    "get_metrics",
    "index_context",
    "track_latency",
]
