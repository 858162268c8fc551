"""Prometheus metrics for index builds and searches."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


INDEX_BUILD_COUNT = Counter(
    "tracker_search_index_builds_total",
    "Total prefix index builds",
    ["kind"],
)

INDEX_BUILD_LATENCY = Histogram(
    "tracker_search_index_build_seconds",
    "Prefix index build duration",
    ["kind"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
)

INDEX_PREFIX_COUNT = Gauge(
    "tracker_search_index_prefixes",
    "Prefix keys in the most recently built index",
    ["kind"],
)

INDEX_RECORD_COUNT = Gauge(
    "tracker_search_index_records",
    "Records in the most recently built index",
    ["kind"],
)

SEARCH_COUNT = Counter(
    "tracker_search_searches_total",
    "Total index searches",
    ["outcome"],
)

SEARCH_LATENCY = Histogram(
    "tracker_search_search_latency_seconds",
    "Index search latency",
    ["outcome"],
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()
