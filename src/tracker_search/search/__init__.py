"""
Prefix indexing and query engine package.

- prefix_index: prefix expansion with per-prefix dedup
- query: AND search over a built index
- words: record field to word extraction
- builders: one index builder per record kind
"""

from tracker_search.search.builders import (
    build_asset_index,
    build_episode_index,
    build_name_index,
    build_sequence_index,
    build_shot_index,
    build_supervisor_task_index,
    build_task_index,
)
from tracker_search.search.prefix_index import IndexBuilder, PrefixBucket, PrefixIndex, build_prefix_index
from tracker_search.search.query import QueryEngine, index_search


__all__ = [
    "IndexBuilder",
    "PrefixBucket",
    "PrefixIndex",
    "QueryEngine",
    "build_asset_index",
    "build_episode_index",
    "build_name_index",
    "build_prefix_index",
    "build_sequence_index",
    "build_shot_index",
    "build_supervisor_task_index",
    "build_task_index",
    "index_search",
]
