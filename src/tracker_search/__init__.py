"""In-memory prefix search over production-tracking records."""

from tracker_search.search import (
    IndexBuilder,
    PrefixIndex,
    QueryEngine,
    build_asset_index,
    build_episode_index,
    build_name_index,
    build_prefix_index,
    build_sequence_index,
    build_shot_index,
    build_supervisor_task_index,
    build_task_index,
    index_search,
)


__all__ = [
    "IndexBuilder",
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
