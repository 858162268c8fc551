"""Ready-made prefix indexes for each kind of production-tracking record.

Each builder only decides which words describe a record; the prefix
expansion and dedup all happen in :func:`build_prefix_index`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from functools import partial
import logging
from typing import TypeVar

from tracker_search.domain.model import Asset, Entity, Episode, Person, Sequence, Shot, Task
from tracker_search.observability.metrics import (
    INDEX_BUILD_COUNT,
    INDEX_BUILD_LATENCY,
    INDEX_PREFIX_COUNT,
    INDEX_RECORD_COUNT,
    track_latency,
)
from tracker_search.search.prefix_index import PrefixIndex, build_prefix_index
from tracker_search.search.words import (
    DEFAULT_SEPARATORS,
    asset_words,
    episode_words,
    name_words,
    pair_words,
    sequence_words,
    shot_words,
    supervisor_task_words,
    task_words,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _build(kind: str, records: Iterable[T | None], extract: Callable[[T], Iterable[str | None]]) -> PrefixIndex[T]:
    with track_latency(INDEX_BUILD_LATENCY, kind=kind):
        index = build_prefix_index(pair_words(records, extract))
    INDEX_BUILD_COUNT.labels(kind=kind).inc()
    INDEX_PREFIX_COUNT.labels(kind=kind).set(len(index))
    INDEX_RECORD_COUNT.labels(kind=kind).set(index.record_count)
    logger.info("Index built", extra={"kind": kind, "prefixes": len(index), "records": index.record_count})
    return index


def build_name_index(entries: Iterable[Entity | None], split: bool = True) -> PrefixIndex[Entity]:
    """Index records by their name, word by word unless ``split`` is False."""
    return _build("name", entries, partial(name_words, split=split))


def build_task_index(
    tasks: Iterable[Task | None], *, separators: str = DEFAULT_SEPARATORS
) -> PrefixIndex[Task]:
    """Index tasks by full entity name words, task type, status and project."""
    return _build("task", tasks, partial(task_words, separators=separators))


def build_supervisor_task_index(
    tasks: Iterable[Task | None],
    person_map: Mapping[int | str, Person],
    *,
    separators: str = DEFAULT_SEPARATORS,
) -> PrefixIndex[Task]:
    """Index tasks by entity name words, status and assignee first/last names.

    ``person_map`` resolves assignee ids to people; unknown ids are skipped.
    """
    return _build(
        "supervisor-task",
        tasks,
        partial(supervisor_task_words, person_map=person_map, separators=separators),
    )


def build_asset_index(
    assets: Iterable[Asset | None], *, separators: str = DEFAULT_SEPARATORS
) -> PrefixIndex[Asset]:
    """Index assets by name words and asset type words."""
    return _build("asset", assets, partial(asset_words, separators=separators))


def build_shot_index(shots: Iterable[Shot | None]) -> PrefixIndex[Shot]:
    """Index shots by shot, sequence and episode names at the same time."""
    return _build("shot", shots, shot_words)


def build_sequence_index(sequences: Iterable[Sequence | None]) -> PrefixIndex[Sequence]:
    return _build("sequence", sequences, sequence_words)


def build_episode_index(episodes: Iterable[Episode | None]) -> PrefixIndex[Episode]:
    return _build("episode", episodes, episode_words)
