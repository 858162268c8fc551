"""Turn record fields into the words the prefix index is built from."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
import logging
from typing import TypeVar

from tracker_search.domain.model import Asset, Entity, Episode, Person, Sequence, Shot, Task


logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS = "_-"

T = TypeVar("T")


def normalize_separators(text: str | None, separators: str = DEFAULT_SEPARATORS) -> str:
    """Replace naming separators (``SH_010-v2``) with spaces."""
    if not text:
        return ""
    return text.translate({ord(char): " " for char in separators})


def split_words(text: str | None) -> list[str]:
    """Split on single spaces; empty fragments are left for the builder to skip."""
    if not text:
        return []
    return text.split(" ")


def name_words(entity: Entity, split: bool = True) -> list[str]:
    if not entity.name:
        return []
    return split_words(entity.name) if split else [entity.name]


def task_words(task: Task, separators: str = DEFAULT_SEPARATORS) -> list[str | None]:
    """Full entity name words plus task type, status and project."""
    words: list[str | None] = split_words(normalize_separators(task.full_entity_name, separators))
    words.extend([task.task_type_name, task.task_status_short_name, task.project_name])
    return words


def supervisor_task_words(
    task: Task,
    person_map: Mapping[int | str, Person],
    separators: str = DEFAULT_SEPARATORS,
) -> list[str | None]:
    """Short entity name words, status, and the names of every assignee."""
    words: list[str | None] = split_words(normalize_separators(task.entity_name, separators))
    words.append(task.task_status_short_name)
    for person_id in task.assignees:
        person = person_map.get(person_id)
        if person is None:
            logger.debug("Unknown assignee skipped", extra={"task_id": task.id, "person_id": person_id})
            continue
        words.extend([person.first_name, person.last_name])
    return words


def asset_words(asset: Asset, separators: str = DEFAULT_SEPARATORS) -> list[str]:
    return split_words(normalize_separators(asset.name, separators)) + split_words(asset.asset_type_name)


def shot_words(shot: Shot) -> list[str | None]:
    return [shot.name, shot.sequence_name, shot.episode_name]


def sequence_words(sequence: Sequence) -> list[str | None]:
    return [sequence.name, sequence.episode_name]


def episode_words(episode: Episode) -> list[str | None]:
    return [episode.name]


def pair_words(
    records: Iterable[T | None], extract: Callable[[T], Iterable[str | None]]
) -> Iterator[tuple[T | None, Iterable[str | None]]]:
    """Yield ``(record, words)`` pairs, passing falsy records through untouched."""
    for record in records:
        yield record, (extract(record) if record else ())
