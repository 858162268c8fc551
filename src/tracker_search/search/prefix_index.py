"""Prefix index: every record is reachable from every prefix of its words.

The builder walks each word character by character and registers the record
under each lowercase prefix it accumulates. A per-prefix bucket keeps the
records in insertion order alongside the set of identities already present,
so a record sharing several words with the same prefix is stored only once.

Built indexes are read-only snapshots. Rebuilding is the only way to reflect
changed data.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
import logging
from types import MappingProxyType
from typing import Any, Generic, Protocol, TypeVar


logger = logging.getLogger(__name__)


class Identifiable(Protocol):
    """Anything carrying a stable, hashable identity."""

    @property
    def id(self) -> Hashable:  # pragma: no cover - interface definition
        ...


R = TypeVar("R", bound=Identifiable)


class PrefixBucket(Generic[R]):
    """Ordered records for one prefix plus the identity guard used for dedup."""

    __slots__ = ("_records", "_seen")

    def __init__(self) -> None:
        self._records: list[R] = []
        self._seen: set[Hashable] = set()

    def add(self, record: R) -> bool:
        """Append ``record`` unless its identity is already registered."""
        key = record.id
        if key in self._seen:
            return False
        self._seen.add(key)
        self._records.append(record)
        return True

    def __len__(self) -> int:
        return len(self._records)

    def freeze(self) -> tuple[R, ...]:
        return tuple(self._records)


class PrefixIndex(Mapping[str, tuple[R, ...]]):
    """Immutable mapping from lowercase prefix to the records indexed under it."""

    __slots__ = ("_entries", "_record_count")

    def __init__(self, entries: Mapping[str, tuple[R, ...]] | None = None, *, record_count: int = 0) -> None:
        self._entries: Mapping[str, tuple[R, ...]] = MappingProxyType(dict(entries or {}))
        self._record_count = record_count

    def __getitem__(self, prefix: str) -> tuple[R, ...]:
        return self._entries[prefix]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PrefixIndex(prefixes={len(self)}, records={self._record_count})"

    @property
    def record_count(self) -> int:
        """Number of distinct records that contributed at least one prefix."""
        return self._record_count

    def to_dict(self) -> dict[str, list[Any]]:
        """Plain-dict copy for debugging and export."""
        return {prefix: list(records) for prefix, records in self._entries.items()}


class IndexBuilder(Generic[R]):
    """Builds a fresh :class:`PrefixIndex` from ``(record, words)`` pairs.

    A builder holds no state between calls; each ``build`` starts from an
    empty table and hands ownership of the result to the caller.
    """

    def build(self, entries: Iterable[tuple[R | None, Iterable[str | None]]]) -> PrefixIndex[R]:
        buckets: dict[str, PrefixBucket[R]] = {}
        indexed: set[Hashable] = set()
        skipped_records = 0
        missing_identity = False

        for record, words in entries:
            if not record:
                skipped_records += 1
                continue
            if record.id is None and not missing_identity:
                missing_identity = True
                logger.warning(
                    "Indexing record without identity; duplicates of it will be collapsed",
                    extra={"record_type": type(record).__name__},
                )
            if _index_words(buckets, record, words or ()):
                indexed.add(record.id)

        index = PrefixIndex(
            {prefix: bucket.freeze() for prefix, bucket in buckets.items()},
            record_count=len(indexed),
        )
        logger.debug(
            "Built prefix index",
            extra={"prefixes": len(index), "records": index.record_count, "skipped_records": skipped_records},
        )
        return index


def _index_words(buckets: dict[str, PrefixBucket[R]], record: R, words: Iterable[str | None]) -> bool:
    """Register ``record`` under every prefix of every word; True if any prefix was touched."""
    touched = False
    for word in words:
        if not word:
            continue
        prefix = ""
        for character in word:
            prefix += character.lower()
            bucket = buckets.get(prefix)
            if bucket is None:
                bucket = buckets[prefix] = PrefixBucket()
            bucket.add(record)
            touched = True
    return touched


def build_prefix_index(entries: Iterable[tuple[R | None, Iterable[str | None]]]) -> PrefixIndex[R]:
    """Build a prefix index from ``(record, words)`` pairs."""
    return IndexBuilder().build(entries)
