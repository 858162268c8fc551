"""Query engine over a built :class:`PrefixIndex`.

Every term is looked up as an exact prefix key, which amounts to a
case-insensitive "starts with" match because every prefix of every indexed
word is present. Terms combine with AND semantics.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
import logging
import time
from typing import Generic

from tracker_search.observability.metrics import SEARCH_COUNT, SEARCH_LATENCY
from tracker_search.search.prefix_index import PrefixIndex, R


logger = logging.getLogger(__name__)

DEFAULT_FILTER_MARKER = "="


def is_ignored_term(term: str | None, filter_marker: str = DEFAULT_FILTER_MARKER) -> bool:
    """Empty terms and ``key=value`` filter terms never narrow results."""
    return not term or filter_marker in term


def resolve_term(
    index: PrefixIndex[R],
    term: str | None,
    filter_marker: str = DEFAULT_FILTER_MARKER,
) -> tuple[R, ...] | None:
    """Records matching a single term, or None when the term is ignored.

    An unknown term resolves to an empty tuple rather than None so that it
    empties the whole intersection.
    """
    if is_ignored_term(term, filter_marker):
        return None
    return index.get(term.lower(), ())


def intersect(resolved: list[tuple[R, ...]]) -> list[R]:
    """Records present in every resolved sequence, ordered as in the first one."""
    first, *rest = resolved
    guards: list[set[Hashable]] = [{record.id for record in records} for records in rest]

    results: list[R] = []
    seen: set[Hashable] = set()
    for record in first:
        key = record.id
        if key in seen:
            continue
        seen.add(key)
        if all(key in guard for guard in guards):
            results.append(record)
    return results


def index_search(
    index: PrefixIndex[R],
    terms: Iterable[str | None] | None,
    *,
    filter_marker: str = DEFAULT_FILTER_MARKER,
) -> list[R] | None:
    """Run a case-insensitive AND search of ``terms`` over ``index``.

    Returns:
        None when no term requested filtering (callers show everything),
        otherwise the matching records, possibly empty.
    """
    resolved = [
        records
        for records in (resolve_term(index, term, filter_marker) for term in terms or ())
        if records is not None
    ]
    if not resolved:
        return None
    return intersect(resolved)


class QueryEngine(Generic[R]):
    """Stateless search facade bound to one index snapshot."""

    def __init__(self, index: PrefixIndex[R], *, filter_marker: str = DEFAULT_FILTER_MARKER) -> None:
        self.index = index
        self.filter_marker = filter_marker

    def search(self, terms: Iterable[str | None] | None) -> list[R] | None:
        terms = list(terms or ())
        start = time.perf_counter()
        results = index_search(self.index, terms, filter_marker=self.filter_marker)
        elapsed = time.perf_counter() - start

        outcome = "unfiltered" if results is None else ("hit" if results else "miss")
        SEARCH_LATENCY.labels(outcome=outcome).observe(elapsed)
        SEARCH_COUNT.labels(outcome=outcome).inc()
        logger.debug("Index search", extra={"terms": terms, "outcome": outcome})
        return results

    def search_text(self, query: str | None) -> list[R] | None:
        """Search a user-typed string; whitespace separates terms."""
        return self.search((query or "").split())
