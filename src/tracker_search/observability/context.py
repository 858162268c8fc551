"""Run scope shared by every log line of one index build and search.

Each CLI run enters :func:`index_context` with the kind of index it builds;
the JSON formatter stamps the run id and kind onto whatever is logged inside.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class IndexRun:
    run_id: str
    index_kind: str


_current_run: ContextVar[IndexRun | None] = ContextVar("tracker_search_index_run", default=None)


def current_run() -> IndexRun | None:
    """The active run, or None outside :func:`index_context`."""
    return _current_run.get()


@contextmanager
def index_context(kind: str) -> Iterator[IndexRun]:
    run = IndexRun(run_id=uuid4().hex, index_kind=kind)
    token = _current_run.set(run)
    try:
        yield run
    finally:
        _current_run.reset(token)
