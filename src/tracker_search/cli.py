"""CLI for building a prefix index over exported records and querying it."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging
from pathlib import Path
import sys
from typing import Any

import orjson
from pydantic import ValidationError

from tracker_search.config import get_settings
from tracker_search.domain.model import Asset, Entity, Episode, Record, Sequence as SequenceRecord, Shot, Task
from tracker_search.errors import RecordLoadError
from tracker_search.loaders import load_person_map, load_records
from tracker_search.observability import configure_logging, get_metrics, index_context
from tracker_search.search import (
    PrefixIndex,
    QueryEngine,
    build_asset_index,
    build_episode_index,
    build_name_index,
    build_sequence_index,
    build_shot_index,
    build_supervisor_task_index,
    build_task_index,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IndexKind:
    """How to load and index one kind of record."""

    model: type[Record]
    build: Callable[[argparse.Namespace, list[Any]], PrefixIndex]


def _separators() -> str:
    return get_settings().word_separators


INDEX_KINDS: dict[str, IndexKind] = {
    "name": IndexKind(Entity, lambda args, records: build_name_index(records, split=args.split)),
    "task": IndexKind(Task, lambda args, records: build_task_index(records, separators=_separators())),
    "supervisor-task": IndexKind(
        Task,
        lambda args, records: build_supervisor_task_index(
            records, load_person_map(args.people), separators=_separators()
        ),
    ),
    "asset": IndexKind(Asset, lambda args, records: build_asset_index(records, separators=_separators())),
    "shot": IndexKind(Shot, lambda args, records: build_shot_index(records)),
    "sequence": IndexKind(SequenceRecord, lambda args, records: build_sequence_index(records)),
    "episode": IndexKind(Episode, lambda args, records: build_episode_index(records)),
}


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a prefix index over exported records and print the records matching all terms",
    )
    parser.add_argument(
        "--records",
        type=Path,
        required=True,
        help="Path to a JSON array of record payloads",
    )
    parser.add_argument(
        "--kind",
        choices=sorted(INDEX_KINDS),
        default="name",
        help="Kind of record, which decides the indexed words (default: name)",
    )
    parser.add_argument(
        "--people",
        type=Path,
        help="Path to a JSON array of people, required for --kind supervisor-task",
    )
    parser.add_argument(
        "--no-split",
        dest="split",
        action="store_false",
        default=None,
        help="Index whole names instead of individual words (--kind name only)",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Write Prometheus metrics for the run to stderr after the results",
    )
    parser.add_argument(
        "terms",
        nargs="*",
        metavar="TERM",
        help="Search terms; all must match. key=value terms are ignored",
    )
    return parser


def _validate_args(args: argparse.Namespace) -> None:
    if args.kind == "supervisor-task" and args.people is None:
        raise ValueError("--people is required for --kind supervisor-task")
    if args.split is False and args.kind != "name":
        raise ValueError("--no-split only applies to --kind name")


def _split_terms(raw_terms: Sequence[str]) -> list[str]:
    return [term for raw in raw_terms for term in raw.split()]


def _write_results(results: list[Any] | None) -> None:
    if results is None:
        sys.stdout.write(orjson.dumps({"filtered": False}).decode("utf-8") + "\n")
        return
    for record in results:
        sys.stdout.write(orjson.dumps(record.model_dump(mode="json")).decode("utf-8") + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        sys.stderr.write(f"Invalid settings: {exc.errors()[0]['msg']}\n")
        return 2
    configure_logging(settings.log_level, settings.log_json)

    parser = build_argument_parser()
    args = parser.parse_args(argv)
    try:
        _validate_args(args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    if args.split is None:
        args.split = settings.split_names

    kind = INDEX_KINDS[args.kind]
    with index_context(args.kind):
        try:
            records = load_records(args.records, kind.model)
            index = kind.build(args, records)
        except RecordLoadError as exc:
            logger.error("Cannot load records: %s", exc)
            return 1

        engine = QueryEngine(index, filter_marker=settings.filter_marker)
        results = engine.search(_split_terms(args.terms))

    _write_results(results)
    if args.metrics:
        sys.stderr.write(get_metrics().decode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
