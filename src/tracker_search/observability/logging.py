"""JSON log lines for index builds and searches."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import sys
from typing import Any

import orjson

from tracker_search.observability.context import current_run


# extra= keys passed by tracker_search loggers
LOGGED_FIELDS = (
    "kind",
    "prefixes",
    "records",
    "skipped_records",
    "record_type",
    "terms",
    "outcome",
    "task_id",
    "person_id",
)


class JsonFormatter(logging.Formatter):
    """One orjson object per record, tagged with the active index run."""

    MAX_TERMS = 20

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        run = current_run()
        if run is not None:
            entry["run_id"] = run.run_id
            entry["index_kind"] = run.index_kind

        for field in LOGGED_FIELDS:
            if field in record.__dict__:
                entry[field] = record.__dict__[field]

        terms = entry.get("terms")
        if isinstance(terms, (list, tuple)) and len(terms) > self.MAX_TERMS:
            entry["terms"] = [*terms[: self.MAX_TERMS], f"... {len(terms) - self.MAX_TERMS} more"]

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return orjson.dumps(entry, default=str).decode("utf-8")


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Send every log line to stderr; stdout carries CLI results."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)
