"""Read record payloads exported from the tracker into domain models."""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

import orjson
from pydantic import TypeAdapter, ValidationError

from tracker_search.domain.model import Person, Record
from tracker_search.errors import RecordLoadError


M = TypeVar("M", bound=Record)


def load_records(path: Path, model: type[M]) -> list[M | None]:
    """Load a JSON array of payloads; ``null`` entries are kept as None."""
    try:
        raw = orjson.loads(Path(path).read_bytes())
    except OSError as exc:
        raise RecordLoadError(path, f"cannot read file ({exc.strerror or exc})") from exc
    except orjson.JSONDecodeError as exc:
        raise RecordLoadError(path, f"invalid JSON ({exc})") from exc

    if not isinstance(raw, list):
        raise RecordLoadError(path, "expected a JSON array of records")

    try:
        return TypeAdapter(list[model | None]).validate_python(raw)
    except ValidationError as exc:
        raise RecordLoadError(path, f"{exc.error_count()} invalid record(s): {exc.errors()[0]['msg']}") from exc


def load_person_map(path: Path) -> dict[int | str, Person]:
    """People keyed by id, for resolving task assignees."""
    return {person.id: person for person in load_records(path, Person) if person is not None}
