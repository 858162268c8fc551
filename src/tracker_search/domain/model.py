"""Production-tracking records carried by the prefix index.

Value objects are immutable (frozen=True). Extra payload keys are ignored so
raw API responses can be validated as-is. Only ``id`` matters to the index;
the remaining fields feed word extraction.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Record(BaseModel):
    """Base for anything indexable: a stable identity and nothing else."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | str


def _blank_if_null(value: Any) -> Any:
    # exports send null for unset text; it indexes as nothing
    return "" if value is None else value


class Person(Record):
    first_name: str = ""
    last_name: str = ""

    blank_null_names = field_validator("first_name", "last_name", mode="before")(_blank_if_null)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Entity(Record):
    """Named record indexed by the generic name index."""

    name: str | None = None


class Task(Record):
    """Task as listed in a production's task views.

    ``full_entity_name`` includes the parent hierarchy (e.g. ``E01 / SQ01 / SH010``)
    while ``entity_name`` is the short form shown to supervisors.
    """

    entity_name: str = ""
    full_entity_name: str = ""
    task_type_name: str | None = None
    task_status_short_name: str | None = None
    project_name: str | None = None
    assignees: tuple[int | str, ...] = Field(default_factory=tuple)

    blank_null_names = field_validator("entity_name", "full_entity_name", mode="before")(_blank_if_null)

    @field_validator("assignees", mode="before")
    @classmethod
    def _null_assignees(cls, value: Any) -> Any:
        return () if value is None else value


class Asset(Entity):
    asset_type_name: str = ""

    blank_null_type_name = field_validator("asset_type_name", mode="before")(_blank_if_null)


class Shot(Entity):
    sequence_name: str | None = None
    episode_name: str | None = None


class Sequence(Entity):
    episode_name: str | None = None


class Episode(Entity):
    pass
