"""Shared test fixtures and configuration."""

import logging
import os
from pathlib import Path
import sys

import pytest


SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


# Override every setting so a developer's .env or shell never leaks into tests
TEST_ENV = {
    "TRACKER_SEARCH_LOG_LEVEL": "info",
    "TRACKER_SEARCH_LOG_JSON": "true",
    "TRACKER_SEARCH_WORD_SEPARATORS": "_-",
    "TRACKER_SEARCH_SPLIT_NAMES": "true",
    "TRACKER_SEARCH_FILTER_MARKER": "=",
}

for key, value in TEST_ENV.items():
    os.environ[key] = value

from tracker_search.config import get_settings
from tracker_search.domain.model import Asset, Entity, Episode, Person, Sequence, Shot, Task


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset settings env vars and the cached Settings before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def shots() -> list[Shot]:
    return [
        Shot(id="s1", name="SH010", sequence_name="SQ01", episode_name="E01"),
        Shot(id="s2", name="SH020", sequence_name="SQ01", episode_name="E01"),
        Shot(id="s3", name="SH010", sequence_name="SQ02", episode_name="E02"),
    ]


@pytest.fixture
def people() -> dict[str, Person]:
    return {
        "p1": Person(id="p1", first_name="John", last_name="Doe"),
        "p2": Person(id="p2", first_name="Jane", last_name="Smith"),
    }


@pytest.fixture
def tasks() -> list[Task]:
    return [
        Task(
            id="t1",
            entity_name="SH010",
            full_entity_name="E01 / SQ01 / SH010",
            task_type_name="Animation",
            task_status_short_name="wip",
            project_name="Big Buck",
            assignees=("p1",),
        ),
        Task(
            id="t2",
            entity_name="char_hero-main",
            full_entity_name="Characters / char_hero-main",
            task_type_name="Modeling",
            task_status_short_name="done",
            project_name="Big Buck",
            assignees=("p2", "p1"),
        ),
    ]


@pytest.fixture
def assets() -> list[Asset]:
    return [
        Asset(id="a1", name="hero_sword", asset_type_name="Props"),
        Asset(id="a2", name="hero-castle", asset_type_name="Environment Set"),
    ]


@pytest.fixture
def sequences() -> list[Sequence]:
    return [Sequence(id="q1", name="SQ01", episode_name="E01"), Sequence(id="q2", name="SQ02", episode_name="E02")]


@pytest.fixture
def episodes() -> list[Episode]:
    return [Episode(id="e1", name="E01"), Episode(id="e2", name="E02")]


@pytest.fixture
def named() -> list[Entity]:
    return [Entity(id=1, name="shot one"), Entity(id=2, name="shot two")]


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers added by configure_logging and restore the root level."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
