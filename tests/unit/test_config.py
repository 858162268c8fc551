from __future__ import annotations

from pydantic import ValidationError
import pytest

from tracker_search.config import Settings, get_settings


def test_defaults_from_test_environment() -> None:
    settings = Settings()

    assert settings.log_level == "info"
    assert settings.log_json is True
    assert settings.word_separators == "_-"
    assert settings.split_names is True
    assert settings.filter_marker == "="


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRACKER_SEARCH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TRACKER_SEARCH_SPLIT_NAMES", "false")
    monkeypatch.setenv("TRACKER_SEARCH_FILTER_MARKER", ":")

    settings = Settings()

    assert settings.log_level == "debug"
    assert settings.split_names is False
    assert settings.filter_marker == ":"


def test_unprefixed_variables_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")

    assert Settings().log_level == "info"


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(ValidationError, match="Unsupported log level"):
        Settings(log_level="loud")


@pytest.mark.parametrize("marker", ["", "=="])
def test_filter_marker_must_be_one_character(marker: str) -> None:
    with pytest.raises(ValidationError):
        Settings(filter_marker=marker)


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("TRACKER_SEARCH_LOG_LEVEL", "error")

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().log_level == "error"
