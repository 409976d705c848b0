"""Тесты групп настроек."""

from __future__ import annotations

import pytest

from docker_network_viz.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from docker_network_viz.settings.groups import DisplaySettings, DockerSettings, LoggingSettings


def test_display_defaults() -> None:
    settings = DisplaySettings()
    assert settings.to_dict() == {
        "no_color": False,
        "only_network": "",
        "container": "",
        "no_aliases": False,
    }


def test_display_filter_names() -> None:
    settings = DisplaySettings()
    settings.set("only_network", "my-net_1.local")
    settings.set("container", "")
    settings.set("container", "any name /at all")
    assert settings.get("container") == "any name /at all"
    with pytest.raises(SettingsValidationError):
        settings.set("container", 42)
    with pytest.raises(SettingsValidationError):
        settings.set("no_color", "yes")


def test_docker_timeout_range() -> None:
    settings = DockerSettings()
    settings.set("connection_timeout_sec", 0)
    settings.set("connection_timeout_sec", 300)
    with pytest.raises(SettingsValidationError):
        settings.set("connection_timeout_sec", 301)
    with pytest.raises(SettingsValidationError):
        settings.set("connection_timeout_sec", True)


def test_logging_level_case_insensitive() -> None:
    settings = LoggingSettings()
    settings.set("level", "debug")
    with pytest.raises(SettingsValidationError):
        settings.set("level", "TRACE")
    with pytest.raises(SettingsValidationError):
        settings.set("max_archived_files", 0)


def test_unknown_key() -> None:
    with pytest.raises(SettingsNotFoundError):
        DockerSettings().get("socket")
    with pytest.raises(SettingsNotFoundError):
        DockerSettings().set("socket", "x")


def test_update_and_reset() -> None:
    settings = DisplaySettings()
    settings.update({"no_aliases": True, "container": "web"})
    assert settings.get("container") == "web"
    settings.reset_to_defaults()
    assert settings.get("container") == ""
