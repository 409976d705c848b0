"""Тесты обёртки DockerClientWrapper."""

from __future__ import annotations

from typing import Any, Dict

import pytest
from docker.errors import DockerException

from docker_network_viz.docker_api import client as client_module
from docker_network_viz.docker_api.client import DockerClientWrapper
from docker_network_viz.docker_api.exceptions import DockerAPIError


class FakeRawClient:
    def __init__(self, ping_error: Exception | None = None) -> None:
        self.ping_error = ping_error
        self.closed = False

    def ping(self) -> bool:
        if self.ping_error:
            raise self.ping_error
        return True

    def close(self) -> None:
        self.closed = True


def test_raw_client_is_used_as_is() -> None:
    raw = FakeRawClient()
    wrapper = DockerClientWrapper(raw_client=raw)
    assert wrapper.get_raw_client() is raw


def test_ping_success() -> None:
    DockerClientWrapper(raw_client=FakeRawClient()).ping()


def test_ping_failure_is_wrapped() -> None:
    wrapper = DockerClientWrapper(raw_client=FakeRawClient(DockerException("refused")))
    with pytest.raises(DockerAPIError, match="failed to ping Docker daemon: refused"):
        wrapper.ping()


def test_context_manager_closes_client() -> None:
    raw = FakeRawClient()
    with DockerClientWrapper(raw_client=raw) as wrapper:
        assert wrapper.get_raw_client() is raw
    assert raw.closed


def test_from_env_used_without_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: Dict[str, Any] = {}
    raw = FakeRawClient()

    def fake_from_env(**kwargs: Any) -> FakeRawClient:
        calls.update(kwargs)
        return raw

    monkeypatch.setattr(client_module.docker, "from_env", fake_from_env)
    wrapper = DockerClientWrapper(timeout=7)
    assert wrapper.get_raw_client() is raw
    assert calls == {"timeout": 7}


def test_base_url_creates_docker_client(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: Dict[str, Any] = {}

    def fake_client(**kwargs: Any) -> FakeRawClient:
        calls.update(kwargs)
        return FakeRawClient()

    monkeypatch.setattr(client_module.docker, "DockerClient", fake_client)
    DockerClientWrapper("tcp://10.0.0.1:2375")
    assert calls["base_url"] == "tcp://10.0.0.1:2375"
    assert "timeout" not in calls


def test_init_failure_is_wrapped(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    def broken_from_env(**kwargs: Any) -> None:
        raise DockerException("Error while fetching server API version")

    monkeypatch.setattr(client_module.docker, "from_env", broken_from_env)
    caplog.set_level("ERROR")
    with pytest.raises(DockerAPIError, match="failed to create Docker client"):
        DockerClientWrapper()
    assert "environment" in caplog.text
