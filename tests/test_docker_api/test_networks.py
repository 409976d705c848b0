"""Тесты функций работы с сетями."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from docker.errors import APIError, NotFound

from docker_network_viz.docker_api import networks
from docker_network_viz.docker_api.client import DockerClientWrapper
from docker_network_viz.docker_api.exceptions import DockerAPIError
from docker_network_viz.docker_api.models import NetworkInfo


class FakeNetwork:
    def __init__(self, name: str, driver: str) -> None:
        self.attrs = {"Name": name, "Driver": driver, "Id": f"id-{name}"}


class FakeNetworks:
    def __init__(self, items: List[FakeNetwork], error: Exception | None = None) -> None:
        self.items = items
        self.error = error
        self.filters: Optional[Dict[str, Any]] = None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[FakeNetwork]:
        self.filters = filters
        if self.error:
            raise self.error
        return self.items

    def get(self, network_id: str) -> FakeNetwork:
        if self.error:
            raise self.error
        return FakeNetwork(network_id, "overlay")


class FakeRawClient:
    def __init__(self, network_api: FakeNetworks) -> None:
        self.networks = network_api


def make_client(network_api: FakeNetworks) -> DockerClientWrapper:
    return DockerClientWrapper(raw_client=FakeRawClient(network_api))


def test_list_networks_sorted_by_name() -> None:
    api = FakeNetworks([FakeNetwork("host", "host"), FakeNetwork("bridge", "bridge")])
    records = networks.list_networks(make_client(api))
    assert [record["Name"] for record in records] == ["bridge", "host"]
    assert api.filters is None


def test_list_networks_driver_filter() -> None:
    api = FakeNetworks([])
    networks.list_networks(make_client(api), drivers=["overlay", "bridge"])
    assert api.filters == {"driver": ["overlay", "bridge"]}


def test_list_networks_wraps_errors() -> None:
    api = FakeNetworks([], error=APIError("boom"))
    with pytest.raises(DockerAPIError, match="failed to list Docker networks"):
        networks.list_networks(make_client(api))


def test_inspect_network_by_name() -> None:
    attrs = networks.inspect_network(make_client(FakeNetworks([])), "frontend")
    assert attrs["Name"] == "frontend"
    assert attrs["Driver"] == "overlay"


def test_inspect_network_not_found() -> None:
    api = FakeNetworks([], error=NotFound("missing"))
    with pytest.raises(DockerAPIError, match="failed to inspect Docker network ghost"):
        networks.inspect_network(make_client(api), "ghost")


def test_convert_to_network_info_tolerates_missing_fields() -> None:
    assert networks.convert_to_network_info({"Name": "bridge", "Driver": "bridge"}) == NetworkInfo(
        "bridge", "bridge"
    )
    assert networks.convert_to_network_info({"Name": "odd", "Driver": None}) == NetworkInfo("odd", "")
    assert networks.convert_to_network_info({}) == NetworkInfo("", "")


def test_convert_networks_to_network_infos() -> None:
    infos = networks.convert_networks_to_network_infos(
        [{"Name": "a", "Driver": "bridge"}, {"Name": "b", "Driver": "overlay"}]
    )
    assert [info.name for info in infos] == ["a", "b"]
    assert infos[1].driver == "overlay"
