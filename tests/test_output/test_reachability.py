"""Тесты определения достижимых контейнеров."""

from __future__ import annotations

from typing import Dict, List

from docker_network_viz.docker_api.models import ContainerInfo
from docker_network_viz.output.reachability import reachable_containers


def _network_map() -> Dict[str, List[ContainerInfo]]:
    def member(name: str, *networks: str) -> ContainerInfo:
        return ContainerInfo(name, networks=list(networks))

    return {
        "frontend": [member("api", "frontend", "backend"), member("web_app", "frontend")],
        "backend": [
            member("redis", "backend"),
            member("api", "frontend", "backend"),
            member("postgres", "backend"),
        ],
        "solo": [member("lonely", "solo")],
    }


def test_other_members_are_sorted() -> None:
    assert reachable_containers("api", "backend", _network_map()) == ["postgres", "redis"]


def test_self_never_listed() -> None:
    network_map = _network_map()
    for network, members in network_map.items():
        for member in members:
            assert member.name not in reachable_containers(member.name, network, network_map)


def test_only_member_has_nobody_to_reach() -> None:
    assert reachable_containers("lonely", "solo", _network_map()) == []


def test_missing_network_or_empty_map() -> None:
    assert reachable_containers("api", "nope", _network_map()) == []
    assert reachable_containers("api", "frontend", {}) == []


def test_non_member_sees_everyone() -> None:
    assert reachable_containers("outsider", "frontend", _network_map()) == ["api", "web_app"]


def test_same_name_containers_are_all_excluded() -> None:
    network_map = {"net": [ContainerInfo("twin"), ContainerInfo("twin"), ContainerInfo("other")]}
    assert reachable_containers("twin", "net", network_map) == ["other"]
