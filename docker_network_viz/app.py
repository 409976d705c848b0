"""Сборка вывода: фильтры, удаление алиасов и две секции деревьев."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, TextIO

from docker_network_viz.docker_api.data_provider import Topology
from docker_network_viz.docker_api.models import ContainerInfo, NetworkInfo
from docker_network_viz.output.container_tree import print_container_tree
from docker_network_viz.output.network_tree import print_network_tree
from docker_network_viz.output.style import PLAIN, Style

LOGGER = logging.getLogger(__name__)

NETWORKS_HEADER = "=== Networks ==="
CONTAINERS_HEADER = "=== Containers (Reachability) ==="


class TopologySource(Protocol):
    """Источник снимка топологии (DockerDataProvider или заглушка в тестах)."""

    def fetch_topology(self) -> Topology:  # pragma: no cover - протокол
        ...


@dataclass(frozen=True)
class VisualizeOptions:
    """Фильтры вывода. Пустая строка означает "без фильтра"."""

    only_network: str = ""
    container: str = ""
    no_aliases: bool = False


def remove_aliases_from_containers(containers: Iterable[ContainerInfo]) -> List[ContainerInfo]:
    """Возвращает копии контейнеров без алиасов; исходные объекты не меняются."""

    return [container.without_aliases() for container in containers]


def print_visualization(
    sink: TextIO,
    networks: Sequence[NetworkInfo],
    container_map: Dict[str, ContainerInfo],
    network_to_containers: Dict[str, List[ContainerInfo]],
    options: VisualizeOptions = VisualizeOptions(),
    style: Optional[Style] = None,
) -> None:
    """Печатает секцию сетей и секцию достижимости контейнеров.

    Сети выводятся в порядке ``networks``; сеть без участников получает
    пустой список. Контейнеры выводятся по имени.
    """

    st = style or PLAIN

    sink.write(f"{NETWORKS_HEADER}\n")
    for network in networks:
        if options.only_network and network.name != options.only_network:
            continue
        members: List[ContainerInfo] = network_to_containers.get(network.name, [])
        if options.no_aliases:
            members = remove_aliases_from_containers(members)
        print_network_tree(sink, network, members, st)
        sink.write("\n")

    sink.write(f"{CONTAINERS_HEADER}\n")
    for name in sorted(container_map):
        if options.container and name != options.container:
            continue
        print_container_tree(sink, container_map[name], network_to_containers, st)
        sink.write("\n")


def run_visualize(
    source: TopologySource,
    sink: TextIO,
    options: VisualizeOptions = VisualizeOptions(),
    style: Optional[Style] = None,
) -> None:
    """Получает топологию и печатает её.

    Ошибки Docker пробрасываются вызывающему до начала вывода.
    """

    topology = source.fetch_topology()
    LOGGER.debug(
        "Rendering %d networks, %d containers (only_network=%r, container=%r, no_aliases=%s)",
        len(topology.networks),
        len(topology.container_map),
        options.only_network,
        options.container,
        options.no_aliases,
    )
    print_visualization(
        sink,
        topology.networks,
        topology.container_map,
        topology.network_to_containers,
        options,
        style,
    )
