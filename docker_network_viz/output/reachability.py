"""Определение контейнеров, достижимых через общую сеть."""

from __future__ import annotations

from typing import Dict, List, Sequence

from docker_network_viz.docker_api.models import ContainerInfo


def reachable_containers(
    self_name: str,
    network: str,
    network_to_containers: Dict[str, Sequence[ContainerInfo]],
) -> List[str]:
    """Возвращает отсортированные имена остальных участников сети.

    Отсутствующая сеть считается пустой. Исключение "себя" идёт по имени,
    поэтому одноимённые контейнеры исключаются все.
    """

    return sorted(
        member.name
        for member in network_to_containers.get(network, ())
        if member.name != self_name
    )
