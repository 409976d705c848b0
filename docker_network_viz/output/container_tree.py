"""Дерево достижимости "контейнер -> сети -> соседи"."""

from __future__ import annotations

from typing import Dict, Optional, Sequence, TextIO

from docker_network_viz.docker_api.models import ContainerInfo
from docker_network_viz.output.reachability import reachable_containers
from docker_network_viz.output.style import PLAIN, Style
from docker_network_viz.output.symbols import TREE_END, TREE_SPACE, branch_glyphs


def print_container_tree(
    sink: TextIO,
    container: ContainerInfo,
    network_to_containers: Dict[str, Sequence[ContainerInfo]],
    style: Optional[Style] = None,
) -> None:
    """Печатает контейнер, его сети и контейнеры, доступные через каждую сеть.

    Пример::

        Container: api
        ├── Network: backend
        │   └── connects to:
        │       ├── postgres
        │       └── redis
        └── Network: frontend
            └── connects to:
                └── web_app
    """

    st = style or PLAIN
    sink.write(f"{st.label('Container:')} {st.container(container.name)}\n")

    networks = container.sorted_networks()
    for index, network in enumerate(networks):
        prefix, indent = branch_glyphs(index == len(networks) - 1)
        sink.write(f"{st.tree(prefix)} {st.label('Network:')} {st.network(network)}\n")
        # "connects to:" единственный потомок сети, поэтому всегда └──
        sink.write(f"{st.tree(indent)}{st.tree(TREE_END)} {st.label('connects to:')}\n")

        others = reachable_containers(container.name, network, network_to_containers)
        if not others:
            sink.write(f"{st.tree(indent)}{TREE_SPACE}{st.tree(TREE_END)} (none)\n")
            continue
        for other_index, other in enumerate(others):
            other_prefix, _ = branch_glyphs(other_index == len(others) - 1)
            sink.write(
                f"{st.tree(indent)}{TREE_SPACE}{st.tree(other_prefix)} {st.container(other)}\n"
            )
