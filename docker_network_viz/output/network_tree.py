"""Дерево "сеть -> контейнеры -> алиасы"."""

from __future__ import annotations

from typing import Optional, Sequence, TextIO

from docker_network_viz.docker_api.models import ContainerInfo, NetworkInfo
from docker_network_viz.output.style import PLAIN, Style
from docker_network_viz.output.symbols import TREE_END, branch_glyphs


def print_network_tree(
    sink: TextIO,
    network: NetworkInfo,
    containers: Sequence[ContainerInfo],
    style: Optional[Style] = None,
) -> None:
    """Печатает сеть, её контейнеры (по имени) и их алиасы (по алфавиту).

    Пример::

        Network: frontend (bridge)
        ├── api
        │   └── alias: api
        └── web_app
            ├── alias: web
            └── alias: web.local
    """

    st = style or PLAIN
    sink.write(f"{st.label('Network:')} {st.network(network.name)} ({network.driver})\n")

    if not containers:
        sink.write(f"{st.tree(TREE_END)} (no containers)\n")
        return

    ordered = sorted(containers, key=lambda item: item.name)
    for index, container in enumerate(ordered):
        prefix, indent = branch_glyphs(index == len(ordered) - 1)
        sink.write(f"{st.tree(prefix)} {st.container(container.name)}\n")

        aliases = container.sorted_aliases()
        for alias_index, alias in enumerate(aliases):
            alias_prefix, _ = branch_glyphs(alias_index == len(aliases) - 1)
            sink.write(
                f"{st.tree(indent)}{st.tree(alias_prefix)} {st.label('alias:')} {st.alias(alias)}\n"
            )
