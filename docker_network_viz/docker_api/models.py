"""Упрощённые структуры данных для описания контейнеров и сетей Docker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class ContainerInfo:
    """Контейнер с его алиасами и сетями, в которых он состоит.

    Списки заполняются только через add_alias/add_network, поэтому дубликатов
    в них не бывает. Порядок вставки сохраняется, отсортированные копии
    возвращают sorted_aliases/sorted_networks.
    """

    name: str  # имя без ведущего "/"
    aliases: List[str] = field(default_factory=list)
    networks: List[str] = field(default_factory=list)

    def add_alias(self, alias: str) -> bool:
        """Добавляет алиас, если его ещё нет. Возвращает True при добавлении."""

        if alias in self.aliases:
            return False
        self.aliases.append(alias)
        return True

    def add_network(self, network: str) -> bool:
        """Добавляет сеть, если её ещё нет. Возвращает True при добавлении."""

        if network in self.networks:
            return False
        self.networks.append(network)
        return True

    def has_network(self, network: str) -> bool:
        return network in self.networks

    def has_alias(self, alias: str) -> bool:
        return alias in self.aliases

    def sorted_networks(self) -> List[str]:
        """Возвращает новый отсортированный список сетей."""

        return sorted(self.networks)

    def sorted_aliases(self) -> List[str]:
        """Возвращает новый отсортированный список алиасов."""

        return sorted(self.aliases)

    def network_count(self) -> int:
        return len(self.networks)

    def alias_count(self) -> int:
        return len(self.aliases)

    def clone(self) -> "ContainerInfo":
        """Создаёт независимую копию (изменения копии не затрагивают оригинал)."""

        return ContainerInfo(
            name=self.name,
            aliases=list(self.aliases),
            networks=list(self.networks),
        )

    def without_aliases(self) -> "ContainerInfo":
        """Копия с тем же именем и сетями, но без алиасов."""

        return ContainerInfo(name=self.name, aliases=[], networks=list(self.networks))


@dataclass(frozen=True, slots=True)
class NetworkInfo:
    """Минимальное представление сети: имя и драйвер."""

    name: str
    driver: str = ""
