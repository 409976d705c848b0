"""Точка входа CLI docker-network-viz."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
from click.core import ParameterSource

from docker_network_viz import __version__
from docker_network_viz.app import VisualizeOptions, run_visualize
from docker_network_viz.docker_api.data_provider import DockerDataProvider
from docker_network_viz.docker_api.exceptions import DockerAPIError
from docker_network_viz.output.style import style_for_stream
from docker_network_viz.settings.exceptions import SettingsError
from docker_network_viz.settings.groups import LOG_LEVELS
from docker_network_viz.settings.registry import SettingsRegistry
from docker_network_viz.settings.schemas import env_var_name
from docker_network_viz.utils.logger import configure_logging

LOGGER = logging.getLogger(__name__)

APP_NAME = "docker-network-viz"
APP_DESCRIPTION = "Visualize Docker network topology in a tree-style format"

# имя параметра click -> плоский ключ настроек
_OVERRIDABLE = {
    "no_color": "no-color",
    "host": "host",
    "timeout": "timeout",
    "log_level": "log-level",
    "only_network": "only-network",
    "container": "container",
    "no_aliases": "no-aliases",
}


def initialize_settings(config_path: Optional[Path], overrides: Dict[str, Any]) -> SettingsRegistry:
    """Загружает YAML-конфигурацию и применяет поверх неё флаги и DNV_*."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    registry.apply_overrides(overrides)
    return registry


def setup_logging_from_settings(settings: SettingsRegistry) -> None:
    """Настраивает логирование в соответствии с группой logging."""

    logging_settings = settings.get_group("logging")
    log_file = logging_settings.get("file")
    configure_logging(
        Path(log_file).expanduser() if log_file else None,
        level_name=logging_settings.get("level"),
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
    )


def _explicit_values(ctx: click.Context) -> Dict[str, Any]:
    """Значения, заданные флагом или переменной окружения (не по умолчанию)."""

    explicit: Dict[str, Any] = {}
    for param_name, flat_key in _OVERRIDABLE.items():
        if param_name not in ctx.params:
            continue
        source = ctx.get_parameter_source(param_name)
        if source in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT):
            explicit[flat_key] = ctx.params[param_name]
    return explicit


def filter_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Флаги фильтрации, общие для корневой команды и visualize."""

    func = click.option(
        "--no-aliases",
        is_flag=True,
        envvar=env_var_name("no-aliases"),
        help="hide container aliases in the output",
    )(func)
    func = click.option(
        "--container",
        envvar=env_var_name("container"),
        help="show only the specified container's connectivity",
    )(func)
    func = click.option(
        "--only-network",
        envvar=env_var_name("only-network"),
        help="show only the specified network",
    )(func)
    return func


def _visualize(ctx: click.Context) -> None:
    settings: SettingsRegistry = ctx.obj
    try:
        settings.apply_overrides(_explicit_values(ctx))
    except SettingsError as exc:
        raise click.ClickException(exc.message) from exc

    display = settings.get_group("display")
    options = VisualizeOptions(
        only_network=display.get("only_network"),
        container=display.get("container"),
        no_aliases=display.get("no_aliases"),
    )
    sink = sys.stdout
    style = style_for_stream(sink, no_color=display.get("no_color"))

    try:
        with DockerDataProvider(settings) as provider:
            run_visualize(provider, sink, options, style)
    except DockerAPIError as exc:
        LOGGER.debug("Visualization aborted: %s", exc)
        raise click.ClickException(str(exc)) from exc


@click.group(
    name=APP_NAME,
    invoke_without_command=True,
    help=(
        "docker-network-viz is a CLI tool for visualizing Docker network topology.\n\n"
        "It shows networks with their connected containers and aliases, and "
        "container reachability across networks."
    ),
    short_help=APP_DESCRIPTION,
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="config file (default is ./.docker-network-viz.yaml or $HOME/.docker-network-viz.yaml)",
)
@click.option("--no-color", is_flag=True, envvar=env_var_name("no-color"), help="disable colored output")
@click.option("--host", envvar=env_var_name("host"), help="Docker daemon address (default: DOCKER_HOST)")
@click.option(
    "--timeout",
    type=click.IntRange(0, 300),
    envvar=env_var_name("timeout"),
    help="connection timeout in seconds, 0 disables it",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar=env_var_name("log-level"),
    help="logging level for stderr output",
)
@filter_options
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], **_: Any) -> None:
    try:
        settings = initialize_settings(config_path, _explicit_values(ctx))
    except SettingsError as exc:
        raise click.ClickException(exc.message) from exc
    setup_logging_from_settings(settings)
    LOGGER.debug("Using config file %s", settings.config_path)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        _visualize(ctx)


@cli.command()
@filter_options
@click.pass_context
def visualize(ctx: click.Context, **_: Any) -> None:
    """Display Docker network topology.

    \b
    Two views are printed:
    1. Network tree: each network with its connected containers and aliases
    2. Container reachability: each container with its networks and the
       other containers it can reach through them

    \b
    Examples:
      docker-network-viz visualize
      docker-network-viz visualize --only-network bridge
      docker-network-viz visualize --container web_app
      docker-network-viz visualize --no-aliases
    """

    _visualize(ctx)


def main() -> None:
    """Основная точка входа для console_scripts."""

    cli(prog_name=APP_NAME)


if __name__ == "__main__":
    main()
