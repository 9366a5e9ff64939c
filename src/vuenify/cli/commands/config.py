# topmark:header:start
#
#   project      : Vuenify
#   file         : config.py
#   file_relpath : src/vuenify/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Vuenify `config` command group.

  * ``vuenify config defaults``: show the built-in default configuration.
  * ``vuenify config dump``: show the effective merged configuration.

Both print TOML that can be pasted into ``vuenify.toml`` (or, with
``--pyproject``, into ``pyproject.toml``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from vuenify.cli.config_resolver import resolve_config_from_click
from vuenify.cli.options import CONTEXT_SETTINGS, common_config_options, common_format_options
from vuenify.config.io import render_config_toml
from vuenify.config.logging import get_logger
from vuenify.config.model import Config

if TYPE_CHECKING:
    from vuenify.cli.console import ClickConsole
    from vuenify.config.logging import VuenifyLogger
    from vuenify.config.model import Preset

logger: VuenifyLogger = get_logger(__name__)

_PYPROJECT_HELP: str = "Render as a [tool.vuenify] table for pyproject.toml."


def _console() -> ClickConsole:
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    return ctx.obj["console"]


@click.group(
    name="config",
    help="Inspect Vuenify configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands.

    This group itself performs no action; use ``defaults`` or ``dump``.
    """


@config_command.command(
    name="defaults",
    help="Display the built-in default configuration as TOML.",
)
@click.option("--pyproject", "for_pyproject", is_flag=True, help=_PYPROJECT_HELP)
def config_defaults_command(for_pyproject: bool) -> None:
    """Print the defaults that apply when no config file is found.

    Args:
        for_pyproject (bool): Nest the output under ``[tool.vuenify]``.
    """
    _console().print(render_config_toml(Config(), for_pyproject=for_pyproject), nl=False)


@config_command.command(
    name="dump",
    help="Display the effective configuration (files + flags) as TOML.",
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_format_options
@click.option("--pyproject", "for_pyproject", is_flag=True, help=_PYPROJECT_HELP)
def config_dump_command(
    *,
    paths: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    preset: Preset | None,
    for_pyproject: bool,
    **format_flags: Any,
) -> None:
    """Print the configuration `check` would use for ``paths``.

    Args:
        paths (tuple[str, ...]): Optional paths used as the discovery anchor.
        config_paths (tuple[str, ...]): Extra config files (``--config``).
        no_config (bool): Skip project config discovery.
        preset (Preset | None): Preset to apply on top.
        for_pyproject (bool): Nest the output under ``[tool.vuenify]``.
        **format_flags (Any): Per-option formatting flags.
    """
    config: Config = resolve_config_from_click(
        paths=paths,
        config_paths=config_paths,
        no_config=no_config,
        preset=preset,
        flags=format_flags,
    )
    _console().print(render_config_toml(config, for_pyproject=for_pyproject), nl=False)
