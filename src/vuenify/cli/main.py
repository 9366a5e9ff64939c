# topmark:header:start
#
#   project      : Vuenify
#   file         : main.py
#   file_relpath : src/vuenify/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Vuenify CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` so every subcommand shares the same console and logging setup.
"""

from __future__ import annotations

import click

from vuenify.cli.commands.check import check_command
from vuenify.cli.commands.config import config_command
from vuenify.cli.commands.version import version_command
from vuenify.cli.console import ClickConsole
from vuenify.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from vuenify.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    cli_level: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose
    ctx.obj["quiet"] = quiet > 0

    # VUENIFY_LOG_LEVEL wins; -v/-q only matter when it is unset.
    log_level: int | None = resolve_env_log_level()
    if log_level is None and (verbose or quiet):
        log_level = cli_level
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Vuenify: normalize class lists, directives and attribute order in Vue templates.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Vuenify CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'vuenify check [PATHS...]' to check Vue templates.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
