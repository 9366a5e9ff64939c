# topmark:header:start
#
#   project      : Vuenify
#   file         : version.py
#   file_relpath : src/vuenify/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Vuenify `version` command.

Prints the current Vuenify version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vuenify.constants import VUENIFY_VERSION

if TYPE_CHECKING:
    from vuenify.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Vuenify.",
)
def version_command() -> None:
    """Show the current version of Vuenify."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if int(ctx.obj.get("verbosity_level", 0)) > 0:
        console.print(console.styled("Vuenify version:", bold=True, underline=True))
        console.print(f"    {console.styled(VUENIFY_VERSION, bold=True)}")
    else:
        console.print(console.styled(VUENIFY_VERSION, bold=True))
