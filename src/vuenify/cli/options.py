# topmark:header:start
#
#   project      : Vuenify
#   file         : options.py
#   file_relpath : src/vuenify/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Vuenify CLI.

This module centralizes reusable options (verbosity, color, config files and
the per-option formatting flags) and their resolution logic, so commands and
groups can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from vuenify.cli.cli_types import EnumChoiceParam
from vuenify.cli.errors import VuenifyUsageError
from vuenify.config.logging import TRACE_LEVEL, get_logger
from vuenify.config.model import (
    AttributeLayout,
    ClassLayout,
    DirectiveStyle,
    Preset,
    SameNameMode,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from vuenify.config.logging import VuenifyLogger

P = ParamSpec("P")
R = TypeVar("R")

logger: VuenifyLogger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level implied by ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: A `logging` level. ``-vvv`` is TRACE, ``-vv`` DEBUG, ``-v`` INFO,
        ``-q`` ERROR, and the default is WARNING.

    Raises:
        VuenifyUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise VuenifyUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from ``--color``.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected if None.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Honors ``--color`` first, then ``FORCE_COLOR`` and ``NO_COLOR``, and
        finally enables color only when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config`` options."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered project config files (only use defaults and --config).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def _tri_state_flag(name: str, help_text: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    # default=None keeps "not given" distinct from an explicit --no-<name>.
    dest: str = name.replace("-", "_")
    return click.option(f"--{name}/--no-{name}", dest, default=None, help=help_text)


def common_format_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add one flag per formatting option, plus ``--preset``.

    Every flag defaults to ``None`` so that only options given on the command
    line override the configuration files.
    """
    f = click.option(
        "--preset",
        "preset",
        type=EnumChoiceParam(Preset),
        default=None,
        help=f"Run only one group of passes ({', '.join(Preset.keys())}).",
    )(f)
    f = _tri_state_flag("sort-classes", "Sort class tokens alphabetically.")(f)
    f = _tri_state_flag("remove-duplicates", "Drop repeated class tokens.")(f)
    f = click.option(
        "--class-layout",
        "class_layout",
        type=EnumChoiceParam(ClassLayout),
        default=None,
        help=f"Class list layout ({', '.join(ClassLayout.keys())}).",
    )(f)
    f = _tri_state_flag("normalize-directives", "Rewrite directives to the configured style.")(f)
    f = click.option(
        "--directive-style",
        "directive_style",
        type=EnumChoiceParam(DirectiveStyle),
        default=None,
        help=f"Directive spelling ({', '.join(DirectiveStyle.keys())}).",
    )(f)
    f = click.option(
        "--same-name-mode",
        "same_name_mode",
        type=EnumChoiceParam(SameNameMode),
        default=None,
        help=f"Same-name binding policy ({', '.join(SameNameMode.keys())}).",
    )(f)
    f = _tri_state_flag("order-directives", "Reorder directives by priority.")(f)
    f = click.option(
        "--directive-priority",
        "directive_priority",
        metavar="NAMES",
        default=None,
        help="Comma-separated directive names in rank order (e.g. 'if,else,for').",
    )(f)
    f = _tri_state_flag("order-attributes", "Put valued attributes before boolean ones.")(f)
    f = click.option(
        "--attribute-layout",
        "attribute_layout",
        type=EnumChoiceParam(AttributeLayout),
        default=None,
        help=f"Attribute block layout ({', '.join(AttributeLayout.keys())}).",
    )(f)
    return f
