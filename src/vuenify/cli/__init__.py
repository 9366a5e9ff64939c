# topmark:header:start
#
#   project      : Vuenify
#   file         : __init__.py
#   file_relpath : src/vuenify/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Vuenify CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    vuenify = "vuenify.cli.main:cli"

All subcommands live in `vuenify.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
