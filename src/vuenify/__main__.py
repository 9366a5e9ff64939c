# topmark:header:start
#
#   project      : Vuenify
#   file         : __main__.py
#   file_relpath : src/vuenify/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Vuenify via ``python -m vuenify``.

Equivalent to running the ``vuenify`` console script.

Examples:
    Check every component under ``src``::

        python -m vuenify check src
"""

from __future__ import annotations

from vuenify.cli.main import cli

if __name__ == "__main__":
    cli()
