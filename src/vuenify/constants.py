# topmark:header:start
#
#   project      : Vuenify
#   file         : constants.py
#   file_relpath : src/vuenify/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Vuenify Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    VUENIFY_VERSION: str = get_version("vuenify")
except PackageNotFoundError:  # running from a source checkout without install
    VUENIFY_VERSION = "0.0.0"

PYPROJECT_TOML_NAME: str = "pyproject.toml"
VUENIFY_TOML_NAME: str = "vuenify.toml"

# Files picked up when a directory is given on the command line.
VUE_FILE_SUFFIX: str = ".vue"
