# topmark:header:start
#
#   project      : Vuenify
#   file         : errors.py
#   file_relpath : src/vuenify/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Vuenify library layer.

The formatting core is total for well-formed input and raises nothing. These
exceptions cover the two places where a caller can break a contract: invalid
configuration values, and replacement lists whose spans overlap.

CLI-facing exceptions (with exit codes) live in `vuenify.cli.errors`.
"""

from __future__ import annotations


class VuenifyError(Exception):
    """Base class for all Vuenify library errors."""


class ConfigError(VuenifyError):
    """Raised when a configuration value is missing, malformed or of the wrong type.

    Attributes:
        key (str | None): The offending option name, when known.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class OverlappingReplacementsError(VuenifyError):
    """Raised when two replacements cover overlapping source ranges."""
