# topmark:header:start
#
#   project      : Vuenify
#   file         : __init__.py
#   file_relpath : src/vuenify/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Vuenify package.

Vuenify normalizes the attribute blocks of Vue template start tags: it sorts
and deduplicates class lists, rewrites directives to a consistent shorthand or
longhand spelling, and orders directives and attributes. Edits are minimal
text replacements, so everything outside a changed attribute block is left
byte-for-byte intact.

Typical usage:

    >>> from vuenify import format_text
    >>> format_text('<template><input disabled type="text"></template>')
    '<template><input type="text" disabled></template>'
"""

from __future__ import annotations

from vuenify.config.model import Config, MutableConfig, resolve_config
from vuenify.constants import VUENIFY_VERSION
from vuenify.formatting.props import Replacement
from vuenify.template.transformer import apply_replacements, format_replacements, format_text

__version__: str = VUENIFY_VERSION

__all__ = [
    "Config",
    "MutableConfig",
    "Replacement",
    "__version__",
    "apply_replacements",
    "format_replacements",
    "format_text",
    "resolve_config",
]
