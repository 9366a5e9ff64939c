# topmark:header:start
#
#   project      : Vuenify
#   file         : __init__.py
#   file_relpath : src/vuenify/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Vuenify.

Re-exports the configuration model so callers can write
``from vuenify.config import Config, MutableConfig``.
"""

from __future__ import annotations

from vuenify.config.model import (
    DEFAULT_DIRECTIVE_PRIORITY,
    AttributeLayout,
    ClassLayout,
    Config,
    DirectiveStyle,
    MutableConfig,
    Preset,
    SameNameMode,
    preset_overrides,
    resolve_config,
)

__all__ = [
    "DEFAULT_DIRECTIVE_PRIORITY",
    "AttributeLayout",
    "ClassLayout",
    "Config",
    "DirectiveStyle",
    "MutableConfig",
    "Preset",
    "SameNameMode",
    "preset_overrides",
    "resolve_config",
]
