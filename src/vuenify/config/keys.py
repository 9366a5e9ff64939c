# topmark:header:start
#
#   project      : Vuenify
#   file         : keys.py
#   file_relpath : src/vuenify/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Vuenify configuration.

This module defines the authoritative string constants used when reading,
writing, and validating Vuenify configuration from TOML sources
(``vuenify.toml`` and ``[tool.vuenify]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - The camelCase spellings used by editor settings are accepted as aliases
      when building a config from a plain mapping (see `OPTION_ALIASES`).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Vuenify configuration.

    The ordering of constants mirrors `Config` so defaults, parsing and the
    rendered TOML stay aligned.
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [tool.vuenify] inside pyproject.toml
    PYPROJECT_TOOL_TABLE: Final[str] = "tool"
    PYPROJECT_SECTION: Final[str] = "vuenify"

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_SORT_CLASSES: Final[str] = "sort_classes"
    KEY_REMOVE_DUPLICATES: Final[str] = "remove_duplicates"
    KEY_CLASS_LAYOUT: Final[str] = "class_layout"
    KEY_NORMALIZE_DIRECTIVES: Final[str] = "normalize_directives"
    KEY_DIRECTIVE_STYLE: Final[str] = "directive_style"
    KEY_SAME_NAME_MODE: Final[str] = "same_name_mode"
    KEY_ORDER_DIRECTIVES: Final[str] = "order_directives"
    KEY_DIRECTIVE_PRIORITY: Final[str] = "directive_priority"
    KEY_ORDER_ATTRIBUTES: Final[str] = "order_attributes"
    KEY_ATTRIBUTE_LAYOUT: Final[str] = "attribute_layout"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({KEY_ROOT, SECTION_FORMAT})

    ALLOWED_FORMAT_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_SORT_CLASSES,
            KEY_REMOVE_DUPLICATES,
            KEY_CLASS_LAYOUT,
            KEY_NORMALIZE_DIRECTIVES,
            KEY_DIRECTIVE_STYLE,
            KEY_SAME_NAME_MODE,
            KEY_ORDER_DIRECTIVES,
            KEY_DIRECTIVE_PRIORITY,
            KEY_ORDER_ATTRIBUTES,
            KEY_ATTRIBUTE_LAYOUT,
        }
    )


# Editor-setting spellings (camelCase) mapped onto the TOML keys.
OPTION_ALIASES: Final[dict[str, str]] = {
    "sortClasses": Toml.KEY_SORT_CLASSES,
    "removeDuplicates": Toml.KEY_REMOVE_DUPLICATES,
    "classLayout": Toml.KEY_CLASS_LAYOUT,
    "normalizeDirectives": Toml.KEY_NORMALIZE_DIRECTIVES,
    "directiveStyle": Toml.KEY_DIRECTIVE_STYLE,
    "sameNameMode": Toml.KEY_SAME_NAME_MODE,
    "orderDirectives": Toml.KEY_ORDER_DIRECTIVES,
    "directivePriority": Toml.KEY_DIRECTIVE_PRIORITY,
    "directiveOrder": Toml.KEY_DIRECTIVE_PRIORITY,
    "orderAttributes": Toml.KEY_ORDER_ATTRIBUTES,
    "attributeLayout": Toml.KEY_ATTRIBUTE_LAYOUT,
}
