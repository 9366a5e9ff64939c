# topmark:header:start
#
#   project      : Vuenify
#   file         : __init__.py
#   file_relpath : src/vuenify/formatting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute-block formatting core.

Given one element's props (with absolute spans) and a resolved `Config`,
`rebuild_attribute_block` returns at most one `Replacement`. The core does no
I/O, keeps no state, and never raises for well-formed props.
"""

from __future__ import annotations

from vuenify.formatting.props import (
    Attribute,
    Directive,
    Element,
    Prop,
    Replacement,
    SourceSpan,
    with_source,
)
from vuenify.formatting.rebuilder import rebuild_attribute_block, rebuild_element

__all__ = [
    "Attribute",
    "Directive",
    "Element",
    "Prop",
    "Replacement",
    "SourceSpan",
    "rebuild_attribute_block",
    "rebuild_element",
    "with_source",
]
