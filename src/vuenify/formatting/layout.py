# topmark:header:start
#
#   project      : Vuenify
#   file         : layout.py
#   file_relpath : src/vuenify/formatting/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whitespace decisions for rebuilt attribute blocks and class values.

Both decisions are derived from the original source text only, never from
the rewritten props, so they do not drift as the block is reordered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from vuenify.config.model import AttributeLayout, ClassLayout

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vuenify.formatting.props import Prop

INLINE_SEPARATOR: Final[str] = " "

_FIRST_INDENT_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n([ \t]*)")


def block_separator(props: Sequence[Prop], document: str, layout: AttributeLayout) -> str:
    """Return the separator used to join a rebuilt attribute block.

    In ``preserve`` layout, the gap between the first and second original prop
    is reused verbatim when it spans a line break. Every other case joins with
    a single space.

    Args:
        props (Sequence[Prop]): The *original* prop list (before reordering).
        document (str): The full document the spans point into.
        layout (AttributeLayout): Configured layout policy.

    Returns:
        str: The join separator.
    """
    if layout is not AttributeLayout.PRESERVE or len(props) < 2:
        return INLINE_SEPARATOR
    gap: str = document[props[0].span.end : props[1].span.start]
    if "\n" in gap and not gap.strip():
        return gap
    return INLINE_SEPARATOR


@dataclass(frozen=True, slots=True)
class ClassLineBreak:
    """How to break a multi-line class value: newline sequence plus indentation."""

    newline: str
    indent: str

    @property
    def joiner(self) -> str:
        return f"{self.newline}{self.indent}"


def class_line_break(original_value: str, layout: ClassLayout) -> ClassLineBreak | None:
    """Return the line break to reuse for a class value, or None for single-line output.

    Only ``preserve`` layout keeps multiple lines, and only if the original value
    already contained one. The indentation is the horizontal whitespace that
    follows the first line break in the original value.
    """
    if layout is not ClassLayout.PRESERVE:
        return None
    match = _FIRST_INDENT_RE.search(original_value)
    if match is None:
        return None
    newline: str = "\r\n" if match.group(0).startswith("\r") else "\n"
    return ClassLineBreak(newline=newline, indent=match.group(1))
