# topmark:header:start
#
#   project      : Vuenify
#   file         : classes.py
#   file_relpath : src/vuenify/formatting/classes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class list normalization for static ``class`` attributes.

Deduplication and sorting are independent toggles. Deduplication keeps the
first occurrence of each token (exact, case-sensitive match); sorting uses
code point order, never the locale.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from vuenify.config.logging import get_logger
from vuenify.formatting.layout import class_line_break

if TYPE_CHECKING:
    from vuenify.config.logging import VuenifyLogger
    from vuenify.config.model import Config
    from vuenify.formatting.props import Attribute

logger: VuenifyLogger = get_logger(__name__)

CLASS_ATTRIBUTE: Final[str] = "class"
DEFAULT_QUOTE: Final[str] = '"'


def normalize_class_tokens(
    tokens: list[str],
    *,
    sort_classes: bool,
    remove_duplicates: bool,
) -> list[str]:
    """Apply deduplication and/or sorting to a token list.

    Args:
        tokens (list[str]): Class tokens in source order.
        sort_classes (bool): Sort by code point order.
        remove_duplicates (bool): Drop repeated tokens, keeping the first occurrence.

    Returns:
        list[str]: The processed tokens (a new list).
    """
    processed: list[str] = list(tokens)
    if remove_duplicates:
        processed = list(dict.fromkeys(processed))
    if sort_classes:
        processed = sorted(processed)
    return processed


def normalize_class_attribute(attr: Attribute, config: Config) -> str | None:
    """Return the rebuilt text for a ``class`` attribute, or None if unchanged.

    Args:
        attr (Attribute): The attribute; anything but a non-empty ``class`` is ignored.
        config (Config): Resolved configuration.

    Returns:
        str | None: The new attribute text, or None when nothing would change.
    """
    if attr.name != CLASS_ATTRIBUTE or not attr.value:
        return None
    if not (config.sort_classes or config.remove_duplicates):
        return None

    tokens: list[str] = attr.value.split()
    if not tokens:
        return None

    processed: list[str] = normalize_class_tokens(
        tokens,
        sort_classes=config.sort_classes,
        remove_duplicates=config.remove_duplicates,
    )

    line_break = class_line_break(attr.value, config.class_layout)
    value: str = (line_break.joiner if line_break else " ").join(processed)

    quote: str = attr.quote or DEFAULT_QUOTE
    rebuilt: str = f"{attr.name}={quote}{value}{quote}"
    if rebuilt == attr.source:
        return None

    logger.trace("class rewrite at %d: %r -> %r", attr.span.start, attr.source, rebuilt)
    return rebuilt
