# topmark:header:start
#
#   project      : Vuenify
#   file         : rebuilder.py
#   file_relpath : src/vuenify/formatting/rebuilder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute-block rebuilder: one element's props in, at most one replacement out.

Pipeline (pure, total, no state between calls):

1. Per-prop rewrite: class lists and directive spelling. Rewritten props are
   new objects; untouched props stay the very same objects.
2. Directive reordering by priority (if enabled).
3. Attribute reordering, valued before boolean (if enabled).
4. If nothing was rewritten and nothing moved, emit nothing.
5. Otherwise join the rendered props with the layout separator and replace
   ``[first.start, last.end)`` of the *original* list.

The covered range depends only on the original list, so reordering inside the
block never widens or narrows the edit, and blocks of different elements never
overlap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vuenify.config.logging import get_logger
from vuenify.formatting.classes import normalize_class_attribute
from vuenify.formatting.directives import normalize_directive
from vuenify.formatting.layout import block_separator
from vuenify.formatting.ordering import moved, order_attributes, order_directives
from vuenify.formatting.props import Attribute, Directive, Replacement, with_source

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vuenify.config.logging import VuenifyLogger
    from vuenify.config.model import Config
    from vuenify.formatting.props import Element, Prop

logger: VuenifyLogger = get_logger(__name__)


def rewrite_prop(prop: Prop, config: Config) -> Prop:
    """Return ``prop`` itself when nothing changes, else a copy with new source text."""
    new_source: str | None
    match prop:
        case Attribute():
            new_source = normalize_class_attribute(prop, config)
        case Directive():
            new_source = (
                normalize_directive(prop, config.directive_style, config.same_name_mode)
                if config.normalize_directives
                else None
            )
    if new_source is None:
        return prop
    return with_source(prop, new_source)


def rebuild_attribute_block(
    props: Sequence[Prop],
    config: Config,
    document: str,
) -> Replacement | None:
    """Compute the replacement for one element's attribute block.

    Args:
        props (Sequence[Prop]): The element's props in original order.
        config (Config): Resolved configuration.
        document (str): The full document the prop spans point into.

    Returns:
        Replacement | None: One replacement spanning the whole block, or None
        when the block is already normalized.
    """
    if not props:
        return None

    current: list[Prop] = [rewrite_prop(p, config) for p in props]
    changed: bool = moved(props, current)

    if config.order_directives:
        reordered = order_directives(current, config.directive_priority)
        changed = changed or moved(current, reordered)
        current = reordered

    if config.order_attributes:
        reordered = order_attributes(current)
        changed = changed or moved(current, reordered)
        current = reordered

    if not changed:
        return None

    start: int = props[0].span.start
    end: int = props[-1].span.end
    separator: str = block_separator(props, document, config.attribute_layout)
    new_text: str = separator.join(p.source for p in current)

    if new_text == document[start:end]:
        logger.trace("Block at %d rebuilt to identical text; skipping", start)
        return None

    logger.debug("Rewriting attribute block [%d, %d)", start, end)
    return Replacement(start=start, end=end, new_text=new_text)


def rebuild_element(element: Element, config: Config, document: str) -> Replacement | None:
    """Convenience wrapper around `rebuild_attribute_block` for an `Element`."""
    replacement = rebuild_attribute_block(element.props, config, document)
    if replacement is None:
        logger.trace("<%s>: no change", element.tag)
    return replacement
