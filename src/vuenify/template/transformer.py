# topmark:header:start
#
#   project      : Vuenify
#   file         : transformer.py
#   file_relpath : src/vuenify/template/transformer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document-level formatting: locate, scan, rebuild, apply.

`format_replacements` is the pure entry point. It never mutates its input and
returns edits in document order, one per changed element, with spans that
point into the original text. `apply_replacements` splices them in, and
`format_text` does both in one call.

Example:
    >>> format_text('<template><div class="b a"></div></template>')
    '<template><div class="a b"></div></template>'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vuenify.config.logging import get_logger
from vuenify.config.model import Config, resolve_config
from vuenify.core.errors import OverlappingReplacementsError
from vuenify.formatting.rebuilder import rebuild_element
from vuenify.template.scanner import scan_elements
from vuenify.template.sfc import find_template_block, whole_document_block

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from vuenify.config.logging import VuenifyLogger
    from vuenify.config.model import MutableConfig
    from vuenify.formatting.props import Replacement
    from vuenify.template.sfc import TemplateBlock

logger: VuenifyLogger = get_logger(__name__)


def _as_config(config: Config | MutableConfig | Mapping[str, Any] | None) -> Config:
    if isinstance(config, Config):
        return config
    return resolve_config(config)


def collect_replacements(source: str, block: TemplateBlock, config: Config) -> list[Replacement]:
    """Rebuild every element inside ``block`` and collect the non-empty results."""
    replacements: list[Replacement] = []
    for element in scan_elements(source, block.content_start, block.content_end):
        replacement = rebuild_element(element, config, source)
        if replacement is not None:
            replacements.append(replacement)
    return replacements


def format_replacements(
    source: str,
    config: Config | MutableConfig | Mapping[str, Any] | None = None,
    *,
    whole_document: bool = False,
) -> list[Replacement]:
    """Compute the edits that normalize the template of ``source``.

    Args:
        source (str): Full file content.
        config (Config | MutableConfig | Mapping[str, Any] | None): Options; partial
            overrides are resolved against the defaults.
        whole_document (bool): Treat ``source`` as bare template markup instead of
            looking for a ``<template>`` block.

    Returns:
        list[Replacement]: Non-overlapping edits in ascending start order. Empty
        when there is no template or nothing to change.
    """
    resolved: Config = _as_config(config)
    block: TemplateBlock | None = (
        whole_document_block(source) if whole_document else find_template_block(source)
    )
    if block is None:
        return []

    replacements: list[Replacement] = collect_replacements(source, block, resolved)
    logger.debug("%d replacement(s) computed", len(replacements))
    return replacements


def apply_replacements(source: str, replacements: Iterable[Replacement]) -> str:
    """Splice ``replacements`` into ``source``.

    Edits are applied from the highest start offset down, so each one sees the
    original offsets of the text in front of it.

    Args:
        source (str): The text the replacement spans refer to.
        replacements (Iterable[Replacement]): Edits in any order.

    Returns:
        str: The edited text.

    Raises:
        OverlappingReplacementsError: If two edits overlap or a span falls
            outside ``source``.
    """
    ordered: list[Replacement] = sorted(replacements, key=lambda r: r.start, reverse=True)
    result: str = source
    limit: int = len(source)
    for replacement in ordered:
        if not 0 <= replacement.start <= replacement.end <= limit:
            raise OverlappingReplacementsError(
                f"Replacement [{replacement.start}, {replacement.end}) overlaps a later edit "
                f"or lies outside the document (length {len(source)})"
            )
        result = result[: replacement.start] + replacement.new_text + result[replacement.end :]
        limit = replacement.start
    return result


def format_text(
    source: str,
    config: Config | MutableConfig | Mapping[str, Any] | None = None,
    *,
    whole_document: bool = False,
) -> str:
    """Return ``source`` with its template normalized.

    Args:
        source (str): Full file content.
        config (Config | MutableConfig | Mapping[str, Any] | None): Options.
        whole_document (bool): Treat ``source`` as bare template markup.

    Returns:
        str: The formatted text; ``source`` itself when nothing changes.
    """
    replacements = format_replacements(source, config, whole_document=whole_document)
    if not replacements:
        return source
    return apply_replacements(source, replacements)
