# topmark:header:start
#
#   project      : Vuenify
#   file         : sfc.py
#   file_relpath : src/vuenify/template/sfc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the template region of a single-file component.

Only the top-level ``<template>`` block is formatted. Its inner content is
returned as an absolute ``[start, end)`` range into the full file so every
span produced by the scanner is already a document offset; no translation is
needed afterwards.

Every other top-level block (``<script>``, ``<style>``, ``<docs>``, ``<i18n>``
and custom blocks) is opaque: its body is skipped while searching, so markup
examples inside it are never mistaken for the template. Nested ``<template>``
tags inside the block are balanced by depth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from vuenify.config.logging import get_logger

if TYPE_CHECKING:
    from vuenify.config.logging import VuenifyLogger

logger: VuenifyLogger = get_logger(__name__)

_ATTRS: Final[str] = r"""((?:[^>"']|"[^"]*"|'[^']*')*)"""

# Any tag at the top level of the file.
_TOP_LEVEL_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"<!--.*?-->|<(/?)([A-Za-z][\w.-]*)(?=[\s/>])" + _ATTRS + ">",
    re.DOTALL | re.IGNORECASE,
)

# Only template tags once inside the template block.
_TEMPLATE_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"<!--.*?-->|<(/?)(template)\b" + _ATTRS + ">",
    re.DOTALL | re.IGNORECASE,
)

_LANG_RE: Final[re.Pattern[str]] = re.compile(
    r"""\blang\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s>]+))""", re.IGNORECASE
)

# Template languages the scanner understands.
HTML_LANGS: Final[frozenset[str]] = frozenset({"", "html"})


@dataclass(frozen=True, slots=True)
class TemplateBlock:
    """Absolute location of a template's inner content.

    Attributes:
        content_start (int): Offset of the first content character.
        content_end (int): Offset just past the last content character.
        lang (str): Value of the ``lang`` attribute, ``""`` when absent.
    """

    content_start: int
    content_end: int
    lang: str = ""

    def content(self, source: str) -> str:
        return source[self.content_start : self.content_end]


def _lang_of(attrs: str) -> str:
    m = _LANG_RE.search(attrs)
    if m is None:
        return ""
    return next(g for g in m.groups() if g is not None).strip().lower()


def _skip_raw_block(source: str, tag: str, pos: int) -> int:
    """Return the offset just after ``</tag>``, or ``len(source)`` if unterminated."""
    close = re.compile(rf"</{re.escape(tag)}\s*>", re.IGNORECASE).search(source, pos)
    return close.end() if close else len(source)


def find_template_block(source: str) -> TemplateBlock | None:
    """Return the top-level ``<template>`` block of an SFC, or None.

    ``None`` is returned when there is no template, when it is self-closing or
    unterminated, when it uses a non-HTML ``lang``, or when its content is blank.

    Args:
        source (str): The full file content.

    Returns:
        TemplateBlock | None: The template's content range.
    """
    pos: int = 0
    depth: int = 0
    block_start: int = -1
    lang: str = ""

    while True:
        token_re = _TOP_LEVEL_TOKEN_RE if depth == 0 else _TEMPLATE_TOKEN_RE
        m = token_re.search(source, pos)
        if m is None:
            break
        pos = m.end()
        closing, tag, attrs = m.group(1), m.group(2), m.group(3)
        if tag is None:
            continue  # comment
        tag = tag.lower()
        self_closing: bool = (attrs or "").rstrip().endswith("/")

        if depth == 0:
            if closing or self_closing:
                continue
            if tag != "template":
                pos = _skip_raw_block(source, tag, pos)
                continue
            depth = 1
            block_start = m.end()
            lang = _lang_of(attrs or "")
            continue

        if tag != "template" or self_closing:
            continue
        if closing:
            depth -= 1
            if depth == 0:
                return _checked_block(source, block_start, m.start(), lang)
        else:
            depth += 1

    if depth > 0:
        logger.warning("Unterminated <template> block starting at offset %d", block_start)
    else:
        logger.debug("No <template> block found")
    return None


def _checked_block(source: str, start: int, end: int, lang: str) -> TemplateBlock | None:
    if lang not in HTML_LANGS:
        logger.info("Skipping <template lang=%r>: only HTML templates are formatted", lang)
        return None
    if not source[start:end].strip():
        logger.debug("Empty <template> block")
        return None
    return TemplateBlock(content_start=start, content_end=end, lang=lang)


def whole_document_block(source: str) -> TemplateBlock | None:
    """Treat the whole document as template content (plain HTML input)."""
    if not source.strip():
        return None
    return TemplateBlock(content_start=0, content_end=len(source))
