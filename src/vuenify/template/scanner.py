# topmark:header:start
#
#   project      : Vuenify
#   file         : scanner.py
#   file_relpath : src/vuenify/template/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scan template markup into elements and props with absolute spans.

This is a start-tag scanner, not a full HTML parser: it only needs each
element's attribute list and the exact location of every attribute. It skips
comments, end tags, ``{{ }}`` interpolations and the bodies of raw-text
elements, and it understands quoted values that span lines or contain ``>``.

Inside an element carrying ``v-pre`` (the element itself and everything below
it) nothing is compiled, so every prop is kept as a plain `Attribute`.

Directive names follow the Vue template syntax:

    v-name[:argument][.modifier...]
    :argument   → bind       @argument → on
    #argument   → slot       .argument → bind with a trailing ``prop`` modifier

Arguments in brackets (``:[key]``) are dynamic.

The scanner never raises. An unterminated start tag ends the scan; elements
found before it are still returned.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from vuenify.config.logging import get_logger
from vuenify.formatting.props import Attribute, Directive, Element, SourceSpan

if TYPE_CHECKING:
    from vuenify.config.logging import VuenifyLogger
    from vuenify.formatting.props import Prop

logger: VuenifyLogger = get_logger(__name__)

_NEXT_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"\{\{|<")
_TAG_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][^\s/>]*")
_ATTR_NAME_RE: Final[re.Pattern[str]] = re.compile(r"""[^\s"'<>/=]+""")
_UNQUOTED_VALUE_RE: Final[re.Pattern[str]] = re.compile(r"[^\s>]+")
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s*")
_DIRECTIVE_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]+")

# Elements whose bodies are not markup.
RAW_TEXT_ELEMENTS: Final[frozenset[str]] = frozenset({"script", "style", "textarea"})

# Elements that never have an end tag.
VOID_ELEMENTS: Final[frozenset[str]] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

SKIP_COMPILATION_ATTRIBUTE: Final[str] = "v-pre"

SHORTHAND_NAMES: Final[dict[str, str]] = {
    ":": "bind",
    ".": "bind",
    "@": "on",
    "#": "slot",
}

PROP_MODIFIER: Final[str] = "prop"


def _split_argument(rest: str) -> tuple[str | None, bool, str]:
    """Split ``rest`` into (argument, is_dynamic, remainder starting at the modifiers)."""
    if rest.startswith("["):
        close: int = rest.find("]")
        if close == -1:
            return rest, False, ""
        return rest[: close + 1], True, rest[close + 1 :]
    dot: int = rest.find(".")
    arg, remainder = (rest, "") if dot == -1 else (rest[:dot], rest[dot:])
    return (arg or None), False, remainder


def classify_prop(
    raw_name: str,
    *,
    span: SourceSpan,
    source: str,
    value: str | None,
    quote: str | None,
) -> Prop:
    """Build an `Attribute` or `Directive` from a scanned attribute.

    Args:
        raw_name (str): The attribute name exactly as written.
        span (SourceSpan): Absolute span of the whole attribute.
        source (str): Original attribute text.
        value (str | None): Value without quotes, or None if valueless.
        quote (str | None): Quote character, or None.

    Returns:
        Prop: The classified prop. Names that look like directives but do not
        parse as one are kept as plain attributes.
    """
    name: str
    rest: str
    argument: str | None = None
    dynamic: bool = False
    extra_modifiers: tuple[str, ...] = ()

    if raw_name.startswith("v-"):
        m = _DIRECTIVE_NAME_RE.match(raw_name, 2)
        if m is None:
            return Attribute(name=raw_name, span=span, source=source, value=value, quote=quote)
        name, rest = m.group(0), raw_name[m.end() :]
        if rest.startswith(":"):
            argument, dynamic, rest = _split_argument(rest[1:])
    elif raw_name[:1] in SHORTHAND_NAMES:
        name = SHORTHAND_NAMES[raw_name[0]]
        argument, dynamic, rest = _split_argument(raw_name[1:])
        if raw_name[0] == ".":
            extra_modifiers = (PROP_MODIFIER,)
    else:
        return Attribute(name=raw_name, span=span, source=source, value=value, quote=quote)

    if rest and not rest.startswith("."):
        logger.debug("Unrecognized directive syntax %r; keeping it as an attribute", raw_name)
        return Attribute(name=raw_name, span=span, source=source, value=value, quote=quote)

    modifiers: tuple[str, ...] = tuple(m for m in rest.split(".")[1:] if m) + extra_modifiers
    return Directive(
        name=name,
        span=span,
        source=source,
        argument=argument,
        is_dynamic_argument=dynamic,
        modifiers=modifiers,
        expression=value,
    )


def _scan_start_tag(source: str, pos: int, end: int) -> tuple[list[Attribute], int, bool] | None:
    """Scan attributes from ``pos`` (just after the tag name) to the closing ``>``.

    Attributes are returned unclassified; see `classify_prop`.

    Returns:
        tuple[list[Attribute], int, bool] | None:
        ``(attributes, offset after '>', self_closing)``, or None if the tag is not
        terminated before ``end``.
    """
    props: list[Attribute] = []
    i: int = pos
    while True:
        i = _WHITESPACE_RE.match(source, i, end).end()
        if i >= end:
            return None
        ch: str = source[i]
        if ch == ">":
            return props, i + 1, False
        if source.startswith("/>", i):
            return props, i + 2, True

        name_match = _ATTR_NAME_RE.match(source, i, end)
        if name_match is None:
            # Stray "/", quote or "=": skip it like browsers do.
            i += 1
            continue

        name_start, name_end = name_match.start(), name_match.end()
        value: str | None = None
        quote: str | None = None
        attr_end: int = name_end

        j: int = _WHITESPACE_RE.match(source, name_end, end).end()
        if j < end and source[j] == "=":
            k: int = _WHITESPACE_RE.match(source, j + 1, end).end()
            if k >= end:
                return None
            if source[k] in "\"'":
                quote = source[k]
                close: int = source.find(quote, k + 1, end)
                if close == -1:
                    return None
                value = source[k + 1 : close]
                attr_end = close + 1
            else:
                value_match = _UNQUOTED_VALUE_RE.match(source, k, end)
                if value_match is None:
                    value, attr_end = "", k
                else:
                    value, attr_end = value_match.group(0), value_match.end()

        props.append(
            Attribute(
                name=name_match.group(0),
                span=SourceSpan(name_start, attr_end),
                source=source[name_start:attr_end],
                value=value,
                quote=quote,
            )
        )
        i = attr_end


def scan_elements(source: str, start: int = 0, end: int | None = None) -> list[Element]:
    """Return every element start tag in ``source[start:end]`` with its props.

    Args:
        source (str): The full document.
        start (int): Offset where scanning starts.
        end (int | None): Offset where scanning stops; defaults to ``len(source)``.

    Returns:
        list[Element]: Elements in document order; spans are absolute offsets
        into ``source``.
    """
    stop: int = len(source) if end is None else end
    elements: list[Element] = []
    i: int = start
    # Tag name and nesting depth of the open v-pre element, if any.
    pre_tag: str | None = None
    pre_depth: int = 0

    while i < stop:
        token = _NEXT_TOKEN_RE.search(source, i, stop)
        if token is None:
            break
        i = token.start()

        if token.group(0) == "{{":
            close: int = source.find("}}", i + 2, stop)
            i = stop if close == -1 else close + 2
            continue

        if source.startswith("<!--", i):
            close = source.find("-->", i + 4, stop)
            i = stop if close == -1 else close + 3
            continue

        if pre_tag is not None and source.startswith("</", i):
            end_match = _TAG_NAME_RE.match(source, i + 2, stop)
            if end_match is not None and end_match.group(0).lower() == pre_tag:
                pre_depth -= 1
                if pre_depth == 0:
                    pre_tag = None

        if source.startswith("</", i) or source.startswith("<!", i) or source.startswith("<?", i):
            close = source.find(">", i + 1, stop)
            i = stop if close == -1 else close + 1
            continue

        tag_match = _TAG_NAME_RE.match(source, i + 1, stop)
        if tag_match is None:
            i += 1
            continue

        tag: str = tag_match.group(0)
        scanned = _scan_start_tag(source, tag_match.end(), stop)
        if scanned is None:
            logger.warning("Unterminated <%s> start tag at offset %d; stopping scan", tag, i)
            break

        attributes, after, self_closing = scanned
        lowered: str = tag.lower()
        has_body: bool = not self_closing and lowered not in VOID_ELEMENTS
        in_pre: bool = pre_tag is not None or any(
            a.name == SKIP_COMPILATION_ATTRIBUTE for a in attributes
        )
        props: tuple[Prop, ...] = (
            tuple(attributes)
            if in_pre
            else tuple(
                classify_prop(a.name, span=a.span, source=a.source, value=a.value, quote=a.quote)
                for a in attributes
            )
        )
        elements.append(Element(tag=tag, props=props, span=SourceSpan(i, after)))
        i = after

        if has_body and lowered not in RAW_TEXT_ELEMENTS:
            if pre_tag is None and in_pre:
                pre_tag, pre_depth = lowered, 1
            elif pre_tag == lowered:
                pre_depth += 1

        if lowered in RAW_TEXT_ELEMENTS and not self_closing:
            closing = re.compile(rf"</{re.escape(tag)}\s*>", re.IGNORECASE).search(source, i, stop)
            i = stop if closing is None else closing.end()

    logger.debug("Scanned %d element(s) in [%d, %d)", len(elements), start, stop)
    return elements
