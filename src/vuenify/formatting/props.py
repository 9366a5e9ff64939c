# topmark:header:start
#
#   project      : Vuenify
#   file         : props.py
#   file_relpath : src/vuenify/formatting/props.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data model shared by the scanner and the attribute-block rebuilder.

A *prop* is one attribute or binding directive on a markup element. Props are
immutable: the scanner creates them with their original source text and
absolute span, and the rebuilder derives rewritten copies with
`with_source()` (same span, new text). The original list therefore stays
valid for change detection.

Spans are half-open ``[start, end)`` offsets into the full document string.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeAlias, TypeVar


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open ``[start, end)`` range into the full document."""

    start: int
    end: int

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this span."""
        return text[self.start : self.end]


@dataclass(frozen=True, slots=True)
class Attribute:
    """A plain attribute such as ``id="x"`` or ``disabled``.

    Attributes:
        name (str): Attribute name as written.
        span (SourceSpan): Absolute location of the whole attribute.
        source (str): Rendered text for this attribute; the original text unless rewritten.
        value (str | None): Value text without quotes; ``None`` for boolean attributes.
        quote (str | None): The quote character used in the original (``"`` or ``'``),
            ``None`` when unquoted or valueless.
    """

    name: str
    span: SourceSpan
    source: str
    value: str | None = None
    quote: str | None = None

    @property
    def has_value(self) -> bool:
        """True when the attribute carries a value (even an empty one)."""
        return self.value is not None


@dataclass(frozen=True, slots=True)
class Directive:
    """A binding directive such as ``v-if="ok"``, ``:src="url"`` or ``@click.stop``.

    Attributes:
        name (str): Canonical directive name without ``v-`` (``bind``, ``on``, ``slot``,
            ``if``, ``model``, ...), independent of how it was spelled.
        span (SourceSpan): Absolute location of the whole directive.
        source (str): Rendered text; the original text unless rewritten.
        argument (str | None): Argument text as written, brackets included for
            dynamic arguments (``foo``, ``[key]``).
        is_dynamic_argument (bool): True for ``[expr]`` arguments.
        modifiers (tuple[str, ...]): Modifiers in source order.
        expression (str | None): Bound expression text without quotes; ``None``
            when the directive has no value.
    """

    name: str
    span: SourceSpan
    source: str
    argument: str | None = None
    is_dynamic_argument: bool = False
    modifiers: tuple[str, ...] = ()
    expression: str | None = None

    @property
    def has_expression(self) -> bool:
        """True when the directive carries a value part."""
        return self.expression is not None


Prop: TypeAlias = Attribute | Directive

_P = TypeVar("_P", Attribute, Directive)


def with_source(prop: _P, source: str) -> _P:
    """Return a copy of ``prop`` whose rendered text is ``source``.

    Identity fields and the span are kept, so the copy still describes the
    original location.
    """
    return replace(prop, source=source)


@dataclass(frozen=True, slots=True)
class Element:
    """One markup element's props in original source order.

    Attributes:
        tag (str): Tag name, for diagnostics only.
        props (tuple[Prop, ...]): Props in the order they were written.
        span (SourceSpan | None): Location of the start tag, when known.
    """

    tag: str
    props: tuple[Prop, ...]
    span: SourceSpan | None = None


@dataclass(frozen=True, slots=True)
class Replacement:
    """Substitute ``document[start:end]`` with ``new_text``."""

    start: int
    end: int
    new_text: str

    @property
    def span(self) -> SourceSpan:
        return SourceSpan(self.start, self.end)
