# topmark:header:start
#
#   project      : Vuenify
#   file         : directives.py
#   file_relpath : src/vuenify/formatting/directives.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shorthand/longhand normalization and same-name policy for directives.

Only three directive kinds have two spellings:

    =======  =========  ===============
    name     shorthand  longhand
    =======  =========  ===============
    bind     ``:foo``   ``v-bind:foo``
    on       ``@foo``   ``v-on:foo``
    slot     ``#foo``   ``v-slot:foo``
    =======  =========  ===============

Everything else (``v-if``, ``v-model``, custom directives) and any directive
without an argument (``v-bind="obj"``) passes through untouched.

The rebuilt text is assembled from the directive's pieces: the spelling
prefix, the argument, the modifier suffix, and the *value part* (``=`` sign,
quotes and expression) copied verbatim from the original unless the
same-name policy overrides it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from vuenify.config.logging import get_logger
from vuenify.config.model import DirectiveStyle, SameNameMode

if TYPE_CHECKING:
    from vuenify.config.logging import VuenifyLogger
    from vuenify.formatting.props import Directive

logger: VuenifyLogger = get_logger(__name__)

BIND: Final[str] = "bind"

SHORTHAND_SIGILS: Final[dict[str, str]] = {
    BIND: ":",
    "on": "@",
    "slot": "#",
}


def is_normalizable(directive: Directive) -> bool:
    """True for bind/on/slot directives that carry an argument."""
    return directive.name in SHORTHAND_SIGILS and bool(directive.argument)


def bare_argument(directive: Directive) -> str:
    """Return the argument with dynamic-argument brackets removed, trimmed."""
    arg: str = directive.argument or ""
    if directive.is_dynamic_argument or (arg.startswith("[") and arg.endswith("]")):
        arg = arg[1:-1]
    return arg.strip()


def original_value_part(directive: Directive) -> str:
    """Return the ``="..."`` suffix of the original text, or ``""`` without a value."""
    if not directive.has_expression:
        return ""
    # Skip past a dynamic argument, which may itself contain "=".
    search_from: int = directive.source.find("]") + 1 if directive.is_dynamic_argument else 0
    equal_index: int = directive.source.find("=", search_from)
    return directive.source[equal_index:] if equal_index != -1 else ""


def apply_same_name_policy(directive: Directive, value_part: str, mode: SameNameMode) -> str:
    """Return the value part after applying the same-name binding policy.

    Only bind directives with an argument are affected:

    * ``removeValue`` drops the value part when the expression equals the argument.
    * ``addValue`` synthesizes ``="arg"`` when there is no expression.
    * ``ignore`` keeps the value part as is.
    """
    if directive.name != BIND or not directive.argument or mode is SameNameMode.IGNORE:
        return value_part

    argument: str = bare_argument(directive)
    match mode:
        case SameNameMode.REMOVE_VALUE:
            if directive.expression is not None and directive.expression.strip() == argument:
                return ""
        case SameNameMode.ADD_VALUE:
            if not directive.has_expression:
                return f'="{argument}"'
    return value_part


def render_directive(
    name: str,
    argument: str,
    modifiers: tuple[str, ...],
    value_part: str,
    style: DirectiveStyle,
) -> str:
    """Spell a normalizable directive in the requested style.

    Args:
        name (str): Canonical name (``bind``, ``on`` or ``slot``).
        argument (str): Argument text as written (brackets kept).
        modifiers (tuple[str, ...]): Modifiers in source order.
        value_part (str): ``="..."`` suffix, possibly empty.
        style (DirectiveStyle): Target spelling.

    Returns:
        str: The directive text.
    """
    modifier_suffix: str = "".join(f".{m}" for m in modifiers if m)
    prefix: str = SHORTHAND_SIGILS[name] if style is DirectiveStyle.SHORT else f"v-{name}:"
    return f"{prefix}{argument}{modifier_suffix}{value_part}"


def normalize_directive(
    directive: Directive,
    style: DirectiveStyle,
    same_name_mode: SameNameMode,
) -> str | None:
    """Return the normalized text for a directive, or None if unchanged.

    Args:
        directive (Directive): The directive prop.
        style (DirectiveStyle): Target spelling.
        same_name_mode (SameNameMode): Same-name binding policy.

    Returns:
        str | None: The rewritten text, or None for passthrough/no change.
    """
    if not directive.source:
        logger.debug("Directive '%s' has no source text; leaving it alone", directive.name)
        return None
    if not is_normalizable(directive):
        return None

    value_part: str = apply_same_name_policy(
        directive, original_value_part(directive), same_name_mode
    )
    rebuilt: str = render_directive(
        directive.name,
        directive.argument or "",
        directive.modifiers,
        value_part,
        style,
    )
    if rebuilt == directive.source:
        return None

    logger.trace(
        "directive rewrite at %d: %r -> %r", directive.span.start, directive.source, rebuilt
    )
    return rebuilt
