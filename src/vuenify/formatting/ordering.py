# topmark:header:start
#
#   project      : Vuenify
#   file         : ordering.py
#   file_relpath : src/vuenify/formatting/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable partial reordering of prop lists.

Directives and attributes are reordered independently: each orderer pulls
out the positions held by its own kind, sorts that subsequence, and writes it
back into exactly those positions (*splice-back*). Props of the other kind
never move.

All sorts are Python's stable ``sorted``, and names compare by code point, so
props with equal keys keep their original relative order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from vuenify.formatting.props import Attribute, Directive

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from vuenify.formatting.props import Prop

_T = TypeVar("_T")


def splice_sorted(
    items: Sequence[_T],
    selected: Callable[[_T], bool],
    key: Callable[[_T], Any],
) -> list[_T]:
    """Sort the selected subsequence of ``items`` in place of its original slots.

    Args:
        items (Sequence[_T]): The mixed sequence.
        selected (Callable[[_T], bool]): Picks the items that take part in the sort.
        key (Callable[[_T], Any]): Sort key for the selected items.

    Returns:
        list[_T]: A new list where unselected items keep their indices and the
        selected slots hold the sorted subsequence.
    """
    slots: list[int] = [i for i, item in enumerate(items) if selected(item)]
    ordered: list[_T] = sorted((items[i] for i in slots), key=key)
    result: list[_T] = list(items)
    for slot, item in zip(slots, ordered):
        result[slot] = item
    return result


def directive_rank_key(priority: Sequence[str]) -> Callable[[Prop], tuple[int, str]]:
    """Build the ``(rank, name)`` sort key for a directive priority list.

    Names missing from ``priority`` share a fallback rank greater than every
    configured rank, so they sort after all known directives and among
    themselves by name. Duplicate entries in ``priority`` keep their first rank.
    """
    ranks: dict[str, int] = {}
    for index, name in enumerate(priority):
        ranks.setdefault(name, index)
    fallback: int = len(priority)

    def key(prop: Prop) -> tuple[int, str]:
        return ranks.get(prop.name, fallback), prop.name

    return key


def _is_directive(prop: Prop) -> bool:
    return isinstance(prop, Directive)


def _is_attribute(prop: Prop) -> bool:
    return isinstance(prop, Attribute)


def _attribute_key(prop: Prop) -> tuple[int, str]:
    # Valued attributes first, then boolean ones; by name within each group.
    has_value: bool = isinstance(prop, Attribute) and prop.has_value
    return (0 if has_value else 1), prop.name


def order_directives(props: Sequence[Prop], priority: Sequence[str]) -> list[Prop]:
    """Reorder the directives of ``props`` by configured priority.

    Args:
        props (Sequence[Prop]): Props in current order.
        priority (Sequence[str]): Directive names in rank order.

    Returns:
        list[Prop]: New list; attribute positions are untouched.
    """
    return splice_sorted(props, _is_directive, directive_rank_key(priority))


def order_attributes(props: Sequence[Prop]) -> list[Prop]:
    """Reorder the plain attributes of ``props``: valued before boolean, then by name.

    Args:
        props (Sequence[Prop]): Props in current order.

    Returns:
        list[Prop]: New list; directive positions are untouched.
    """
    return splice_sorted(props, _is_attribute, _attribute_key)


def moved(before: Sequence[Prop], after: Sequence[Prop]) -> bool:
    """True when any position holds a different prop object than before."""
    return any(a is not b for a, b in zip(before, after))
