# topmark:header:start
#
#   project      : Vuenify
#   file         : test_rebuilder.py
#   file_relpath : tests/formatting/test_rebuilder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute-block rebuilder: end-to-end behavior for one element.

Each test scans a single start tag, rebuilds its block and checks the one
replacement (or its absence) against the literal expected text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.conftest import make_config, parametrize, props_of
from vuenify.config.model import AttributeLayout, DirectiveStyle, SameNameMode
from vuenify.formatting.rebuilder import rebuild_attribute_block, rewrite_prop

if TYPE_CHECKING:
    from vuenify.config.model import Config
    from vuenify.formatting.props import Replacement


def rebuilt(markup: str, config: Config | None = None) -> str | None:
    """Return the rebuilt block text for the first element, or None if unchanged."""
    doc, props = props_of(markup)
    replacement: Replacement | None = rebuild_attribute_block(props, config or make_config(), doc)
    return None if replacement is None else replacement.new_text


def test_empty_prop_list_yields_nothing() -> None:
    """An element without props never produces a replacement."""
    assert rebuild_attribute_block((), make_config(), "<br>") is None


@parametrize(
    "markup, config, expected",
    [
        ('<p class="b a c">', make_config(), 'class="a b c"'),
        ('<p class="b a b c">', make_config(sort_classes=False), 'class="b a c"'),
        ('<p v-bind:foo="bar">', make_config(), ':foo="bar"'),
        (
            '<img :src="src">',
            make_config(same_name_mode=SameNameMode.REMOVE_VALUE),
            ":src",
        ),
        (
            '<div v-bind="a" v-if="visible" v-model="value">',
            make_config(),
            'v-if="visible" v-model="value" v-bind="a"',
        ),
        (
            '<input disabled type="text" id="field">',
            make_config(),
            'id="field" type="text" disabled',
        ),
    ],
)
def test_literal_scenarios(markup: str, config: Config, expected: str) -> None:
    """The reference scenarios rebuild to their documented text."""
    assert rebuilt(markup, config) == expected


def test_dedup_and_sort_both_off_is_identity() -> None:
    """With both class toggles off (and nothing else to do) nothing changes."""
    config = make_config(sort_classes=False, remove_duplicates=False)
    assert rebuilt('<p class="b a b c">', config) is None


def test_normalized_block_yields_nothing() -> None:
    """Already-normalized blocks produce no replacement."""
    assert rebuilt('<input class="a b" id="x" @input="on" :value="v" required>') is None


def test_span_covers_original_first_to_last_prop() -> None:
    """The replacement spans exactly the original block, however props moved."""
    doc, props = props_of('<input  disabled  type="text"  id="x" >')
    replacement = rebuild_attribute_block(props, make_config(), doc)
    assert replacement is not None
    assert replacement.start == doc.index("disabled")
    assert replacement.end == doc.index('"x"') + 3
    assert doc[: replacement.start] == "<input  "
    assert doc[replacement.end :] == " >"


def test_long_style_converts_and_orders() -> None:
    """Long style spells out directives; ``on`` ranks before ``bind``."""
    config = make_config(directive_style=DirectiveStyle.LONG)
    assert rebuilt('<my-comp :foo="bar" @click="onClick">', config) == (
        'v-on:click="onClick" v-bind:foo="bar"'
    )


def test_remove_value_on_dynamic_argument() -> None:
    """``v-bind:[foo]="foo"`` collapses to ``:[foo]``."""
    config = make_config(same_name_mode=SameNameMode.REMOVE_VALUE)
    assert rebuilt('<div v-bind:[foo]="foo">', config) == ":[foo]"


def test_prop_shorthand_normalizes_with_prop_modifier() -> None:
    """``.foo`` is a bind with the ``prop`` modifier."""
    config = make_config(directive_style=DirectiveStyle.LONG)
    assert rebuilt('<div .foo="bar">', config) == 'v-bind:foo.prop="bar"'


def test_preserve_layout_keeps_multi_line_block() -> None:
    """Multi-line attribute blocks keep their line structure under preserve."""
    config = make_config(attribute_layout=AttributeLayout.PRESERVE)
    markup = '<input\n  disabled\n  type="text"\n  id="x"\n>'
    assert rebuilt(markup, config) == 'id="x"\n  type="text"\n  disabled'


def test_inline_layout_flattens_multi_line_block() -> None:
    """Inline layout joins a rebuilt multi-line block with single spaces."""
    markup = '<input\n  disabled\n  type="text"\n  id="x"\n>'
    assert rebuilt(markup) == 'id="x" type="text" disabled'


def test_untouched_multi_line_block_is_not_flattened() -> None:
    """Inline layout only applies when something else changed."""
    assert rebuilt('<input\n  id="x"\n  type="text"\n  disabled\n>') is None


def test_disabled_passes_leave_order_alone() -> None:
    """With every pass off, no block is ever rewritten."""
    config = make_config(
        sort_classes=False,
        remove_duplicates=False,
        normalize_directives=False,
        order_directives=False,
        order_attributes=False,
    )
    assert rebuilt('<input disabled v-bind:a="a" class="b a" v-if="x" id="y">', config) is None


def test_directive_normalization_toggle() -> None:
    """normalize_directives=False keeps longhand spellings."""
    config = make_config(normalize_directives=False)
    assert rebuilt('<p v-bind:foo="bar">', config) is None


def test_rewrite_prop_keeps_identity_when_unchanged() -> None:
    """Unchanged props are the very same objects."""
    _, props = props_of('<p id="x" :a="b">')
    config = make_config()
    assert all(rewrite_prop(p, config) is p for p in props)


def test_rewrite_prop_copies_changed_prop() -> None:
    """Rewritten props keep their span and carry the new text."""
    _, props = props_of('<p v-on:click="go">')
    original = props[0]
    result = rewrite_prop(original, make_config())
    assert result is not original
    assert result.source == '@click="go"'
    assert result.span == original.span
