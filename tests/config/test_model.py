# topmark:header:start
#
#   project      : Vuenify
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: defaults, merging, parsing and presets."""

from __future__ import annotations

import logging

import pytest

from tests.conftest import parametrize
from vuenify.config import (
    DEFAULT_DIRECTIVE_PRIORITY,
    AttributeLayout,
    ClassLayout,
    Config,
    DirectiveStyle,
    MutableConfig,
    Preset,
    SameNameMode,
    preset_overrides,
    resolve_config,
)
from vuenify.config.model import parse_directive_priority
from vuenify.core.errors import ConfigError


def test_defaults() -> None:
    """Every pass is on, with inline layouts and short directives."""
    config = Config()
    assert config.sort_classes and config.remove_duplicates
    assert config.normalize_directives and config.order_directives and config.order_attributes
    assert config.class_layout is ClassLayout.INLINE
    assert config.attribute_layout is AttributeLayout.INLINE
    assert config.directive_style is DirectiveStyle.SHORT
    assert config.same_name_mode is SameNameMode.IGNORE
    assert config.directive_priority == DEFAULT_DIRECTIVE_PRIORITY


def test_config_is_frozen() -> None:
    """Resolved configs cannot be mutated."""
    config = Config()
    with pytest.raises(AttributeError):
        config.sort_classes = False  # type: ignore[misc]


def test_thaw_freeze_roundtrip() -> None:
    """``thaw`` sets every field explicitly and ``freeze`` restores an equal config."""
    config = Config(directive_style=DirectiveStyle.LONG)
    thawed = config.thaw()
    assert not thawed.is_empty()
    assert thawed.freeze() == config


def test_merge_is_last_wins_and_skips_unset() -> None:
    """``None`` never overrides an explicit value."""
    low = MutableConfig(sort_classes=False, directive_style=DirectiveStyle.LONG)
    high = MutableConfig(directive_style=DirectiveStyle.SHORT, order_attributes=False)
    merged = low.merge_with(high)
    assert merged.sort_classes is False
    assert merged.directive_style is DirectiveStyle.SHORT
    assert merged.order_attributes is False
    assert merged.remove_duplicates is None


def test_resolve_config_fills_defaults() -> None:
    """Unset fields come from the defaults."""
    config = resolve_config(MutableConfig(order_directives=False))
    assert config.order_directives is False
    assert config.sort_classes is True
    assert resolve_config() == Config()


def test_from_toml_table_parses_every_kind() -> None:
    """Booleans, enum tokens and the priority list are all accepted."""
    layer = MutableConfig.from_toml_table(
        {
            "sort_classes": False,
            "class_layout": "preserve",
            "same_name_mode": "addValue",
            "directive_priority": ["v-for", "if"],
        }
    )
    assert layer.sort_classes is False
    assert layer.class_layout is ClassLayout.PRESERVE
    assert layer.same_name_mode is SameNameMode.ADD_VALUE
    assert layer.directive_priority == ("for", "if")
    assert layer.remove_duplicates is None


@parametrize(
    "table, key",
    [
        ({"sort_classes": "yes"}, "sort_classes"),
        ({"directive_style": "tiny"}, "directive_style"),
        ({"attribute_layout": 1}, "attribute_layout"),
        ({"directive_priority": 3}, "directive_priority"),
        ({"directive_priority": ["if", 2]}, "directive_priority"),
    ],
)
def test_from_toml_table_rejects_bad_values(table: dict[str, object], key: str) -> None:
    """Wrong types and unknown enum tokens raise with the offending key."""
    with pytest.raises(ConfigError) as excinfo:
        MutableConfig.from_toml_table(table, source="vuenify.toml")
    assert excinfo.value.key == key
    assert "vuenify.toml" in str(excinfo.value)


def test_from_toml_table_warns_on_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown options are logged and ignored."""
    with caplog.at_level(logging.WARNING):
        layer = MutableConfig.from_toml_table({"sort_clases": True})
    assert layer.is_empty()
    assert "sort_clases" in caplog.text


def test_from_mapping_accepts_editor_spellings() -> None:
    """camelCase names and enum members work in plain mappings."""
    layer = MutableConfig.from_mapping(
        {
            "sortClasses": False,
            "directiveOrder": "model, v-if",
            "attributeLayout": AttributeLayout.PRESERVE,
            "same_name_mode": "remove-value",
        }
    )
    assert layer.sort_classes is False
    assert layer.directive_priority == ("model", "if")
    assert layer.attribute_layout is AttributeLayout.PRESERVE
    assert layer.same_name_mode is SameNameMode.REMOVE_VALUE


def test_to_toml_table_only_explicit_keys() -> None:
    """Unset keys are omitted; enums and tuples become primitives."""
    table = MutableConfig(
        class_layout=ClassLayout.PRESERVE, directive_priority=("if", "for")
    ).to_toml_table()
    assert table == {"class_layout": "preserve", "directive_priority": ["if", "for"]}


@parametrize(
    "raw, expected",
    [
        ("if,for", ("if", "for")),
        (" v-if , , model ", ("if", "model")),
        (["v-bind", "on"], ("bind", "on")),
        ((), ()),
    ],
)
def test_parse_directive_priority(raw: object, expected: tuple[str, ...]) -> None:
    """Strings split on commas; ``v-`` prefixes and blanks are dropped."""
    assert parse_directive_priority(raw) == expected


@parametrize(
    "preset, kept",
    [
        (Preset.CLASSES, {"sort_classes", "remove_duplicates"}),
        (Preset.DIRECTIVES, {"normalize_directives", "remove_duplicates"}),
        (Preset.ORDER, {"order_directives", "order_attributes", "remove_duplicates"}),
    ],
)
def test_presets_force_other_passes_off(preset: Preset, kept: set[str]) -> None:
    """A preset disables every pass it does not name."""
    toggles = {
        "sort_classes",
        "normalize_directives",
        "order_directives",
        "order_attributes",
        "remove_duplicates",
    }
    config = resolve_config(MutableConfig().merge_with(preset_overrides(preset)))
    assert {name for name in toggles if getattr(config, name)} == kept


def test_preset_parse_accepts_flag_alias() -> None:
    """Presets parse from their key or the matching flag name."""
    assert Preset.parse("classes") is Preset.CLASSES
    assert Preset.parse("order-attributes") is Preset.ORDER
    assert Preset.parse("everything") is None
