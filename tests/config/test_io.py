# topmark:header:start
#
#   project      : Vuenify
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading, upward discovery, layering and rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from vuenify.config import ClassLayout, Config, DirectiveStyle, MutableConfig
from vuenify.config.io import (
    config_from_file,
    discover_local_config_files,
    load_layered_config,
    load_toml_dict,
    render_config_toml,
)
from vuenify.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def write(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` (creating parents) and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_vuenify_toml_layer(tmp_path: Path) -> None:
    """A ``vuenify.toml`` with a ``[format]`` table yields a layer."""
    cfg = write(tmp_path / "vuenify.toml", '[format]\ndirective_style = "long"\n')
    layer = config_from_file(cfg)
    assert layer.directive_style is DirectiveStyle.LONG
    assert layer.sort_classes is None


def test_pyproject_tool_table(tmp_path: Path) -> None:
    """``[tool.vuenify.format]`` is read from pyproject.toml."""
    cfg = write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.vuenify.format]\nsort_classes = false\n',
    )
    assert config_from_file(cfg).sort_classes is False


def test_pyproject_without_table_is_empty(tmp_path: Path) -> None:
    """A pyproject without ``[tool.vuenify]`` contributes nothing."""
    cfg = write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert config_from_file(cfg).is_empty()


def test_invalid_toml_is_strict_for_explicit_files(tmp_path: Path) -> None:
    """Strict loading raises; lenient loading logs and returns empty."""
    cfg = write(tmp_path / "vuenify.toml", "[format\n")
    with pytest.raises(ConfigError):
        config_from_file(cfg, strict=True)
    assert config_from_file(cfg, strict=False).is_empty()
    assert load_toml_dict(tmp_path / "missing.toml") == {}


def test_format_must_be_a_table(tmp_path: Path) -> None:
    """A scalar ``format`` key is a config error."""
    cfg = write(tmp_path / "vuenify.toml", 'format = "short"\n')
    with pytest.raises(ConfigError):
        config_from_file(cfg)


def test_discovery_order_and_root_stop(tmp_path: Path) -> None:
    """Files are ordered root-most first; ``root = true`` stops the walk."""
    write(tmp_path / "vuenify.toml", "[format]\nsort_classes = false\n")
    top_pyproject = write(
        tmp_path / "repo" / "pyproject.toml", "[tool.vuenify]\nroot = true\n"
    )
    top_vuenify = write(tmp_path / "repo" / "vuenify.toml", "[format]\n")
    nested = write(tmp_path / "repo" / "app" / "vuenify.toml", "[format]\n")
    (tmp_path / "repo" / "app" / "src").mkdir()

    found = discover_local_config_files(tmp_path / "repo" / "app" / "src")
    assert found == [p.resolve() for p in (top_pyproject, top_vuenify, nested)]


def test_discovery_from_a_file_anchor(tmp_path: Path) -> None:
    """A file anchor starts discovery in its directory."""
    cfg = write(tmp_path / "vuenify.toml", "root = true\n")
    component = write(tmp_path / "App.vue", "<template></template>\n")
    assert discover_local_config_files(component) == [cfg.resolve()]


def test_layering_precedence(tmp_path: Path) -> None:
    """Nearest file beats farther ones; ``--config`` files and overrides win last."""
    write(
        tmp_path / "vuenify.toml",
        'root = true\n[format]\ndirective_style = "long"\nclass_layout = "preserve"\n',
    )
    write(tmp_path / "pkg" / "vuenify.toml", '[format]\ndirective_style = "short"\n')
    extra = write(tmp_path / "extra.toml", "[format]\norder_attributes = false\n")

    merged = load_layered_config(
        start=tmp_path / "pkg",
        extra_files=[extra],
        overrides=MutableConfig(order_attributes=True),
    )
    assert merged.directive_style is DirectiveStyle.SHORT
    assert merged.class_layout is ClassLayout.PRESERVE
    assert merged.order_attributes is True


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    """``no_config`` ignores discovered files."""
    write(tmp_path / "vuenify.toml", "root = true\n[format]\nsort_classes = false\n")
    assert load_layered_config(start=tmp_path, no_config=True).is_empty()


def test_render_config_toml_roundtrip() -> None:
    """Rendered TOML parses back into the same config."""
    config = Config(class_layout=ClassLayout.PRESERVE, directive_priority=("for", "if"))
    text = render_config_toml(config)
    parsed = tomlkit.parse(text).unwrap()
    assert parsed["format"]["class_layout"] == "preserve"
    assert MutableConfig.from_toml_table(parsed["format"]).freeze() == config


def test_render_config_toml_for_pyproject() -> None:
    """The pyproject rendering nests the table under ``[tool.vuenify]``."""
    text = render_config_toml(Config(), for_pyproject=True)
    parsed = tomlkit.parse(text).unwrap()
    assert parsed["tool"]["vuenify"]["format"]["sort_classes"] is True
