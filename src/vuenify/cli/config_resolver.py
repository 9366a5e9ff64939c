# topmark:header:start
#
#   project      : Vuenify
#   file         : config_resolver.py
#   file_relpath : src/vuenify/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective formatting configuration from Click parameters.

Resolution order (lowest → highest precedence):

  1. Built-in defaults (`Config()`).
  2. Discovered project configs (root-most → nearest), unless ``--no-config``.
     Discovery is anchored to the first input path (its parent when it is a
     file), or to the working directory when reading STDIN.
  3. Explicit files passed with ``--config``, in order.
  4. Per-option CLI flags.
  5. ``--preset``, which forces the passes it excludes off.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from vuenify.cli.errors import VuenifyConfigError
from vuenify.config.io import load_layered_config
from vuenify.config.keys import Toml
from vuenify.config.logging import get_logger
from vuenify.config.model import MutableConfig, parse_directive_priority, preset_overrides
from vuenify.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vuenify.config.logging import VuenifyLogger
    from vuenify.config.model import Config, Preset

logger: VuenifyLogger = get_logger(__name__)


def discovery_anchor(paths: Iterable[str]) -> Path:
    """Return the directory config discovery starts from."""
    for raw in paths:
        if raw == "-":
            continue
        p = Path(raw)
        if p.is_dir():
            return p
        if p.exists():
            return p.parent
        break
    return Path.cwd()


def overrides_from_flags(flags: dict[str, Any]) -> MutableConfig:
    """Build a `MutableConfig` layer from the per-option CLI flags.

    Args:
        flags (dict[str, Any]): Option name → parsed value (``None`` when not given).

    Returns:
        MutableConfig: A tri-state layer holding only the flags that were given.

    Raises:
        ConfigError: If ``directive_priority`` cannot be parsed.
    """
    values: dict[str, Any] = {k: v for k, v in flags.items() if v is not None}
    raw_priority = values.pop(Toml.KEY_DIRECTIVE_PRIORITY, None)
    layer = MutableConfig(**values)
    if raw_priority is not None:
        layer.directive_priority = parse_directive_priority(
            raw_priority, key="--directive-priority"
        )
    return layer


def resolve_config_from_click(
    *,
    paths: Iterable[str],
    config_paths: Iterable[str],
    no_config: bool,
    preset: Preset | None,
    flags: dict[str, Any],
) -> Config:
    """Build the effective `Config` for a command invocation.

    Args:
        paths (Iterable[str]): Positional input paths (used as discovery anchor).
        config_paths (Iterable[str]): Files passed with ``--config``.
        no_config (bool): Skip discovery of project config files.
        preset (Preset | None): Preset selected with ``--preset``.
        flags (dict[str, Any]): Per-option flags (see `overrides_from_flags`).

    Returns:
        Config: The fully-resolved configuration.

    Raises:
        VuenifyConfigError: If any configuration layer is invalid.
    """
    try:
        overrides: MutableConfig = overrides_from_flags(flags)
        if preset is not None:
            overrides = overrides.merge_with(preset_overrides(preset))
        merged: MutableConfig = load_layered_config(
            start=discovery_anchor(paths),
            extra_files=[Path(p) for p in config_paths],
            no_config=no_config,
            overrides=overrides,
        )
    except ConfigError as exc:
        raise VuenifyConfigError(str(exc)) from exc

    config: Config = merged.freeze()
    logger.debug("Effective config: %s", config)
    return config
