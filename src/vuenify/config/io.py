# topmark:header:start
#
#   project      : Vuenify
#   file         : io.py
#   file_relpath : src/vuenify/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, discover and render TOML configuration sources.

This module provides I/O helpers for reading Vuenify configuration from
on-disk TOML files (``vuenify.toml`` / ``pyproject.toml``) and for rendering a
resolved configuration back to TOML.

Parsing is done with `tomlkit` and returned as plain `dict` structures; the
dicts are then turned into `MutableConfig` layers and merged nearest-last.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from vuenify.config.keys import Toml
from vuenify.config.logging import get_logger
from vuenify.config.model import Config, MutableConfig
from vuenify.constants import PYPROJECT_TOML_NAME, VUENIFY_TOML_NAME
from vuenify.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vuenify.config.logging import VuenifyLogger

logger: VuenifyLogger = get_logger(__name__)

TomlTable = dict[str, Any]


# --- TOML file I/O ---


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``vuenify.toml`` or ``pyproject.toml``).
        strict (bool): If True, raise instead of returning an empty dict on failure.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If ``strict`` is set and the file cannot be read or parsed.

    Notes:
        - In non-strict mode errors are logged and an empty dict is returned.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        if strict:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        if strict:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        return {}
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_vuenify_table(data: TomlTable, *, is_pyproject: bool) -> TomlTable | None:
    """Return the Vuenify table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.vuenify]``; for ``vuenify.toml`` the
    whole document. Returns ``None`` when a pyproject has no Vuenify table.
    """
    if not is_pyproject:
        return data
    tool: Any = data.get(Toml.PYPROJECT_TOOL_TABLE, {})
    if not isinstance(tool, Mapping):
        return None
    table: Any = cast("Mapping[str, Any]", tool).get(Toml.PYPROJECT_SECTION)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def config_from_toml_dict(table: TomlTable, *, source: str | None = None) -> MutableConfig:
    """Build a `MutableConfig` layer from a Vuenify table.

    Args:
        table (TomlTable): Contents of ``vuenify.toml`` or ``[tool.vuenify]``.
        source (str | None): Label used in diagnostics.

    Returns:
        MutableConfig: The parsed layer (unset keys stay ``None``).
    """
    where: str = f" in {source}" if source else ""
    for key in table:
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            logger.warning("Ignoring unknown section '%s'%s", key, where)

    fmt: Any = table.get(Toml.SECTION_FORMAT)
    if fmt is None:
        return MutableConfig()
    if not isinstance(fmt, Mapping):
        raise ConfigError(
            f"[{Toml.SECTION_FORMAT}]{where} must be a table", key=Toml.SECTION_FORMAT
        )
    return MutableConfig.from_toml_table(cast("Mapping[str, Any]", fmt), source=source)


def config_from_file(path: Path, *, strict: bool = True) -> MutableConfig:
    """Read one config file and return its layer.

    Args:
        path (Path): ``vuenify.toml``, ``pyproject.toml`` or any TOML file using the
            ``vuenify.toml`` layout.
        strict (bool): Raise on unreadable/invalid TOML instead of skipping it.

    Returns:
        MutableConfig: The parsed layer (empty if the file has no Vuenify table).
    """
    data: TomlTable = load_toml_dict(path, strict=strict)
    table: TomlTable | None = extract_vuenify_table(
        data, is_pyproject=path.name == PYPROJECT_TOML_NAME
    )
    if table is None:
        return MutableConfig()
    logger.debug("Loaded config layer from %s", path)
    return config_from_toml_dict(table, source=str(path))


def _declares_root(path: Path) -> bool:
    data: TomlTable = load_toml_dict(path)
    table = extract_vuenify_table(data, is_pyproject=path.name == PYPROJECT_TOML_NAME)
    return bool(table and table.get(Toml.KEY_ROOT, False))


def discover_local_config_files(start: Path) -> list[Path]:
    """Return config files discovered by walking upward from ``start``.

    Layered discovery semantics:
      * We traverse from the anchor directory up to the filesystem root and
        collect config files in **root-most → nearest** order.
      * In a given directory, `pyproject.toml` (only with ``[tool.vuenify]``)
        comes before `vuenify.toml`, so the latter wins within a directory.
      * A config declaring ``root = true`` stops the upward walk after the
        current directory's files are collected.

    Args:
        start (Path): The Path where discovery starts (file or directory).

    Returns:
        list[Path]: Discovered config file paths ordered for stable merging.
    """
    per_dir: list[list[Path]] = []
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        root_stop_here = False
        dir_entries: list[Path] = []

        for name in (PYPROJECT_TOML_NAME, VUENIFY_TOML_NAME):
            p: Path = cur / name
            if not p.is_file():
                continue
            if name == PYPROJECT_TOML_NAME and (
                extract_vuenify_table(load_toml_dict(p), is_pyproject=True) is None
            ):
                continue
            dir_entries.append(p)
            logger.debug("Discovered config file: %s", p)
            if _declares_root(p):
                root_stop_here = True

        if dir_entries:
            per_dir.append(dir_entries)

        parent: Path = cur.parent
        if parent == cur:
            break
        if root_stop_here:
            logger.debug("Stopping upward config discovery at %s due to root=true", cur)
            break
        cur = parent

    ordered: list[Path] = []
    for dir_list in reversed(per_dir):
        ordered.extend(dir_list)
    return ordered


def load_layered_config(
    *,
    start: Path | None = None,
    extra_files: Iterable[Path] = (),
    no_config: bool = False,
    overrides: MutableConfig | None = None,
) -> MutableConfig:
    """Merge every configuration layer, lowest precedence first.

    Order: discovered files (root-most → nearest), explicit ``extra_files`` in the
    order given, then ``overrides`` (typically CLI flags).

    Args:
        start (Path | None): Discovery anchor; defaults to the working directory.
        extra_files (Iterable[Path]): Explicit config files (``--config``).
        no_config (bool): Skip discovery.
        overrides (MutableConfig | None): Final layer.

    Returns:
        MutableConfig: The merged, still tri-state, configuration.
    """
    merged = MutableConfig()
    if not no_config:
        for path in discover_local_config_files(start or Path.cwd()):
            merged = merged.merge_with(config_from_file(path, strict=False))
    for path in extra_files:
        merged = merged.merge_with(config_from_file(path, strict=True))
    if overrides is not None:
        merged = merged.merge_with(overrides)
    return merged


# --- Rendering ---


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    return cast("str", cast("Any", tomlkit).dumps(toml_dict))


def render_config_toml(config: Config, *, for_pyproject: bool = False) -> str:
    """Render a resolved config as a TOML document.

    Args:
        config (Config): The configuration to render.
        for_pyproject (bool): If True, nest the output under ``[tool.vuenify]``.

    Returns:
        str: TOML document text.
    """
    data: TomlTable = config.to_toml_dict()
    if for_pyproject:
        data = {Toml.PYPROJECT_TOOL_TABLE: {Toml.PYPROJECT_SECTION: data}}
    return to_toml(data)
