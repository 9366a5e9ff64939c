# topmark:header:start
#
#   project      : Vuenify
#   file         : files.py
#   file_relpath : src/vuenify/utils/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the files a command should format.

Positional arguments may be files, directories or glob patterns:

* files are taken as given, whatever their suffix;
* directories are searched recursively for ``*.vue`` files;
* globs are expanded relative to the current working directory.

Exclude patterns use ``.gitignore`` semantics (via *pathspec*) and are matched
against paths relative to the working directory. The result is sorted and free
of duplicates.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from vuenify.config.logging import get_logger
from vuenify.constants import VUE_FILE_SUFFIX

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vuenify.config.logging import VuenifyLogger

logger: VuenifyLogger = get_logger(__name__)

_GLOB_CHARS: str = "*?["


def _is_glob(raw: str) -> bool:
    return any(c in raw for c in _GLOB_CHARS)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def expand_path(raw: str) -> list[Path]:
    """Expand one positional argument into candidate files.

    Args:
        raw (str): File, directory or glob pattern.

    Returns:
        list[Path]: The files it denotes; empty when nothing matches.
    """
    if _is_glob(raw):
        matches: list[Path] = sorted(Path(".").glob(raw))
        files: list[Path] = []
        for match in matches:
            files.extend(expand_path(str(match)) if match.is_dir() else [match])
        return files
    p = Path(raw)
    if p.is_dir():
        return sorted(f for f in p.rglob(f"*{VUE_FILE_SUFFIX}") if f.is_file())
    if p.is_file():
        return [p]
    return []


def resolve_input_files(
    paths: Iterable[str],
    exclude_patterns: Iterable[str] = (),
    *,
    base: Path | None = None,
) -> tuple[list[Path], list[str]]:
    """Return the files to process and the arguments that matched nothing.

    Args:
        paths (Iterable[str]): Positional arguments from the command line.
        exclude_patterns (Iterable[str]): ``.gitignore``-style patterns to drop.
        base (Path | None): Directory exclude patterns are relative to; defaults
            to the current working directory.

    Returns:
        tuple[list[Path], list[str]]: Sorted unique files, and the raw arguments
        that did not resolve to any file.
    """
    root: Path = base or Path.cwd()
    candidates: set[Path] = set()
    missing: list[str] = []

    for raw in paths:
        expanded: list[Path] = expand_path(raw)
        if not expanded and not Path(raw).is_dir():
            missing.append(raw)
        candidates.update(expanded)

    patterns: list[str] = [p for p in exclude_patterns if p.strip()]
    if patterns:
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, patterns)
        before: int = len(candidates)
        candidates = {p for p in candidates if not spec.match_file(_rel_for_match(p, root))}
        logger.debug("Excluded %d file(s) by pattern", before - len(candidates))

    files: list[Path] = sorted(candidates)
    logger.trace("Files to process: %d -- %s", len(files), files)
    return files, missing
