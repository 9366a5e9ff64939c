# topmark:header:start
#
#   project      : Vuenify
#   file         : check.py
#   file_relpath : src/vuenify/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Vuenify `check` command (dry run by default, ``--apply`` to write).

Input modes supported:
  * **Paths mode (default)**: files, directories (searched for ``*.vue``) and globs.
  * **Content on STDIN**: a single ``-`` as the sole PATH. The formatted content
    (or, with ``--diff``, the diff) is written to STDOUT.

Examples:
  Preview which files would change:

    $ vuenify check src

  Write changes and show diffs:

    $ vuenify check --apply --diff .

  Format content from STDIN:

    $ cat App.vue | vuenify check -
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from vuenify.cli.config_resolver import resolve_config_from_click
from vuenify.cli.errors import (
    VuenifyEncodingError,
    VuenifyFileNotFoundError,
    VuenifyIOError,
    VuenifyUnexpectedError,
    VuenifyUsageError,
)
from vuenify.cli.exit_codes import ExitCode
from vuenify.cli.options import CONTEXT_SETTINGS, common_config_options, common_format_options
from vuenify.config.logging import get_logger
from vuenify.constants import VUE_FILE_SUFFIX
from vuenify.core.errors import OverlappingReplacementsError
from vuenify.template.transformer import format_text
from vuenify.utils.diff import render_patch, unified_diff
from vuenify.utils.files import resolve_input_files

if TYPE_CHECKING:
    from vuenify.cli.console import ClickConsole
    from vuenify.config.logging import VuenifyLogger
    from vuenify.config.model import Config, Preset

logger: VuenifyLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def read_source(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation.

    Raises:
        VuenifyEncodingError: If the file is not valid UTF-8.
        VuenifyIOError: If the file cannot be read.
    """
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise VuenifyEncodingError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise VuenifyIOError(f"{path}: cannot read file ({exc.strerror or exc})") from exc


def write_source(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8 without newline translation.

    Raises:
        VuenifyIOError: If the file cannot be written.
    """
    try:
        path.write_bytes(text.encode("utf-8"))
    except OSError as exc:
        raise VuenifyIOError(f"{path}: cannot write file ({exc.strerror or exc})") from exc


def is_bare_markup(name: str) -> bool:
    """True for inputs formatted as a whole document rather than an SFC template."""
    return not name.endswith(VUE_FILE_SUFFIX)


def format_source(original: str, config: Config, name: str) -> str:
    """Format one input, picking SFC or bare-markup mode from its name.

    Raises:
        VuenifyUnexpectedError: If the computed edits are inconsistent.
    """
    try:
        return format_text(original, config, whole_document=is_bare_markup(name))
    except OverlappingReplacementsError as exc:
        logger.error("Inconsistent edits for %s: %s", name, exc)
        raise VuenifyUnexpectedError(f"{name}: internal formatting error ({exc})") from exc


def _emit_diff(console: ClickConsole, original: str, updated: str, name: str) -> None:
    diff_text: str = unified_diff(original, updated, name)
    if not diff_text:
        return
    if console.enable_color:
        console.print(render_patch(diff_text), nl=False)
    else:
        console.print(diff_text, nl=False)


def _check_stdin(
    console: ClickConsole,
    config: Config,
    *,
    stdin_filename: str,
    show_diff: bool,
) -> ExitCode:
    raw: bytes = click.get_binary_stream("stdin").read()
    try:
        original: str = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise VuenifyEncodingError(f"<stdin>: not valid UTF-8 ({exc.reason})") from exc

    updated: str = format_source(original, config, stdin_filename)
    if show_diff:
        _emit_diff(console, original, updated, stdin_filename)
        return ExitCode.WOULD_CHANGE if updated != original else ExitCode.SUCCESS
    console.print(updated, nl=False)
    return ExitCode.SUCCESS


def _check_files(
    console: ClickConsole,
    config: Config,
    files: list[Path],
    *,
    apply_changes: bool,
    show_diff: bool,
    verbose: bool,
    quiet: bool,
) -> ExitCode:
    changed: int = 0
    unchanged: int = 0
    errors: list[click.ClickException] = []

    for path in files:
        try:
            original: str = read_source(path)
        except (VuenifyEncodingError, VuenifyIOError) as exc:
            logger.error("%s", exc.format_message())
            console.error(exc.format_message())
            errors.append(exc)
            continue

        updated: str = format_source(original, config, str(path))
        if updated == original:
            unchanged += 1
            if verbose:
                console.print(f"unchanged {path}")
            continue

        changed += 1
        if show_diff:
            _emit_diff(console, original, updated, str(path))
        if apply_changes:
            try:
                write_source(path, updated)
            except VuenifyIOError as exc:
                console.error(exc.format_message())
                errors.append(exc)
                continue
            if not quiet:
                console.print(f"reformatted {path}")
        elif not quiet:
            console.print(f"would reformat {path}")

    if not quiet:
        verb: str = "reformatted" if apply_changes else "would be reformatted"
        console.print(
            console.styled(f"{changed} file(s) {verb}, {unchanged} file(s) unchanged.", bold=True)
        )

    if errors:
        raise errors[0]
    if changed and not apply_changes:
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS


@click.command(
    name="check",
    help="Check Vue templates (dry run). Use --apply to rewrite files in place.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Preview which files would change (dry run)
  vuenify check src

  # Apply: rewrite files in place and show what changed
  vuenify check --apply --diff .
""",
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_format_options
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", "show_diff", is_flag=True, help="Show unified diffs.")
@click.option(
    "--exclude",
    "-e",
    "exclude_patterns",
    multiple=True,
    help="Remove files matching these .gitignore-style patterns.",
)
@click.option(
    "--stdin-filename",
    "stdin_filename",
    default=f"stdin{VUE_FILE_SUFFIX}",
    show_default=True,
    help="Assumed filename for content read from STDIN via '-'; a non-.vue name "
    "formats the whole input as template markup.",
)
def check_command(
    *,
    paths: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    preset: Preset | None,
    apply_changes: bool,
    show_diff: bool,
    exclude_patterns: tuple[str, ...],
    stdin_filename: str,
    **format_flags: Any,
) -> None:
    """Format the templates of the given files, or report which would change.

    Args:
        paths (tuple[str, ...]): Files, directories or globs; ``-`` reads STDIN.
        config_paths (tuple[str, ...]): Extra config files (``--config``).
        no_config (bool): Skip project config discovery.
        preset (Preset | None): Restrict the run to one group of passes.
        apply_changes (bool): Write changes in place.
        show_diff (bool): Print unified diffs of the changes.
        exclude_patterns (tuple[str, ...]): ``.gitignore``-style exclusions.
        stdin_filename (str): Name used for STDIN content.
        **format_flags (Any): Per-option formatting flags (``None`` when not given).
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    stdin_mode: bool = STDIN_MARKER in paths
    if stdin_mode and len(paths) > 1:
        raise VuenifyUsageError("'-' (STDIN) must be the only PATH.")
    if stdin_mode and apply_changes:
        raise VuenifyUsageError("--apply cannot be used with '-' (STDIN); output goes to STDOUT.")

    config: Config = resolve_config_from_click(
        paths=paths,
        config_paths=config_paths,
        no_config=no_config,
        preset=preset,
        flags=format_flags,
    )

    if stdin_mode:
        ctx.exit(_check_stdin(console, config, stdin_filename=stdin_filename, show_diff=show_diff))

    if not paths:
        console.print("No files to process. Usage: vuenify check [PATHS]...")
        ctx.exit(ExitCode.SUCCESS)

    files, missing = resolve_input_files(paths, exclude_patterns)
    for raw in missing:
        console.warn(f"No such file or directory: {raw}")
    if not files:
        if missing:
            raise VuenifyFileNotFoundError(f"No input files found: {', '.join(missing)}")
        console.print("No .vue files found.")
        ctx.exit(ExitCode.SUCCESS)

    quiet: bool = bool(ctx.obj.get("quiet", False))
    verbose: bool = int(ctx.obj.get("verbosity_level", 0)) > 0
    ctx.exit(
        _check_files(
            console,
            config,
            files,
            apply_changes=apply_changes,
            show_diff=show_diff,
            verbose=verbose,
            quiet=quiet,
        )
    )
