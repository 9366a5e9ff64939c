# topmark:header:start
#
#   project      : Vuenify
#   file         : diff.py
#   file_relpath : src/vuenify/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview for formatted files."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from vuenify.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vuenify.config.logging import VuenifyLogger

logger: VuenifyLogger = get_logger(__name__)


def unified_diff(original: str, updated: str, path: str) -> str:
    """Return a unified diff between two versions of a file.

    Line endings are kept exactly as they appear in the inputs.

    Args:
        original (str): Content before formatting.
        updated (str): Content after formatting.
        path (str): Display name used in the ``---``/``+++`` headers.

    Returns:
        str: The diff text, or ``""`` when both versions are identical.
    """
    if original == updated:
        return ""
    patch_lines: list[str] = list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (formatted)",
            n=3,
        )
    )
    # A last line without a newline would otherwise run into the next header.
    text: str = "".join(line if line.endswith("\n") else line + "\n" for line in patch_lines)
    logger.trace("Diff for %s: %d line(s)", path, len(patch_lines))
    return text


def render_patch(patch: Sequence[str] | str) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): The diff as a sequence of lines or one
            multiline string.

    Returns:
        str: The colorized preview.
    """
    lines: list[str] = patch.splitlines() if isinstance(patch, str) else list(patch)

    def process_line(line: str) -> str:
        # Show stray carriage returns explicitly.
        content: str = line.rstrip("\n").replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    return "".join(f"{process_line(line)}\n" for line in lines)
