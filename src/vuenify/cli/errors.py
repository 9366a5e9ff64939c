# topmark:header:start
#
#   project      : Vuenify
#   file         : errors.py
#   file_relpath : src/vuenify/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Vuenify CLI.

Raise these in commands to stop with a standardized message and exit code.
They print through the project console when one is attached to the Click
context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from vuenify.cli.exit_codes import ExitCode


class VuenifyCliError(click.ClickException):
    """Base class for all Vuenify CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class VuenifyUsageError(VuenifyCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class VuenifyConfigError(VuenifyCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class VuenifyFileNotFoundError(VuenifyCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class VuenifyIOError(VuenifyCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class VuenifyEncodingError(VuenifyCliError):
    """Error for text decoding errors (UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR



class VuenifyUnexpectedError(VuenifyCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
