# topmark:header:start
#
#   project      : Vuenify
#   file         : exit_codes.py
#   file_relpath : src/vuenify/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Vuenify CLI.

Vuenify aligns with the BSD `sysexits` convention where practical, so other tooling
can interpret failures consistently. The one deliberate divergence is `WOULD_CHANGE=2`,
which signals a dry run that found files to reformat. Click also uses 2 for its own
usage errors, so tests must assert `result.exception is None` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Vuenify CLI.

    Attributes:
        SUCCESS: Nothing to change, or changes were written.
        FAILURE: Generic failure. Prefer a more specific code if available.
        WOULD_CHANGE: Dry run: files would change if ``--apply`` were set.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: A file is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Reading or writing a file failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid or malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
