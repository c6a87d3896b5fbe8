# topmark:header:start
#
#   project      : JavaStamp
#   file         : exit_codes.py
#   file_relpath : src/javastamp/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the JavaStamp CLI.

JavaStamp aligns with the BSD `sysexits` convention where practical, so that a
batch driver can tell failure categories apart. ``WOULD_CHANGE = 2`` is the one
divergence: it signals that ``--check`` found work to do. Click's own usage
errors also exit with 2, so tests must assert ``result.exception is None`` to
disambiguate.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the JavaStamp CLI.

    Attributes:
        SUCCESS: The file was stamped (or already up to date).
        FAILURE: Generic failure.
        WOULD_CHANGE: ``--check``: the file would be rewritten.
        USAGE_ERROR: Invalid flags/args. Mirrors BSD ``EX_USAGE (64)``.
        MALFORMED_SOURCE: The file violates the structural preconditions or
            cannot be decoded. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: Internal failure. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing the file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    MALFORMED_SOURCE = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
