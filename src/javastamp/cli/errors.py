# topmark:header:start
#
#   project      : JavaStamp
#   file         : errors.py
#   file_relpath : src/javastamp/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the JavaStamp CLI.

Pipeline errors (`javastamp.errors`) are translated into these
`click.ClickException` subclasses by `to_cli_error`, which selects the exit
code. Messages are printed through the project console when one is present in
the Click context, otherwise with Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from javastamp.cli.exit_codes import ExitCode
from javastamp.errors import (
    ConfigError,
    SourceEncodingError,
    SourceNotFoundError,
    SourcePermissionError,
    StampError,
    StampIOError,
    StructureError,
)


class StampCliError(click.ClickException):
    """Base class for all JavaStamp CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
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


class StampUsageError(StampCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class StampStructureError(StampCliError):
    """The source file violates the structural preconditions or cannot be decoded."""

    exit_code = ExitCode.MALFORMED_SOURCE


class StampFileNotFoundError(StampCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class StampPermissionDeniedError(StampCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class StampCliIOError(StampCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class StampConfigError(StampCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class StampPipelineError(StampCliError):
    """Error for internal pipeline failures."""

    exit_code = ExitCode.PIPELINE_ERROR


_ERROR_MAP: tuple[tuple[type[StampError], type[StampCliError]], ...] = (
    (ConfigError, StampConfigError),
    (StructureError, StampStructureError),
    (SourceEncodingError, StampStructureError),
    (SourceNotFoundError, StampFileNotFoundError),
    (SourcePermissionError, StampPermissionDeniedError),
    (StampIOError, StampCliIOError),
)


def to_cli_error(exc: StampError) -> StampCliError:
    """Translate a pipeline error into the CLI exception carrying its exit code.

    The most specific match wins; unknown `StampError` subclasses become a
    `StampPipelineError`.
    """
    for source_cls, cli_cls in _ERROR_MAP:
        if isinstance(exc, source_cls):
            return cli_cls(str(exc))
    return StampPipelineError(str(exc))
