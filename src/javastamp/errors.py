# topmark:header:start
#
#   project      : JavaStamp
#   file         : errors.py
#   file_relpath : src/javastamp/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing errors raised by the JavaStamp pipeline.

Every failure is fatal for the file being processed: the pipeline validates the
whole file in memory before anything is written, so raising one of these never
leaves a partially rewritten file behind. The CLI maps each class onto an exit
code (see `javastamp.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class StampError(Exception):
    """Base class for all JavaStamp processing errors."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.path: Path | None = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


class StructureError(StampError):
    """The source does not have the shape the line heuristics rely on."""


class MissingDeclarationError(StructureError):
    """No ``class`` or ``interface`` declaration line was found."""


class MalformedCommentError(StructureError):
    """The comment preceding the declaration is unterminated or a single line."""


class FillerLinesError(StructureError):
    """Non-blank lines sit between the documentation comment and the declaration."""


class StampIOError(StampError):
    """Reading or writing the target file failed."""


class SourceNotFoundError(StampIOError):
    """The target path does not exist or is not a regular file."""


class SourcePermissionError(StampIOError):
    """The target file cannot be read or written due to permissions."""


class SourceEncodingError(StampIOError):
    """The target file cannot be decoded with the configured encoding."""


class ConfigError(StampError):
    """A configuration source is missing, malformed or holds invalid values."""
