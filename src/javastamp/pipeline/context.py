# topmark:header:start
#
#   project      : JavaStamp
#   file         : context.py
#   file_relpath : src/javastamp/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context shared by the pipeline steps.

The context holds everything known about one file while it travels through the
pipeline: the original text, its line image, the located `DocLayout`, the
updated line image and the per-axis statuses.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from javastamp.pipeline.status import LicenseStatus, VersionStatus, WriteStatus

if TYPE_CHECKING:
    from pathlib import Path

    from javastamp.config.model import Config


@dataclass(frozen=True)
class DocLayout:
    """Where the documentation comment and the type declaration sit.

    All indices are 0-based positions in the line image.

    Attributes:
        declaration (int | None): First ``class``/``interface`` line outside a comment.
        comment_start (int | None): Line of the last ``/*`` opened before the declaration.
        comment_end (int | None): First line containing ``*/`` at or after ``comment_start``.
    """

    declaration: int | None = None
    comment_start: int | None = None
    comment_end: int | None = None

    @property
    def has_comment(self) -> bool:
        """True when a comment was opened before the declaration."""
        return self.comment_start is not None

    @property
    def head_end(self) -> int:
        """Index where the lines preceding the comment (or declaration) end."""
        if self.comment_start is not None:
            return self.comment_start
        if self.declaration is None:
            raise ValueError("DocLayout has no declaration")
        return self.declaration


@dataclass
class StampStatus:
    """Per-axis statuses for a processed file."""

    version: VersionStatus = VersionStatus.PENDING
    license: LicenseStatus = LicenseStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING


@dataclass
class ProcessingContext:
    """Mutable state of one file travelling through the pipeline.

    Attributes:
        path (Path): The target file.
        config (Config): Frozen runtime configuration.
        original_text (str | None): File content as read, line terminators untouched.
        lines (list[str]): Line image of ``original_text`` without terminators.
        layout (DocLayout | None): Result of the scanner step.
        updated (list[str] | None): Line image produced by the updater step.
        status (StampStatus): Per-axis statuses.
        steps (list[str]): Names of the steps that ran, in order.
    """

    path: Path
    config: Config
    original_text: str | None = None
    lines: list[str] = field(default_factory=lambda: [])
    layout: DocLayout | None = None
    updated: list[str] | None = None
    status: StampStatus = field(default_factory=StampStatus)
    steps: list[str] = field(default_factory=lambda: [])

    def render(self) -> str:
        """Return the updated content as it is written to disk.

        Every line, including the last, is followed by the platform line
        terminator.
        """
        if self.updated is None:
            raise ValueError(f"{self.path}: nothing rendered yet")
        return "".join(line + os.linesep for line in self.updated)

    @property
    def would_change(self) -> bool:
        """True when writing the updated content would alter the file."""
        if self.updated is None:
            return False
        return self.render() != self.original_text

    def summary(self) -> str:
        """Return a one-line, uncolored outcome summary."""
        return (
            f"{self.path}: {self.status.version.value}, "
            f"{self.status.license.value}, {self.status.write.value}"
        )
