# topmark:header:start
#
#   project      : JavaStamp
#   file         : writer.py
#   file_relpath : src/javastamp/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step for committing updated content.

This is the only step that touches the filesystem for writing. It runs after
the scanner and updater succeeded, so a structural error never reaches it.

Sinks
-----
- FileSystemSink: overwrites ``ctx.path`` in place (no backup).
- NullSink: no-op (``--check`` / ``apply_changes = False``).

Content identical to the file on disk is not rewritten.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from javastamp.config.logging import get_logger
from javastamp.errors import SourceEncodingError, SourcePermissionError, StampIOError
from javastamp.pipeline.status import WriteStatus
from javastamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from javastamp.config.logging import StampLogger
    from javastamp.pipeline.context import ProcessingContext

logger: StampLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for write sinks used by the writer step."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Commit ``ctx.updated`` and report what happened."""
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Report ``PREVIEWED`` without writing.

        Args:
            ctx (ProcessingContext): Processing context for the current file.

        Returns:
            WriteResult: ``PREVIEWED`` with zero bytes written.
        """
        return WriteResult(status=WriteStatus.PREVIEWED)


class FileSystemSink:
    """Filesystem sink that writes in-place to ``ctx.path``."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Overwrite ``ctx.path`` with the rendered content.

        Args:
            ctx (ProcessingContext): Processing context containing the updated lines.

        Returns:
            WriteResult: ``WRITTEN`` with the number of encoded bytes written.

        Raises:
            SourcePermissionError: If the file is not writable.
            SourceEncodingError: If the result cannot be encoded.
            StampIOError: On any other OS-level write failure.
        """
        text: str = ctx.render()
        try:
            data: bytes = text.encode(ctx.config.encoding)
        except UnicodeEncodeError as e:
            raise SourceEncodingError(
                f"cannot encode result as {ctx.config.encoding}", path=ctx.path
            ) from e
        try:
            ctx.path.write_bytes(data)
        except PermissionError as e:
            raise SourcePermissionError("permission denied (write)", path=ctx.path) from e
        except OSError as e:
            raise StampIOError(f"write error: {e.strerror or e}", path=ctx.path) from e
        logger.debug("FileSystemSink: wrote %d bytes to file %s", len(data), ctx.path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=len(data))


def select_sink(ctx: ProcessingContext) -> WriteSink:
    """Return ``FileSystemSink`` when applying changes, otherwise ``NullSink``."""
    if ctx.config.apply_changes:
        return FileSystemSink()
    return NullSink()


class WriterStep(BaseStep):
    """Commit ``ctx.updated`` to the selected sink."""

    def __init__(self) -> None:
        super().__init__(name="writer")

    def run(self, ctx: ProcessingContext) -> None:
        """Write when the content changes; set ``ctx.status.write``."""
        if ctx.updated is None:
            raise RuntimeError(f"{ctx.path}: writer ran before updater")
        if not ctx.would_change:
            ctx.status.write = WriteStatus.UNCHANGED
            logger.debug("File unchanged - nothing to write: %s", ctx.path)
            return
        result: WriteResult = select_sink(ctx).write(ctx=ctx)
        ctx.status.write = result.status
