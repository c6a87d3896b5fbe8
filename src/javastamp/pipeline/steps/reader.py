# topmark:header:start
#
#   project      : JavaStamp
#   file         : reader.py
#   file_relpath : src/javastamp/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""File reader step.

Reads the whole target file once, decodes it with the configured encoding and
splits it into a line image. ``\r\n``, ``\r`` and ``\n`` are all accepted as
line terminators; a terminator at the end of the file does not produce an extra
empty line. The original text is kept verbatim so the writer can tell whether a
rewrite would change anything.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from javastamp.config.logging import get_logger
from javastamp.errors import (
    SourceEncodingError,
    SourceNotFoundError,
    SourcePermissionError,
    StampIOError,
)
from javastamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from javastamp.config.logging import StampLogger
    from javastamp.pipeline.context import ProcessingContext

logger: StampLogger = get_logger(__name__)

_LINE_BREAK_RE: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` into lines without terminators.

    >>> split_lines("a\r\nb\n")
    ['a', 'b']
    >>> split_lines("a\n\nb")
    ['a', '', 'b']
    """
    if not text:
        return []
    lines: list[str] = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


class ReaderStep(BaseStep):
    """Load the text image of ``ctx.path``."""

    def __init__(self) -> None:
        super().__init__(name="reader")

    def run(self, ctx: ProcessingContext) -> None:
        """Read and decode the file, filling ``ctx.original_text`` and ``ctx.lines``.

        Raises:
            SourceNotFoundError: If the path does not exist or is not a regular file.
            SourcePermissionError: If the file cannot be read.
            SourceEncodingError: If the content is not valid in the configured encoding.
            StampIOError: On any other OS-level read failure.
        """
        try:
            raw: bytes = ctx.path.read_bytes()
        except FileNotFoundError as e:
            raise SourceNotFoundError("file not found", path=ctx.path) from e
        except IsADirectoryError as e:
            raise SourceNotFoundError("not a regular file", path=ctx.path) from e
        except PermissionError as e:
            raise SourcePermissionError("permission denied (read)", path=ctx.path) from e
        except OSError as e:
            raise StampIOError(f"read error: {e.strerror or e}", path=ctx.path) from e

        try:
            text: str = raw.decode(ctx.config.encoding)
        except UnicodeDecodeError as e:
            raise SourceEncodingError(
                f"cannot decode as {ctx.config.encoding} at byte {e.start}", path=ctx.path
            ) from e

        ctx.original_text = text
        ctx.lines = split_lines(text)
        logger.debug("Read %d lines (%d bytes) from %s", len(ctx.lines), len(raw), ctx.path)
