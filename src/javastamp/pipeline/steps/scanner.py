# topmark:header:start
#
#   project      : JavaStamp
#   file         : scanner.py
#   file_relpath : src/javastamp/pipeline/steps/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scanner step: locate the documentation comment and the type declaration.

Detection is purely line based:

* a line containing ``/*`` opens a comment and discards any earlier opener,
* the first line containing ``*/`` at or after the opener closes it,
* the scan stops at the first line matching ``class`` or ``interface`` that
  does not contain ``*`` (a crude way to skip keywords inside comments).

The comment recognized is therefore the *last* one opened before the
declaration. `locate_structure` is a pure function returning a `DocLayout`;
`validate_layout` enforces the structural preconditions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from javastamp.config.logging import get_logger
from javastamp.constants import COMMENT_CLOSE_RE, COMMENT_OPEN_RE, DECLARATION_RE
from javastamp.errors import FillerLinesError, MalformedCommentError, MissingDeclarationError
from javastamp.pipeline.context import DocLayout
from javastamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from javastamp.config.logging import StampLogger
    from javastamp.pipeline.context import ProcessingContext

logger: StampLogger = get_logger(__name__)


def is_declaration(line: str) -> bool:
    """Return True if ``line`` looks like a top-level type declaration."""
    return "*" not in line and DECLARATION_RE.search(line) is not None


def locate_structure(lines: Sequence[str]) -> DocLayout:
    """Single forward pass over ``lines`` up to the first declaration.

    Args:
        lines (Sequence[str]): Line image without terminators.

    Returns:
        DocLayout: Located indices; any of them may be None.
    """
    comment_start: int | None = None
    comment_end: int | None = None

    for index, line in enumerate(lines):
        if COMMENT_OPEN_RE.search(line):
            comment_start = index
            comment_end = None
        if comment_start is not None and comment_end is None and COMMENT_CLOSE_RE.search(line):
            comment_end = index
        if is_declaration(line):
            logger.trace(
                "Declaration on line %d, comment span %s..%s",
                index + 1,
                comment_start,
                comment_end,
            )
            return DocLayout(
                declaration=index, comment_start=comment_start, comment_end=comment_end
            )

    return DocLayout(declaration=None, comment_start=comment_start, comment_end=comment_end)


def validate_layout(layout: DocLayout, lines: Sequence[str], *, path: Path | None = None) -> None:
    """Check the structural preconditions of ``layout``.

    Args:
        layout (DocLayout): Result of `locate_structure`.
        lines (Sequence[str]): The line image ``layout`` was computed from.
        path (Path | None): File name used in error messages.

    Raises:
        MissingDeclarationError: If no declaration line was found.
        MalformedCommentError: If the comment is unterminated or fits on one line.
        FillerLinesError: If non-blank lines separate the comment from the declaration.
    """
    if layout.declaration is None:
        raise MissingDeclarationError("no class or interface declaration found", path=path)

    if layout.comment_start is None:
        return

    if layout.comment_end is None:
        raise MalformedCommentError(
            f"comment opened on line {layout.comment_start + 1} is not closed before "
            f"the declaration on line {layout.declaration + 1}",
            path=path,
        )
    if layout.comment_start == layout.comment_end:
        raise MalformedCommentError(
            f"comment on line {layout.comment_start + 1} opens and closes on the same line",
            path=path,
        )

    filler: list[int] = [
        i for i in range(layout.comment_end + 1, layout.declaration) if lines[i].strip()
    ]
    if filler:
        raise FillerLinesError(
            f"line {filler[0] + 1} separates the comment ending on line "
            f"{layout.comment_end + 1} from the declaration on line {layout.declaration + 1}",
            path=path,
        )


class ScannerStep(BaseStep):
    """Locate and validate the comment/declaration layout."""

    def __init__(self) -> None:
        super().__init__(name="scanner")

    def run(self, ctx: ProcessingContext) -> None:
        """Fill ``ctx.layout``; raises a `StructureError` on invalid input."""
        layout: DocLayout = locate_structure(ctx.lines)
        validate_layout(layout, ctx.lines, path=ctx.path)
        ctx.layout = layout
        logger.debug("Layout of %s: %s", ctx.path, layout)
