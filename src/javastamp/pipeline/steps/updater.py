# topmark:header:start
#
#   project      : JavaStamp
#   file         : updater.py
#   file_relpath : src/javastamp/pipeline/steps/updater.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Updater step: stamp the version tag and the license block.

The validated line image is cut into three segments,

    head    = lines before the comment (or before the declaration)
    comment = the documentation comment (synthesized when absent)
    body    = blank lines after the comment, the declaration and the rest

and reassembled as ``license? + head + comment + body``. Lines outside the
comment are never modified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from javastamp.config.logging import get_logger
from javastamp.constants import VERSION_TAG_KEYWORD, VERSION_TAG_RE
from javastamp.pipeline.status import LicenseStatus, VersionStatus
from javastamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Sequence

    from javastamp.config.logging import StampLogger
    from javastamp.licenses import LicenseNotice
    from javastamp.pipeline.context import DocLayout, ProcessingContext

logger: StampLogger = get_logger(__name__)


def version_line(version: str) -> str:
    """Return the tag text written for ``version`` (``@version 1.4``)."""
    return f"{VERSION_TAG_KEYWORD} {version}"


def has_version_tag(comment: Sequence[str]) -> bool:
    """Return True if any line of ``comment`` carries an ``@version`` tag."""
    return any(VERSION_TAG_RE.search(line) for line in comment)


def synthesize_comment(version: str) -> list[str]:
    """Return the minimal two-line comment holding only the version tag."""
    return [f"/** {version_line(version)}", " */"]


def normalize_version(comment: Sequence[str], version: str) -> list[str]:
    """Rewrite every ``@version ...`` in ``comment`` to ``@version <version>``.

    Whatever follows the keyword is replaced, except a ``*/`` closing the comment
    on the same line.
    """
    replacement: str = version_line(version)
    return [
        VERSION_TAG_RE.sub(lambda m: replacement + (m.group("close") or ""), line, count=1)
        for line in comment
    ]


def ensure_version(comment: Sequence[str], version: str) -> list[str]:
    """Insert ``" *"`` and a version tag before the closing line if no tag exists."""
    out: list[str] = list(comment)
    if has_version_tag(out):
        return out
    out[-1:-1] = [" *", f" * {version_line(version)}"]
    return out


def license_block(head: Sequence[str], notice: LicenseNotice) -> list[str]:
    """Return the lines to prepend: the notice, or nothing if ``head`` has its marker."""
    if notice.is_present(list(head)):
        return []
    return list(notice.lines)


def stamp_lines(
    lines: Sequence[str],
    layout: DocLayout,
    *,
    version: str,
    notice: LicenseNotice,
) -> tuple[list[str], VersionStatus, LicenseStatus]:
    """Apply version and license stamping to a validated line image.

    Args:
        lines (Sequence[str]): The original line image.
        layout (DocLayout): Validated layout of ``lines``.
        version (str): Value for the ``@version`` tag.
        notice (LicenseNotice): License notice to ensure.

    Returns:
        tuple[list[str], VersionStatus, LicenseStatus]: The new line image and the
        outcome for each axis.
    """
    if layout.declaration is None:
        raise ValueError("cannot stamp a layout without declaration")
    head: list[str] = list(lines[: layout.head_end])

    if layout.comment_start is None or layout.comment_end is None:
        body: list[str] = list(lines[layout.declaration :])
        comment: list[str] = synthesize_comment(version)
        version_status = VersionStatus.SYNTHESIZED
    else:
        original: list[str] = list(lines[layout.comment_start : layout.comment_end + 1])
        # blank lines between the comment and the declaration stay in the body
        body = list(lines[layout.comment_end + 1 :])
        comment = normalize_version(original, version)
        version_status = (
            VersionStatus.NORMALIZED if comment != original else VersionStatus.UNCHANGED
        )
        if not has_version_tag(comment):
            comment = ensure_version(comment, version)
            version_status = VersionStatus.INSERTED

    prefix: list[str] = license_block(head, notice)
    license_status = LicenseStatus.INSERTED if prefix else LicenseStatus.PRESENT

    return prefix + head + comment + body, version_status, license_status


class UpdaterStep(BaseStep):
    """Compute ``ctx.updated`` from the validated layout."""

    def __init__(self) -> None:
        super().__init__(name="updater")

    def run(self, ctx: ProcessingContext) -> None:
        """Stamp ``ctx.lines`` according to ``ctx.config``."""
        if ctx.layout is None:
            raise RuntimeError(f"{ctx.path}: updater ran before scanner")
        updated, version_status, license_status = stamp_lines(
            ctx.lines,
            ctx.layout,
            version=ctx.config.version,
            notice=ctx.config.notice,
        )
        ctx.updated = updated
        ctx.status.version = version_status
        ctx.status.license = license_status
        logger.debug(
            "Updated %s: %s, %s (%d -> %d lines)",
            ctx.path,
            version_status.value,
            license_status.value,
            len(ctx.lines),
            len(updated),
        )
