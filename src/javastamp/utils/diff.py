# topmark:header:start
#
#   project      : JavaStamp
#   file         : diff.py
#   file_relpath : src/javastamp/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering for ``--diff``."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from javastamp.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from javastamp.config.logging import StampLogger

logger: StampLogger = get_logger(__name__)


def unified_diff(original: Sequence[str], updated: Sequence[str], *, name: str) -> list[str]:
    """Return a unified diff between two line images (without terminators).

    Args:
        original (Sequence[str]): Lines before stamping.
        updated (Sequence[str]): Lines after stamping.
        name (str): File name shown in the ``---``/``+++`` headers.

    Returns:
        list[str]: Diff lines without terminators; empty when nothing changed.
    """
    patch: list[str] = list(
        difflib.unified_diff(
            list(original),
            list(updated),
            fromfile=f"{name} (original)",
            tofile=f"{name} (stamped)",
            lineterm="",
        )
    )
    logger.trace("Diff for %s has %d lines", name, len(patch))
    return patch


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): Diff lines, or one multiline string.
        show_line_numbers (bool): Prefix each output line with its number.

    Returns:
        str: The colorized preview (no trailing newline).
    """
    lines: list[str] = patch.splitlines() if isinstance(patch, str) else list(patch)

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        if line.startswith(("---", "+++")):
            return chalk.bold(content)
        match line[:1]:
            case "-":
                return chalk.red(content)
            case "+":
                return chalk.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    rendered: list[str] = []
    for number, line in enumerate(lines, start=1):
        text = process_line(line)
        rendered.append(f"{chalk.gray(f'{number:04d}|')} {text}" if show_line_numbers else text)
    return "\n".join(rendered)
