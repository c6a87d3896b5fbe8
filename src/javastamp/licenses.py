# topmark:header:start
#
#   project      : JavaStamp
#   file         : licenses.py
#   file_relpath : src/javastamp/licenses.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""License notices prepended to Java sources.

A `LicenseNotice` pairs the verbatim block comment with a *marker phrase*: a
literal that only occurs in that notice and is used to detect whether a file
already carries it. Two historical notices are built in; a custom notice can be
loaded from a text file via
[`load_license_file`][javastamp.licenses.load_license_file].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from javastamp.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from javastamp.config.logging import StampLogger

logger: StampLogger = get_logger(__name__)


@dataclass(frozen=True)
class LicenseNotice:
    """A license block and the phrase that identifies it.

    Attributes:
        key (str): Short identifier (``lgpl``, ``epl`` or ``custom``).
        lines (tuple[str, ...]): The block comment, one entry per line, without terminators.
        marker (str): Literal phrase unique to the notice.
    """

    key: str
    lines: tuple[str, ...]
    marker: str

    def __post_init__(self) -> None:
        if not self.marker:
            raise ValueError(f"License notice '{self.key}' needs a non-empty marker phrase")
        if not any(self.marker in line for line in self.lines):
            raise ValueError(
                f"Marker phrase {self.marker!r} does not occur on a single line "
                f"of license notice '{self.key}'"
            )

    def is_present(self, lines: list[str]) -> bool:
        """Return True if any of ``lines`` contains the marker phrase."""
        return any(self.marker in line for line in lines)


LGPL_NOTICE = LicenseNotice(
    key="lgpl",
    marker="The JTS Topology Suite is a collection of Java classes",
    lines=(
        "/*",
        " * The JTS Topology Suite is a collection of Java classes that",
        " * implement the fundamental operations required to validate a given",
        " * geo-spatial data set to a known topological specification.",
        " *",
        " * Copyright (C) 2001 Vivid Solutions",
        " *",
        " * This library is free software; you can redistribute it and/or",
        " * modify it under the terms of the GNU Lesser General Public",
        " * License as published by the Free Software Foundation; either",
        " * version 2.1 of the License, or (at your option) any later version.",
        " *",
        " * This library is distributed in the hope that it will be useful,",
        " * but WITHOUT ANY WARRANTY; without even the implied warranty of",
        " * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU",
        " * Lesser General Public License for more details.",
        " *",
        " * You should have received a copy of the GNU Lesser General Public",
        " * License along with this library; if not, write to the Free Software",
        " * Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA  02111-1307  USA",
        " *",
        " * For more information, contact:",
        " *",
        " *     Vivid Solutions",
        " *     Suite #1A",
        " *     2328 Government Street",
        " *     Victoria BC  V8T 5G5",
        " *     Canada",
        " *",
        " *     (250)385-6040",
        " *     www.vividsolutions.com",
        " */",
    ),
)

EPL_NOTICE = LicenseNotice(
    key="epl",
    marker="Eclipse Public License",
    lines=(
        "/*",
        " * Copyright (c) 2016 Vivid Solutions.",
        " *",
        " * All rights reserved. This program and the accompanying materials",
        " * are made available under the terms of the Eclipse Public License v1.0",
        " * and Eclipse Distribution License v. 1.0 which accompanies this distribution.",
        " * The Eclipse Public License is available at http://www.eclipse.org/legal/epl-v10.html",
        " * and the Eclipse Distribution License is available at",
        " *",
        " * http://www.eclipse.org/org/documents/edl-v10.php.",
        " */",
    ),
)

BUILTIN_NOTICES: dict[str, LicenseNotice] = {
    LGPL_NOTICE.key: LGPL_NOTICE,
    EPL_NOTICE.key: EPL_NOTICE,
}


def get_notice(key: str) -> LicenseNotice:
    """Return the built-in notice registered under ``key``.

    Args:
        key (str): Notice identifier (case-insensitive).

    Returns:
        LicenseNotice: The matching built-in notice.

    Raises:
        KeyError: If no built-in notice is registered under ``key``.
    """
    try:
        return BUILTIN_NOTICES[key.strip().lower()]
    except KeyError:
        raise KeyError(
            f"Unknown license '{key}' (expected one of: {', '.join(sorted(BUILTIN_NOTICES))})"
        ) from None


def load_license_file(path: Path, marker: str, *, encoding: str = "utf-8") -> LicenseNotice:
    """Load a custom license block from ``path``.

    The file is taken verbatim; trailing blank lines are dropped so the block
    sits directly on top of the remaining source.

    Args:
        path (Path): Text file holding the complete block comment.
        marker (str): Literal phrase identifying the notice.
        encoding (str): Text encoding of the license file.

    Returns:
        LicenseNotice: The custom notice (``key == "custom"``).

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the marker is empty or absent from the file.
    """
    text: str = path.read_text(encoding=encoding)
    lines: list[str] = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    logger.debug("Loaded custom license notice from %s (%d lines)", path, len(lines))
    return LicenseNotice(key="custom", lines=tuple(lines), marker=marker)
