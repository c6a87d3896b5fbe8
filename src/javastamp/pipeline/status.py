# topmark:header:start
#
#   project      : JavaStamp
#   file         : status.py
#   file_relpath : src/javastamp/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis of the JavaStamp pipeline.

Each member carries a human-readable text (its ``value``) and a yachalk
colorizer used when the CLI reports the outcome.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable compatible with `yachalk.ChalkBuilder.__call__`."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return ``args`` joined by ``sep`` and decorated for display."""
        ...


class ColoredStrEnum(str, Enum):
    """String enum whose members also carry a colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    def styled(self) -> str:
        """Return the member text rendered with its colorizer."""
        return self._color(self._value_)


class VersionStatus(ColoredStrEnum):
    """Outcome of the ``@version`` tag handling."""

    PENDING = ("version pending", chalk.gray)
    UNCHANGED = ("version tag up to date", chalk.green)
    NORMALIZED = ("version tag rewritten", chalk.yellow)
    INSERTED = ("version tag added", chalk.yellow)
    SYNTHESIZED = ("documentation comment added", chalk.yellow)


class LicenseStatus(ColoredStrEnum):
    """Outcome of the license block handling."""

    PENDING = ("license pending", chalk.gray)
    PRESENT = ("license present", chalk.green)
    INSERTED = ("license added", chalk.yellow)


class WriteStatus(ColoredStrEnum):
    """Outcome of the writer step."""

    PENDING = ("write pending", chalk.gray)
    UNCHANGED = ("unchanged", chalk.green)
    WRITTEN = ("written", chalk.yellow)
    PREVIEWED = ("would change", chalk.yellow)
