# topmark:header:start
#
#   project      : JavaStamp
#   file         : options.py
#   file_relpath : src/javastamp/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable CLI options (verbosity, color) and their resolution logic."""

from __future__ import annotations

import os
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from javastamp.cli.errors import StampUsageError

P = ParamSpec("P")
R = TypeVar("R")


class ColorMode(str, Enum):
    """Color policy selected with ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count.

    Raises:
        StampUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise StampUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def resolve_color_mode(mode: ColorMode | None, *, no_color: bool = False) -> bool | None:
    """Return the color flag for `click.echo` (None means decide per stream).

    ``--no-color`` and the ``NO_COLOR`` environment variable win over ``--color=auto``;
    ``--color=always`` still wins over ``NO_COLOR``.
    """
    if no_color or mode == ColorMode.NEVER:
        return False
    if mode == ColorMode.ALWAYS:
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Report what was done (repeat for more detail).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress all output except errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode], case_sensitive=False),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value.lower()) if value else None,
        help="Colorize output (default: auto).",
    )(f)
    f = click.option(
        "--no-color",
        is_flag=True,
        default=False,
        help="Disable colored output.",
    )(f)
    return f
