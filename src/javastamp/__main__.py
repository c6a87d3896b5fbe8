# topmark:header:start
#
#   project      : JavaStamp
#   file         : __main__.py
#   file_relpath : src/javastamp/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running JavaStamp via ``python -m javastamp``.

Delegates to :func:`javastamp.cli.main.cli`, the same entry point as the
``javastamp`` console script.

Examples:
    Stamp a single file::

        python -m javastamp src/com/example/Foo.java
"""

from __future__ import annotations

from javastamp.cli.main import cli

if __name__ == "__main__":
    cli()
