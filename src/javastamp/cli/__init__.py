# topmark:header:start
#
#   project      : JavaStamp
#   file         : __init__.py
#   file_relpath : src/javastamp/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for JavaStamp."""

from __future__ import annotations
