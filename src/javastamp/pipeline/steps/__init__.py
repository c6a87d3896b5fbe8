# topmark:header:start
#
#   project      : JavaStamp
#   file         : __init__.py
#   file_relpath : src/javastamp/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline steps (reader, scanner, updater, writer)."""

from __future__ import annotations
