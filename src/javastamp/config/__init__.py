# topmark:header:start
#
#   project      : JavaStamp
#   file         : __init__.py
#   file_relpath : src/javastamp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for JavaStamp.

Submodules:
    - `javastamp.config.model`: `MutableConfig` builder and frozen `Config`.
    - `javastamp.config.io`: config file discovery and TOML loading (tomlkit).
    - `javastamp.config.logging`: TRACE-aware, colored internal logging.
"""

from __future__ import annotations
