# topmark:header:start
#
#   project      : JavaStamp
#   file         : constants.py
#   file_relpath : src/javastamp/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JavaStamp Constants."""

from __future__ import annotations

import re
from importlib.metadata import version as get_version

JAVASTAMP_VERSION: str = get_version("javastamp")

# Value written into every `@version` tag unless overridden by config or CLI.
DEFAULT_VERSION_TAG: str = "1.4"

DEFAULT_LICENSE_KEY: str = "lgpl"
DEFAULT_ENCODING: str = "utf-8"

CONFIG_FILE_NAME: str = "javastamp.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "javastamp"

LOG_LEVEL_ENV_VAR: str = "JAVASTAMP_LOG_LEVEL"

# Line-level heuristics (no Java lexer involved).
COMMENT_OPEN_RE: re.Pattern[str] = re.compile(r"/\*")
COMMENT_CLOSE_RE: re.Pattern[str] = re.compile(r"\*/")
DECLARATION_RE: re.Pattern[str] = re.compile(r"\b(class|interface)\b")
VERSION_TAG_RE: re.Pattern[str] = re.compile(r"@version\b.*?(?P<close>\s*\*/\s*)?$")

VERSION_TAG_KEYWORD: str = "@version"
