# topmark:header:start
#
#   project      : JavaStamp
#   file         : io.py
#   file_relpath : src/javastamp/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

JavaStamp reads its settings from ``javastamp.toml`` or from the
``[tool.javastamp]`` table of ``pyproject.toml``. Parsing is done with `tomlkit`
and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from javastamp.config.logging import get_logger
from javastamp.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from javastamp.errors import ConfigError

if TYPE_CHECKING:
    from javastamp.config.logging import StampLogger

logger: StampLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``javastamp.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python containers.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read config file: {e.strerror or e}", path=path) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML: {e}", path=path) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_settings(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the JavaStamp settings table contained in ``data``.

    For ``pyproject.toml`` this is ``[tool.javastamp]``; any other file holds the
    settings at the top level.

    Returns:
        TomlTable | None: The settings, or None when a ``pyproject.toml`` has no
        ``[tool.javastamp]`` table.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    return cast("TomlTable", section)


def discover_config_file(start: Path | None = None) -> Path | None:
    """Find the config file governing the current working directory.

    ``javastamp.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it carries a ``[tool.javastamp]`` table. Only ``start`` itself is
    searched, not its parents.

    Args:
        start (Path | None): Directory to look in; defaults to the current directory.

    Returns:
        Path | None: The config file to load, or None.
    """
    base: Path = start if start is not None else Path.cwd()
    tool_file: Path = base / CONFIG_FILE_NAME
    if tool_file.is_file():
        logger.debug("Discovered config file %s", tool_file)
        return tool_file
    pyproject: Path = base / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        try:
            settings: TomlTable | None = extract_settings(pyproject, load_toml_dict(pyproject))
        except ConfigError as e:
            # Discovery skips a broken pyproject.toml; explicit --config does not.
            logger.warning("Ignoring %s: %s", pyproject, e.message)
            return None
        if settings is not None:
            logger.debug("Discovered [tool.%s] in %s", PYPROJECT_TOOL_SECTION, pyproject)
            return pyproject
    return None
