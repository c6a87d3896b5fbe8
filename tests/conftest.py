# topmark:header:start
#
#   project      : JavaStamp
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the JavaStamp test suite.

Sets TRACE logging for test runs, shields tests from a developer's
``JAVASTAMP_LOG_LEVEL``/``NO_COLOR`` and provides small fixtures for writing
Java sources and building configs.

Notes:
    Build configs with `javastamp.config.model.MutableConfig` and ``freeze()``
    them before handing them to the pipeline; never mutate a frozen `Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from javastamp.config import logging
from javastamp.config.model import Config, MutableConfig

JavaWriter = Callable[..., Path]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell environment does not leak into tests."""
    monkeypatch.delenv("JAVASTAMP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level while the suite runs."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty project directory (no config files to discover)."""
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def write_java(tmp_path: Path) -> JavaWriter:
    """Return a helper writing ``lines`` (joined with ``newline``) to a ``.java`` file."""

    def _write(
        lines: list[str], name: str = "Foo.java", *, newline: str = "\n", final_newline: bool = True
    ) -> Path:
        path: Path = tmp_path / name
        text: str = newline.join(lines) + (newline if final_newline and lines else "")
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and `apply_overrides` keywords."""
    return MutableConfig.from_defaults().apply_overrides(**overrides).freeze()


@pytest.fixture
def default_config() -> Config:
    """The built-in default configuration (version 1.4, LGPL notice, UTF-8)."""
    return make_config()


@pytest.fixture
def config_factory() -> Callable[..., Config]:
    """Return `make_config` for tests that need non-default settings."""
    return make_config
