# topmark:header:start
#
#   project      : JavaStamp
#   file         : test_config.py
#   file_relpath : tests/config/test_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Config: defaults, TOML layers, discovery, overrides and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from javastamp.config.io import discover_config_file, load_toml_dict
from javastamp.config.model import Config, MutableConfig
from javastamp.constants import DEFAULT_VERSION_TAG
from javastamp.errors import ConfigError
from javastamp.licenses import EPL_NOTICE, LGPL_NOTICE


def test_defaults() -> None:
    config: Config = MutableConfig.from_defaults().freeze()
    assert config.version == DEFAULT_VERSION_TAG == "1.4"
    assert config.notice is LGPL_NOTICE
    assert config.encoding == "utf-8"
    assert config.apply_changes is True
    assert config.config_files == ()


def test_freeze_thaw_roundtrip() -> None:
    config = MutableConfig.from_defaults().apply_overrides(license_key="epl").freeze()
    assert config.thaw().freeze() == config


def test_pyproject_tool_table(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.javastamp]\nversion = "1.5"\n', encoding="utf-8"
    )
    assert discover_config_file() == isolation / "pyproject.toml"

    config = MutableConfig.load_merged().freeze()
    assert config.version == "1.5"
    assert config.config_files == (isolation / "pyproject.toml",)


def test_pyproject_without_tool_table_is_ignored(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert discover_config_file() is None
    assert MutableConfig.load_merged().freeze().version == "1.4"


def test_broken_pyproject_is_skipped_by_discovery(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text("[project\n", encoding="utf-8")
    assert discover_config_file() is None


def test_javastamp_toml_wins_over_pyproject(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text('[tool.javastamp]\nversion = "1.5"\n', "utf-8")
    (isolation / "javastamp.toml").write_text('version = "1.6"\n', encoding="utf-8")
    assert MutableConfig.load_merged().freeze().version == "1.6"


def test_explicit_pyproject_without_table_is_an_error(tmp_path: Path) -> None:
    cfg = tmp_path / "pyproject.toml"
    cfg.write_text('[project]\nname = "x"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match=r"tool\.javastamp"):
        MutableConfig.load_merged(config_file=cfg)


def test_license_file_is_relative_to_config_file(tmp_path: Path) -> None:
    (tmp_path / "etc").mkdir()
    (tmp_path / "etc" / "header.txt").write_text("/*\n * ACME license\n */\n", encoding="utf-8")
    cfg = tmp_path / "etc" / "javastamp.toml"
    cfg.write_text('license_file = "header.txt"\nlicense_marker = "ACME"\n', encoding="utf-8")

    config = MutableConfig.load_merged(config_file=cfg).freeze()

    assert config.notice.key == "custom"
    assert config.notice.lines == ("/*", " * ACME license", " */")
    assert config.thaw().freeze().notice == config.notice


def test_builtin_license_override_drops_inherited_license_file(tmp_path: Path) -> None:
    (tmp_path / "header.txt").write_text("/* ACME */\n", encoding="utf-8")
    cfg = tmp_path / "javastamp.toml"
    cfg.write_text('license_file = "header.txt"\nlicense_marker = "ACME"\n', encoding="utf-8")

    draft = MutableConfig.load_merged(config_file=cfg).apply_overrides(license_key="epl")

    assert draft.freeze().notice is EPL_NOTICE


@pytest.mark.parametrize(
    ("toml_text", "message"),
    [
        ('colour = "red"\n', "unknown config key"),
        ("version = 14\n", "must be a string"),
        ('version = ""\n', "non-empty"),
        ('version = "1 4"\n', "whitespace"),
        ('license = "gpl"\n', "Unknown license"),
        ('encoding = "no-such-codec"\n', "unknown encoding"),
        ('license_file = "missing.txt"\nlicense_marker = "x"\n', "cannot read license file"),
    ],
)
def test_invalid_values(tmp_path: Path, toml_text: str, message: str) -> None:
    cfg = tmp_path / "javastamp.toml"
    cfg.write_text(toml_text, encoding="utf-8")
    with pytest.raises(ConfigError, match=message):
        MutableConfig.load_merged(config_file=cfg).freeze()


def test_marker_must_occur_in_license_file(tmp_path: Path) -> None:
    (tmp_path / "header.txt").write_text("/* ACME */\n", encoding="utf-8")
    draft = MutableConfig.from_defaults().apply_overrides(
        license_file=tmp_path / "header.txt", license_marker="Initech"
    )
    with pytest.raises(ConfigError, match="does not occur"):
        draft.freeze()


def test_load_toml_dict_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read"):
        load_toml_dict(tmp_path / "nope.toml")
    bad = tmp_path / "bad.toml"
    bad.write_text("= 1\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid TOML"):
        load_toml_dict(bad)


def test_license_marker_without_license_file_is_an_error() -> None:
    draft = MutableConfig.from_defaults().apply_overrides(license_marker="ACME")
    with pytest.raises(ConfigError, match="'license_marker' requires 'license_file'"):
        draft.freeze()


def test_builtin_license_override_drops_inherited_marker(tmp_path: Path) -> None:
    cfg = tmp_path / "javastamp.toml"
    cfg.write_text('license_file = "header.txt"\nlicense_marker = "ACME"\n', encoding="utf-8")

    draft = MutableConfig.load_merged(config_file=cfg).apply_overrides(license_key="lgpl")

    assert draft.license_marker is None
    assert draft.freeze().notice is LGPL_NOTICE
