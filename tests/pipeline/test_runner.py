# topmark:header:start
#
#   project      : JavaStamp
#   file         : test_runner.py
#   file_relpath : tests/pipeline/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end pipeline runs on real files: rewrite, idempotence, no partial writes."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from javastamp.errors import (
    FillerLinesError,
    MissingDeclarationError,
    SourcePermissionError,
    StampIOError,
)
from javastamp.licenses import EPL_NOTICE, LGPL_NOTICE
from javastamp.pipeline.runner import process_file
from javastamp.pipeline.status import LicenseStatus, VersionStatus, WriteStatus

if TYPE_CHECKING:
    from collections.abc import Callable

    from javastamp.config.model import Config

pytestmark = pytest.mark.pipeline

NL = os.linesep

FOO_LINES: list[str] = [
    *LGPL_NOTICE.lines,
    "package com.vividsolutions.jts.geom;",
    "",
    "/**",
    " * Foo.",
    " *",
    " * @version 1.3",
    " */",
    "public class Foo {",
    "}",
]


def _text(lines: list[str]) -> str:
    return "".join(line + NL for line in lines)


def test_version_is_rewritten_in_place(
    write_java: Callable[..., Path], default_config: Config
) -> None:
    f = write_java(FOO_LINES, newline=NL)
    ctx = process_file(f, default_config)

    expected = [line.replace("@version 1.3", "@version 1.4") for line in FOO_LINES]
    assert f.read_bytes().decode("utf-8") == _text(expected)
    assert ctx.status.version is VersionStatus.NORMALIZED
    assert ctx.status.license is LicenseStatus.PRESENT
    assert ctx.status.write is WriteStatus.WRITTEN
    assert ctx.steps == ["reader", "scanner", "updater", "writer"]


def test_file_without_comment(write_java: Callable[..., Path], default_config: Config) -> None:
    f = write_java(["public class Bar {", "}"], name="Bar.java")
    process_file(f, default_config)
    assert f.read_bytes().decode("utf-8") == _text(
        [*LGPL_NOTICE.lines, "/** @version 1.4", " */", "public class Bar {", "}"]
    )


def test_second_run_is_a_no_op(write_java: Callable[..., Path], default_config: Config) -> None:
    f = write_java(["import java.util.List;", "", "interface Shape {", "}"], name="Shape.java")
    process_file(f, default_config)
    first = f.read_bytes()

    ctx = process_file(f, default_config)

    assert f.read_bytes() == first
    assert ctx.status.write is WriteStatus.UNCHANGED
    assert ctx.status.version is VersionStatus.UNCHANGED
    assert ctx.status.license is LicenseStatus.PRESENT
    assert not ctx.would_change


def test_every_line_gets_a_platform_terminator(
    write_java: Callable[..., Path], default_config: Config
) -> None:
    lines = [*LGPL_NOTICE.lines, "/**", " * @version 1.4", " */", "class Foo {}"]
    foreign_nl = "\r\n" if NL == "\n" else "\n"
    f = write_java(lines, newline=foreign_nl, final_newline=False)

    ctx = process_file(f, default_config)

    assert ctx.status.write is WriteStatus.WRITTEN
    assert f.read_bytes().decode("utf-8") == _text(lines)


def test_dry_run_does_not_write(
    write_java: Callable[..., Path], config_factory: Callable[..., Config]
) -> None:
    f = write_java(FOO_LINES)
    before = f.read_bytes()

    ctx = process_file(f, config_factory(apply_changes=False))

    assert f.read_bytes() == before
    assert ctx.status.write is WriteStatus.PREVIEWED
    assert ctx.would_change


def test_custom_version_and_license(
    write_java: Callable[..., Path], config_factory: Callable[..., Config]
) -> None:
    f = write_java(["/**", " * Doc.", " */", "public class Foo {}"])
    process_file(f, config_factory(version="1.7", license_key="epl"))
    lines = f.read_text(encoding="utf-8").splitlines()
    assert lines[: len(EPL_NOTICE.lines)] == list(EPL_NOTICE.lines)
    assert lines[len(EPL_NOTICE.lines) :] == [
        "/**",
        " * Doc.",
        " *",
        " * @version 1.7",
        " */",
        "public class Foo {}",
    ]


@pytest.mark.parametrize(
    ("lines", "error"),
    [
        (["/**", " * no type here", " */", "package a;"], MissingDeclarationError),
        (["/*", " * license", " */", "package a;", "public class Foo {}"], FillerLinesError),
    ],
)
def test_structural_errors_leave_file_untouched(
    write_java: Callable[..., Path],
    default_config: Config,
    lines: list[str],
    error: type[Exception],
) -> None:
    f = write_java(lines)
    before = f.read_bytes()
    with pytest.raises(error) as excinfo:
        process_file(f, default_config)
    assert f.read_bytes() == before
    assert str(f) in str(excinfo.value)


@pytest.mark.parametrize(
    ("raised", "error"),
    [
        (PermissionError(13, "Permission denied"), SourcePermissionError),
        (OSError(28, "No space left on device"), StampIOError),
    ],
)
def test_write_failures_are_reported(
    write_java: Callable[..., Path],
    default_config: Config,
    monkeypatch: pytest.MonkeyPatch,
    raised: OSError,
    error: type[StampIOError],
) -> None:
    f = write_java(FOO_LINES)
    before = f.read_bytes()

    def _fail(self: Path, data: bytes) -> int:
        raise raised

    monkeypatch.setattr(Path, "write_bytes", _fail)
    with pytest.raises(error) as excinfo:
        process_file(f, default_config)

    assert type(excinfo.value) is error
    assert str(f) in str(excinfo.value)
    assert f.read_bytes() == before


def test_blank_line_after_comment_is_kept(
    write_java: Callable[..., Path], default_config: Config
) -> None:
    lines = [
        *LGPL_NOTICE.lines,
        "/**",
        " * Foo.",
        " * @version 1.3",
        " */",
        "",
        "public class Foo {",
        "}",
    ]
    f = write_java(lines, newline=NL)
    process_file(f, default_config)
    expected = [line.replace("@version 1.3", "@version 1.4") for line in lines]
    assert f.read_bytes().decode("utf-8") == _text(expected)
