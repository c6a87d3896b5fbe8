# topmark:header:start
#
#   project      : JavaStamp
#   file         : test_reader.py
#   file_relpath : tests/pipeline/test_reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reader step: line splitting and I/O error classification."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from javastamp.errors import (
    SourceEncodingError,
    SourceNotFoundError,
    SourcePermissionError,
    StampIOError,
)
from javastamp.pipeline.context import ProcessingContext
from javastamp.pipeline.steps.reader import ReaderStep, split_lines

if TYPE_CHECKING:
    from javastamp.config.model import Config

pytestmark = pytest.mark.pipeline


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\rb", ["a", "b"]),
        ("a\n\n", ["a", ""]),
        ("\n", [""]),
        ("a\x0cb\n", ["a\x0cb"]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected


def test_reader_keeps_original_text(tmp_path: Path, default_config: Config) -> None:
    f = tmp_path / "Foo.java"
    f.write_bytes(b"class Foo {\r\n}")
    ctx = ReaderStep()(ProcessingContext(path=f, config=default_config))
    assert ctx.original_text == "class Foo {\r\n}"
    assert ctx.lines == ["class Foo {", "}"]
    assert ctx.steps == ["reader"]


def test_reader_missing_file(tmp_path: Path, default_config: Config) -> None:
    with pytest.raises(SourceNotFoundError, match="file not found"):
        ReaderStep()(ProcessingContext(path=tmp_path / "Nope.java", config=default_config))


def test_reader_directory(tmp_path: Path, default_config: Config) -> None:
    with pytest.raises(SourceNotFoundError):
        ReaderStep()(ProcessingContext(path=tmp_path, config=default_config))


def test_reader_undecodable(tmp_path: Path, default_config: Config) -> None:
    f = tmp_path / "Latin.java"
    f.write_bytes("// caf\xe9\nclass Latin {}\n".encode("latin-1"))
    with pytest.raises(SourceEncodingError, match="utf-8"):
        ReaderStep()(ProcessingContext(path=f, config=default_config))


@pytest.mark.parametrize(
    ("raised", "error", "message"),
    [
        (PermissionError(13, "Permission denied"), SourcePermissionError, "permission denied"),
        (OSError(5, "Input/output error"), StampIOError, "read error: Input/output error"),
    ],
)
def test_reader_os_errors(
    tmp_path: Path,
    default_config: Config,
    monkeypatch: pytest.MonkeyPatch,
    raised: OSError,
    error: type[StampIOError],
    message: str,
) -> None:
    f = tmp_path / "Foo.java"
    f.write_bytes(b"class Foo {}\n")

    def _fail(self: Path) -> bytes:
        raise raised

    monkeypatch.setattr(Path, "read_bytes", _fail)
    with pytest.raises(error, match=message) as excinfo:
        ReaderStep()(ProcessingContext(path=f, config=default_config))
    assert type(excinfo.value) is error
