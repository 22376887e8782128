from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lcoview.errors import LcovFileNotFoundError
from lcoview.io import read_lcov, read_source, write_output, write_pages
from lcoview.render.html import GeneratedPage

if TYPE_CHECKING:
    from pathlib import Path


def test_read_lcov_missing(tmp_path: Path) -> None:
    with pytest.raises(LcovFileNotFoundError):
        read_lcov(tmp_path / "lcov.info")


def test_read_lcov_replaces_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "lcov.info"
    path.write_bytes(b"SF:caf\xe9.ts\nend_of_record\n")
    assert read_lcov(path).startswith("SF:caf")


def test_read_source_returns_none_when_unreadable(tmp_path: Path) -> None:
    assert read_source(tmp_path / "missing.c") is None
    assert read_source(tmp_path) is None


def test_write_pages_creates_directories(tmp_path: Path) -> None:
    pages = [
        GeneratedPage(tmp_path / "deep" / "er" / "index.html", "<html></html>"),
        GeneratedPage(tmp_path / "deep" / "er" / "a.ts.html", "a"),
    ]
    assert write_pages(pages) == 2
    assert (tmp_path / "deep" / "er" / "index.html").read_text(encoding="utf-8") == "<html></html>"


def test_write_output_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    write_output("hello", None)
    assert capsys.readouterr().out == "hello\n"
