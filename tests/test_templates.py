from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lcoview.errors import TemplateNotFoundError
from lcoview.render.templates import (
    TemplateLoader,
    bundled_template_dir,
    default_template_paths,
    render_template,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_render_template_replaces_every_occurrence() -> None:
    out = render_template("{{A}}-{{B}}-{{A}}", {"A": "1", "B": "2"})
    assert out == "1-2-1"


def test_render_template_leaves_unknown_placeholders() -> None:
    assert render_template("{{A}} {{MISSING}}", {"A": "x"}) == "x {{MISSING}}"


def test_render_template_is_case_sensitive() -> None:
    assert render_template("{{name}} {{NAME}}", {"NAME": "v"}) == "{{name}} v"


def test_render_template_does_not_expand_inside_values() -> None:
    out = render_template("{{CODE}} {{TITLE}}", {"CODE": "{{TITLE}}", "TITLE": "t"})
    assert out == "{{TITLE}} t"


def test_loader_returns_first_match(tmp_path: Path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (second / "index.html").write_text("second", encoding="utf-8")
    (first / "index.html").write_text("first", encoding="utf-8")

    assert TemplateLoader([first, second]).load("index.html") == "first"
    assert TemplateLoader([tmp_path / "none", second]).load("index.html") == "second"


def test_loader_missing_template_lists_searched_paths(tmp_path: Path) -> None:
    loader = TemplateLoader([tmp_path / "a", tmp_path / "b"])
    with pytest.raises(TemplateNotFoundError) as excinfo:
        loader.load("file.html")

    err = excinfo.value
    assert err.name == "file.html"
    assert err.searched == (tmp_path / "a" / "file.html", tmp_path / "b" / "file.html")
    assert "Template not found: file.html" in str(err)
    assert str(tmp_path / "b" / "file.html") in str(err)


def test_bundled_templates_are_shipped() -> None:
    base = bundled_template_dir()
    assert (base / "index.html").is_file()
    assert (base / "file.html").is_file()


def test_default_template_paths_use_given_cwd(tmp_path: Path) -> None:
    paths = default_template_paths(tmp_path)
    assert paths[0] == bundled_template_dir()
    assert paths[1] == tmp_path / "templates"


def test_loader_reads_each_template_once(tmp_path: Path) -> None:
    (tmp_path / "file.html").write_text("v1", encoding="utf-8")
    loader = TemplateLoader([tmp_path])
    assert loader.load("file.html") == "v1"

    (tmp_path / "file.html").write_text("v2", encoding="utf-8")
    assert loader.load("file.html") == "v1"
    assert TemplateLoader([tmp_path]).load("file.html") == "v2"
