"""Page template lookup and ``{{NAME}}`` placeholder substitution."""

from __future__ import annotations

import re
from functools import cache
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

from lcoview._meta import logger
from lcoview.core.config import TEMPLATE_DIR, TEMPLATE_PACKAGE
from lcoview.errors import TemplateNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_PLACEHOLDER_RE = re.compile(r"\{\{([^{}]+)\}\}")

@cache
def bundled_template_dir() -> Path:
    """Directory of the templates shipped inside the package."""
    return Path(str(resources.files(TEMPLATE_PACKAGE).joinpath(TEMPLATE_DIR)))


def default_template_paths(cwd: Path) -> tuple[Path, ...]:
    """Bundled templates first, then a ``templates`` directory under *cwd*."""
    return (bundled_template_dir(), cwd / "templates")


class TemplateLoader:
    """Resolve template files by name across an ordered list of directories.

    Each template is read from disk once per loader; later loads reuse it.
    """

    def __init__(self, search_paths: Iterable[Path]) -> None:
        self.search_paths = tuple(search_paths)
        self._loaded: dict[str, str] = {}

    def candidates(self, name: str) -> tuple[Path, ...]:
        return tuple(base / name for base in self.search_paths)

    def load(self, name: str) -> str:
        if name in self._loaded:
            return self._loaded[name]
        candidates = self.candidates(name)
        for path in candidates:
            if path.is_file():
                logger.debug("using template %s", path)
                text = path.read_text(encoding="utf-8")
                self._loaded[name] = text
                return text
        raise TemplateNotFoundError(name, candidates)


def render_template(template: str, replacements: Mapping[str, str]) -> str:
    """Replace every ``{{KEY}}`` in *template*; unknown placeholders are kept.

    Substitution is a single pass, so placeholder-like text inside a value
    (e.g. escaped source code) is never expanded.
    """
    return _PLACEHOLDER_RE.sub(lambda m: replacements.get(m.group(1), m.group(0)), template)


__all__ = [
    "TemplateLoader",
    "bundled_template_dir",
    "default_template_paths",
    "render_template",
]
