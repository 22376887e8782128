from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from lcoview._meta import logger
from lcoview.errors import LcovFileNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lcoview.render.html import GeneratedPage


def read_lcov(path: Path) -> str:
    """Read an LCOV tracefile; a missing file raises :class:`LcovFileNotFoundError`."""
    if not path.is_file():
        msg = f"LCOV file not found: {path}"
        raise LcovFileNotFoundError(msg)
    return path.read_text(encoding="utf-8", errors="replace")


def read_source(path: Path) -> str | None:
    """Return the text of *path*, or ``None`` when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except (OSError, ValueError) as exc:
        # ValueError: the path holds a NUL byte
        logger.debug("cannot read %s: %s", path, exc)
        return None


def write_page(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def write_pages(pages: Iterable[GeneratedPage]) -> int:
    """Write each page to disk, creating directories as needed; return the count."""
    n = 0
    for page in pages:
        write_page(page.path, page.content)
        n += 1
    return n


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == Path("-"):
        print(text)
        return
    write_page(destination, text)


__all__ = ["read_lcov", "read_source", "write_output", "write_page", "write_pages"]
