from __future__ import annotations

import re
from html import escape

from lcoview.core.config import HIGH_THRESHOLD, MEDIUM_THRESHOLD

# NUL cannot appear in a file name
_PATH_SEPARATOR_RE = re.compile(r"[/\\:\x00]")


def format_percentage(value: float) -> str:
    """Render *value* with two decimals, e.g. ``"76.92%"``."""
    return f"{value:.2f}%"


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    if count == 1:
        return singular
    return plural or f"{singular}s"


def coverage_class(percentage: float) -> str:
    """Map a percentage onto the ``high``/``medium``/``low`` style classes."""
    if percentage >= HIGH_THRESHOLD:
        return "high"
    if percentage >= MEDIUM_THRESHOLD:
        return "medium"
    return "low"


def escape_html(text: str) -> str:
    return escape(text, quote=True).replace("&#x27;", "&#039;")


def html_file_name(path: str) -> str:
    """Page name for a source *path*: separators, drive colons and NUL become ``_``."""
    return f"{_PATH_SEPARATOR_RE.sub('_', path)}.html"


__all__ = [
    "coverage_class",
    "escape_html",
    "format_percentage",
    "html_file_name",
    "pluralize",
]
