"""Central configuration and constants for ``lcoview``."""

from __future__ import annotations

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Percentages at or above these bounds are styled "high" / "medium"; anything lower is "low".
HIGH_THRESHOLD = 80.0
MEDIUM_THRESHOLD = 50.0

# Stand-in content for a per-file page whose source cannot be read.
SOURCE_NOT_FOUND_PLACEHOLDER = "// Source file not found"

# Name prefix of the temporary output directory used when no destination is given.
TEMP_DIR_PREFIX = "lcoview-"

REPORT_TITLE = "Coverage Report"

# Package resource holding the bundled page templates.
TEMPLATE_PACKAGE = "lcoview.data"
TEMPLATE_DIR = "templates"

INDEX_TEMPLATE = "index.html"
FILE_TEMPLATE = "file.html"
INDEX_PAGE = "index.html"

__all__ = [
    "FILE_TEMPLATE",
    "HIGH_THRESHOLD",
    "INDEX_PAGE",
    "INDEX_TEMPLATE",
    "LOG_FORMAT",
    "MEDIUM_THRESHOLD",
    "REPORT_TITLE",
    "SOURCE_NOT_FOUND_PLACEHOLDER",
    "TEMPLATE_DIR",
    "TEMPLATE_PACKAGE",
    "TEMP_DIR_PREFIX",
]
