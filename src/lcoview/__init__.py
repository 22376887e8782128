"""Static HTML reports from LCOV coverage data."""

from lcoview._meta import __version__, logger
from lcoview.core.model import CoverageReport, CoverageSummary, FileCoverage
from lcoview.core.pipeline import GenerateOptions, generate_report
from lcoview.inputs.lcov import LcovParser, parse_lcov
from lcoview.render.html import HtmlRenderer

__all__ = [
    "CoverageReport",
    "CoverageSummary",
    "FileCoverage",
    "GenerateOptions",
    "HtmlRenderer",
    "LcovParser",
    "__version__",
    "generate_report",
    "logger",
    "parse_lcov",
]
