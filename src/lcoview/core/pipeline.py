from __future__ import annotations

import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from lcoview._meta import logger
from lcoview.core.config import TEMP_DIR_PREFIX
from lcoview.errors import LcovFileNotFoundError, TemplateNotFoundError
from lcoview.inputs.lcov import parse_lcov
from lcoview.io import read_lcov, write_pages
from lcoview.render.html import HtmlRenderer
from lcoview.render.templates import TemplateLoader, default_template_paths

if TYPE_CHECKING:
    from lcoview.core.model import CoverageReport


class PipelineError(Exception):
    """Base class for errors emitted by the pipeline."""


class NoInputError(PipelineError):
    """LCOV input was missing."""


class TemplateError(PipelineError):
    """A page template could not be located."""


class SystemIOError(PipelineError):
    """Filesystem IO error while reading input or writing the report."""


class UnexpectedError(PipelineError):
    """Unexpected failure while building or rendering."""


@dataclass(frozen=True, slots=True)
class GenerateOptions:
    """Inputs for one report run.

    ``None`` values fall back to the working directory, a fresh temp
    directory and the default template search paths.
    """

    lcov_file_path: Path
    source_dir: Path | None = None
    dest_dir: Path | None = None
    quiet: bool = False
    template_paths: tuple[Path, ...] | None = None


@dataclass(frozen=True, slots=True)
class GenerateResult:
    index_path: Path
    report: CoverageReport
    pages_written: int


def default_dest_dir() -> Path:
    """A fresh, not-yet-created directory under the system temp dir."""
    stamp = int(time.time() * 1000)
    return Path(tempfile.gettempdir()) / f"{TEMP_DIR_PREFIX}{stamp}"


def generate_report_with_summary(options: GenerateOptions, *, cwd: Path | None = None) -> GenerateResult:
    """Parse, render and write a report; wrap failures in :class:`PipelineError`.

    Unset options are resolved against *cwd* (default: the process cwd).
    """
    base = cwd if cwd is not None else Path.cwd()
    source_dir = options.source_dir if options.source_dir is not None else base
    dest_dir = options.dest_dir if options.dest_dir is not None else default_dest_dir()
    template_paths = (
        options.template_paths if options.template_paths is not None else default_template_paths(base)
    )

    try:
        report = parse_lcov(read_lcov(options.lcov_file_path))
        renderer = HtmlRenderer(TemplateLoader(template_paths))
        pages = renderer.generate(report, dest_dir, source_dir)
        written = write_pages(pages)
    except LcovFileNotFoundError as exc:
        raise NoInputError(str(exc)) from exc
    except TemplateNotFoundError as exc:
        raise TemplateError(str(exc)) from exc
    except OSError as exc:
        raise SystemIOError(str(exc)) from exc
    except Exception as exc:
        logger.exception("unexpected failure")
        raise UnexpectedError(str(exc)) from exc

    logger.debug("wrote %d page(s) to %s", written, dest_dir)
    return GenerateResult(index_path=pages[0].path, report=report, pages_written=written)


def generate_report(options: GenerateOptions, *, cwd: Path | None = None) -> Path:
    """Generate the HTML report and return the path of its index page."""
    return generate_report_with_summary(options, cwd=cwd).index_path


__all__ = [
    "GenerateOptions",
    "GenerateResult",
    "NoInputError",
    "PipelineError",
    "SystemIOError",
    "TemplateError",
    "UnexpectedError",
    "default_dest_dir",
    "generate_report",
    "generate_report_with_summary",
]
