"""HTML report pages: one index plus one annotated page per source file."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from lcoview._meta import logger
from lcoview.core.config import (
    FILE_TEMPLATE,
    INDEX_PAGE,
    INDEX_TEMPLATE,
    REPORT_TITLE,
    SOURCE_NOT_FOUND_PLACEHOLDER,
)
from lcoview.io import read_source
from lcoview.render.format import (
    coverage_class,
    escape_html,
    format_percentage,
    html_file_name,
    pluralize,
)
from lcoview.render.templates import render_template

if TYPE_CHECKING:
    from lcoview.core.model import CategorySummary, CoverageCounts, CoverageReport, FileCoverage
    from lcoview.render.templates import TemplateLoader


@dataclass(frozen=True, slots=True)
class GeneratedPage:
    """A rendered page and the path it belongs at."""

    path: Path
    content: str


def _rounded(pct: float) -> float:
    # Style classes follow the displayed (two-decimal) value.
    return round(pct, 2)


def _summary_item(title: str, cat: CategorySummary) -> str:
    return f"""
        <div class="summary-item">
          <h3>{title}</h3>
          <div class="value {coverage_class(_rounded(cat.percentage))}">{format_percentage(cat.percentage)}</div>
          <div class="label">{cat.covered}/{cat.total} covered</div>
        </div>"""


def _stat_item(label: str, counts: CoverageCounts) -> str:
    pct = counts.percentage
    return f"""
        <div class="stat-item">
          <div class="label">{label}</div>
          <div class="value {coverage_class(_rounded(pct))}">{format_percentage(pct)} <span class="counts">({counts.hit}/{counts.found})</span></div>
        </div>"""


def _file_row(file: FileCoverage) -> str:
    path = escape_html(file.path)
    href = escape_html(html_file_name(file.path))
    line_pct = file.lines.percentage
    return f"""
        <tr class="file-row" data-path="{path}">
          <td><a href="{href}">{path}</a></td>
          <td class="{coverage_class(_rounded(line_pct))}">{format_percentage(line_pct)}</td>
          <td>{file.lines.hit}/{file.lines.found}</td>
          <td>{format_percentage(file.functions.percentage)}</td>
          <td>{file.functions.hit}/{file.functions.found}</td>
          <td>{format_percentage(file.branches.percentage)}</td>
          <td>{file.branches.hit}/{file.branches.found}</td>
        </tr>"""


def _source_row(line_number: int, text: str, hits: int | None) -> str:
    badge = ""
    if hits is None:
        css = "neutral"
    elif hits > 0:
        css = "covered"
        badge = f'<span class="hit-count">{hits}x</span>'
    else:
        css = "uncovered"
    return f"""
        <tr class="{css}">
          <td class="line-number">{line_number}</td>
          <td class="hit-info">{badge}</td>
          <td class="source-code">{escape_html(text)}</td>
        </tr>"""


def source_candidates(source_dir: Path, recorded: str) -> tuple[Path, ...]:
    """Where to look for the source of an ``SF:`` path, in order.

    Paths always nest under *source_dir*; an absolute path is nested with its
    anchor removed (``/abs/a.ts`` -> ``<source_dir>/abs/a.ts``) and then tried
    as-is.
    """
    path = PurePath(recorded)
    if not path.is_absolute():
        return (source_dir / path,)
    return (source_dir / path.relative_to(path.anchor), Path(path))


def _read_first(candidates: tuple[Path, ...]) -> str | None:
    for candidate in candidates:
        text = read_source(candidate)
        if text is not None:
            return text
    return None


class HtmlRenderer:
    """Produce report pages from a :class:`CoverageReport`.

    Templates come from *templates*; the renderer never writes to disk.
    """

    def __init__(self, templates: TemplateLoader, *, generated_at: datetime | None = None) -> None:
        self.templates = templates
        self.generated_at = generated_at or datetime.now(tz=timezone.utc)

    @property
    def _timestamp(self) -> str:
        return self.generated_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip()

    def generate(self, report: CoverageReport, dest_dir: Path, source_dir: Path) -> list[GeneratedPage]:
        """Return the index page followed by one page per file, in report order."""
        pages = [GeneratedPage(dest_dir / INDEX_PAGE, self.render_index(report))]
        pages.extend(
            GeneratedPage(dest_dir / html_file_name(file.path), self.render_file(file, source_dir))
            for file in report.files
        )
        return pages

    def render_index(self, report: CoverageReport) -> str:
        summary = report.summary
        summary_html = "".join((
            _summary_item("Lines", summary.lines),
            _summary_item("Functions", summary.functions),
            _summary_item("Branches", summary.branches),
        ))
        rows = "".join(_file_row(f) for f in report.files)
        count = len(report.files)

        template = self.templates.load(INDEX_TEMPLATE)
        return render_template(
            template,
            {
                "TITLE": REPORT_TITLE,
                "SUMMARY": summary_html,
                "FILE_ROWS": rows,
                "FILE_COUNT": f"{count} {pluralize(count, 'file')}",
                "GENERATED_AT": self._timestamp,
            },
        )

    def render_file(self, file: FileCoverage, source_dir: Path) -> str:
        stats_html = "".join((
            _stat_item("Line Coverage", file.lines),
            _stat_item("Function Coverage", file.functions),
            _stat_item("Branch Coverage", file.branches),
        ))

        candidates = source_candidates(source_dir, file.path)
        source = _read_first(candidates)
        if source is None:
            logger.warning("source file not found: %s", candidates[0])
            source = SOURCE_NOT_FOUND_PLACEHOLDER

        hits = file.line_hits()
        code_html = "".join(
            _source_row(idx, text, hits.get(idx)) for idx, text in enumerate(source.split("\n"), start=1)
        )

        template = self.templates.load(FILE_TEMPLATE)
        return render_template(
            template,
            {
                "TITLE": REPORT_TITLE,
                "FILE_PATH": escape_html(file.path),
                "FILE_STATS": stats_html,
                "SOURCE_CODE": code_html,
                "INDEX_HREF": INDEX_PAGE,
                "GENERATED_AT": self._timestamp,
            },
        )


__all__ = ["GeneratedPage", "HtmlRenderer", "source_candidates"]
