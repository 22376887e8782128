from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lcoview.render.format import coverage_class, format_percentage

if TYPE_CHECKING:
    from lcoview.core.model import CategorySummary, CoverageCounts, CoverageReport

_STYLES = {"high": "green", "medium": "yellow", "low": "red"}


def _style_percent(pct: float) -> str:
    style = _STYLES[coverage_class(round(pct, 2))]
    return f"[{style}]{format_percentage(pct)}[/{style}]"


def _cells(counts: CoverageCounts) -> list[str]:
    return [f"{counts.hit}/{counts.found}", _style_percent(counts.percentage)]


def _total_cells(cat: CategorySummary) -> list[str]:
    return [f"[bold]{cat.covered}/{cat.total}[/bold]", f"[bold]{_style_percent(cat.percentage)}[/bold]"]


def render_tty_summary(report: CoverageReport, *, color: bool = True) -> str:
    """Render a Rich table with per-file and overall coverage of *report*."""
    table = Table(title="Coverage Report", box=box.SIMPLE_HEAVY, header_style="bold", expand=True)

    table.add_column("File", overflow="fold")
    for label in ("Lines", "Functions", "Branches"):
        table.add_column(f"{label}\nHit", justify="right")
        table.add_column(f"{label}\nCov.", justify="right")

    for f in report.files:
        table.add_row(escape(f.path), *_cells(f.lines), *_cells(f.functions), *_cells(f.branches))

    table.add_section()

    s = report.summary
    table.add_row(
        "[bold]Overall[/bold]",
        *_total_cells(s.lines),
        *_total_cells(s.functions),
        *_total_cells(s.branches),
    )

    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=120)
    console.print()
    console.print(table)
    console.print()
    return buf.getvalue().rstrip()


__all__ = ["render_tty_summary"]
