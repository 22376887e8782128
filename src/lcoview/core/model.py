from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# -----------------------------------------------------------------------------
# Per-record details
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LineDetail:
    """Execution count of one instrumented source line (``DA:``)."""

    line_number: int
    execution_count: int


@dataclass(frozen=True, slots=True)
class FunctionDetail:
    """A declared function (``FN:``) and its execution count (``FNDA:``)."""

    name: str
    line_number: int
    execution_count: int = 0


@dataclass(frozen=True, slots=True)
class BranchDetail:
    """One branch outcome (``BRDA:``); ``taken`` is 0 for never-evaluated branches."""

    line_number: int
    block_number: int
    branch_number: int
    taken: int


# -----------------------------------------------------------------------------
# Per-file coverage
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CoverageCounts:
    """Declared ``found``/``hit`` totals for one category.

    The totals are taken verbatim from the input and are never reconciled
    with the number of detail records.
    """

    found: int = 0
    hit: int = 0

    @property
    def percentage(self) -> float:
        if self.found <= 0:
            return 0.0
        return 100.0 * self.hit / self.found


@dataclass(frozen=True, slots=True)
class LineCoverage(CoverageCounts):
    details: tuple[LineDetail, ...] = ()


@dataclass(frozen=True, slots=True)
class FunctionCoverage(CoverageCounts):
    details: tuple[FunctionDetail, ...] = ()


@dataclass(frozen=True, slots=True)
class BranchCoverage(CoverageCounts):
    details: tuple[BranchDetail, ...] = ()


@dataclass(frozen=True, slots=True)
class FileCoverage:
    """Coverage for a single ``SF:`` record.

    ``path`` is kept exactly as written in the LCOV data; it is both the key
    used to locate the source file and the label shown in the report.
    """

    path: str
    lines: LineCoverage = field(default_factory=LineCoverage)
    functions: FunctionCoverage = field(default_factory=FunctionCoverage)
    branches: BranchCoverage = field(default_factory=BranchCoverage)

    def line_hits(self) -> dict[int, int]:
        """Map line number to execution count; later ``DA`` records win."""
        return {d.line_number: d.execution_count for d in self.lines.details}


# -----------------------------------------------------------------------------
# Aggregates
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CategorySummary:
    total: int = 0
    covered: int = 0
    percentage: float = 0.0

    @classmethod
    def from_totals(cls, total: int, covered: int) -> CategorySummary:
        pct = 100.0 * covered / total if total > 0 else 0.0
        return cls(total=total, covered=covered, percentage=pct)


@dataclass(frozen=True, slots=True)
class CoverageSummary:
    lines: CategorySummary = field(default_factory=CategorySummary)
    functions: CategorySummary = field(default_factory=CategorySummary)
    branches: CategorySummary = field(default_factory=CategorySummary)


@dataclass(frozen=True, slots=True)
class CoverageReport:
    """Parsed LCOV data; ``files`` preserves first-seen ``SF:`` order."""

    files: tuple[FileCoverage, ...] = ()
    summary: CoverageSummary = field(default_factory=CoverageSummary)


def summarize(files: Iterable[FileCoverage]) -> CoverageSummary:
    """Sum the declared found/hit totals of *files* per category."""
    lines_total = lines_hit = 0
    funcs_total = funcs_hit = 0
    branches_total = branches_hit = 0
    for f in files:
        lines_total += f.lines.found
        lines_hit += f.lines.hit
        funcs_total += f.functions.found
        funcs_hit += f.functions.hit
        branches_total += f.branches.found
        branches_hit += f.branches.hit

    return CoverageSummary(
        lines=CategorySummary.from_totals(lines_total, lines_hit),
        functions=CategorySummary.from_totals(funcs_total, funcs_hit),
        branches=CategorySummary.from_totals(branches_total, branches_hit),
    )


__all__ = [
    "BranchCoverage",
    "BranchDetail",
    "CategorySummary",
    "CoverageCounts",
    "CoverageReport",
    "CoverageSummary",
    "FileCoverage",
    "FunctionCoverage",
    "FunctionDetail",
    "LineCoverage",
    "LineDetail",
    "summarize",
]
