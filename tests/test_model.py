from __future__ import annotations

import dataclasses

import pytest

from lcoview.core.model import (
    CategorySummary,
    CoverageReport,
    FileCoverage,
    FunctionCoverage,
    LineCoverage,
    LineDetail,
    summarize,
)


def test_counts_percentage_guards_zero() -> None:
    assert LineCoverage(found=0, hit=0).percentage == 0.0
    assert LineCoverage(found=4, hit=1).percentage == pytest.approx(25.0)


def test_category_summary_from_totals() -> None:
    assert CategorySummary.from_totals(0, 0) == CategorySummary(0, 0, 0.0)
    assert CategorySummary.from_totals(8, 8).percentage == 100.0


def test_summarize_sums_declared_totals() -> None:
    files = [
        FileCoverage("a", lines=LineCoverage(found=10, hit=5), functions=FunctionCoverage(found=2, hit=1)),
        FileCoverage("b", lines=LineCoverage(found=10, hit=10)),
    ]
    s = summarize(files)
    assert (s.lines.total, s.lines.covered) == (20, 15)
    assert s.lines.percentage == pytest.approx(75.0)
    assert s.functions.percentage == pytest.approx(50.0)
    assert s.branches == CategorySummary(0, 0, 0.0)


def test_line_hits_maps_line_numbers() -> None:
    f = FileCoverage(
        "a",
        lines=LineCoverage(details=(LineDetail(1, 3), LineDetail(2, 0))),
    )
    assert f.line_hits() == {1: 3, 2: 0}


def test_report_is_immutable() -> None:
    report = CoverageReport()
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.files = ()  # type: ignore[misc]
