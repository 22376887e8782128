"""Permissive parser for LCOV tracefiles.

LCOV data is a sequence of tagged lines grouped into per-file records::

    SF:src/a.ts
    FN:1,f
    FNDA:3,f
    DA:1,3
    end_of_record

Malformed input never raises: unknown lines are skipped and numeric fields
that do not parse count as ``0``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lcoview._meta import logger
from lcoview.core.model import (
    BranchCoverage,
    BranchDetail,
    CoverageReport,
    FileCoverage,
    FunctionCoverage,
    FunctionDetail,
    LineCoverage,
    LineDetail,
    summarize,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

_INT_RE = re.compile(r"^\s*([+-]?\d+)")

END_OF_RECORD = "end_of_record"
UNEVALUATED_BRANCH = "-"


def parse_int(text: str | None) -> int:
    """Parse the leading integer of *text*; anything unparseable is ``0``.

    Trailing garbage is ignored, so ``"12abc"`` yields ``12``.
    """
    if not text:
        return 0
    m = _INT_RE.match(text)
    if not m:
        return 0
    return int(m.group(1))


def _split_count_and_name(payload: str) -> tuple[int, str]:
    # Function names may contain commas; keep everything after the first field.
    head, _, tail = payload.partition(",")
    return parse_int(head), tail


# -----------------------------------------------------------------------------
# Parser state
# -----------------------------------------------------------------------------


@dataclass(slots=True)
class _FunctionEntry:
    name: str
    line_number: int
    execution_count: int = 0


@dataclass(slots=True)
class _FileAccumulator:
    path: str
    lines: list[LineDetail] = field(default_factory=list)
    functions: list[_FunctionEntry] = field(default_factory=list)
    branches: list[BranchDetail] = field(default_factory=list)
    lines_found: int = 0
    lines_hit: int = 0
    functions_found: int = 0
    functions_hit: int = 0
    branches_found: int = 0
    branches_hit: int = 0

    def set_function_count(self, name: str, count: int) -> None:
        # Exact name match; with duplicate declarations the last one wins.
        for entry in reversed(self.functions):
            if entry.name == name:
                entry.execution_count = count
                return

    def freeze(self) -> FileCoverage:
        return FileCoverage(
            path=self.path,
            lines=LineCoverage(
                found=self.lines_found,
                hit=self.lines_hit,
                details=tuple(self.lines),
            ),
            functions=FunctionCoverage(
                found=self.functions_found,
                hit=self.functions_hit,
                details=tuple(
                    FunctionDetail(name=e.name, line_number=e.line_number, execution_count=e.execution_count)
                    for e in self.functions
                ),
            ),
            branches=BranchCoverage(
                found=self.branches_found,
                hit=self.branches_hit,
                details=tuple(self.branches),
            ),
        )


@dataclass(frozen=True, slots=True)
class _Idle:
    """Outside any ``SF:`` record; record-body tags are ignored."""


@dataclass(frozen=True, slots=True)
class _InFile:
    current: _FileAccumulator


_State = _Idle | _InFile


# -----------------------------------------------------------------------------
# Line handlers
# -----------------------------------------------------------------------------


def _on_fn(acc: _FileAccumulator, payload: str) -> None:
    line_number, name = _split_count_and_name(payload)
    acc.functions.append(_FunctionEntry(name=name, line_number=line_number))


def _on_fnda(acc: _FileAccumulator, payload: str) -> None:
    count, name = _split_count_and_name(payload)
    acc.set_function_count(name, count)


def _on_da(acc: _FileAccumulator, payload: str) -> None:
    parts = payload.split(",")
    line_number = parse_int(parts[0])
    count = parse_int(parts[1]) if len(parts) > 1 else 0
    acc.lines.append(LineDetail(line_number=line_number, execution_count=count))


def _on_brda(acc: _FileAccumulator, payload: str) -> None:
    parts = payload.split(",")
    fields = [*parts, "", "", "", ""][:4]
    taken_raw = fields[3].strip()
    taken = 0 if taken_raw == UNEVALUATED_BRANCH else parse_int(taken_raw)
    acc.branches.append(
        BranchDetail(
            line_number=parse_int(fields[0]),
            block_number=parse_int(fields[1]),
            branch_number=parse_int(fields[2]),
            taken=taken,
        )
    )


def _setter(attr: str):
    def handle(acc: _FileAccumulator, payload: str) -> None:
        setattr(acc, attr, parse_int(payload))

    return handle


# Longer tags first so that "FNDA:" / "FNF:" are never mistaken for "FN:".
_HANDLERS = (
    ("FNDA:", _on_fnda),
    ("FNF:", _setter("functions_found")),
    ("FNH:", _setter("functions_hit")),
    ("FN:", _on_fn),
    ("DA:", _on_da),
    ("LF:", _setter("lines_found")),
    ("LH:", _setter("lines_hit")),
    ("BRDA:", _on_brda),
    ("BRF:", _setter("branches_found")),
    ("BRH:", _setter("branches_hit")),
)


class LcovParser:
    """Turn LCOV text into a :class:`CoverageReport`."""

    def parse(self, content: str) -> CoverageReport:
        return parse_lcov(content)


def _step(state: _State, line: str, files: list[FileCoverage]) -> _State:
    if line.startswith("SF:"):
        if isinstance(state, _InFile):
            logger.debug("discarding unterminated record for %s", state.current.path)
        return _InFile(_FileAccumulator(path=line[3:]))

    if line == END_OF_RECORD:
        if isinstance(state, _InFile):
            files.append(state.current.freeze())
        return _Idle()

    if isinstance(state, _Idle):
        return state

    for tag, handler in _HANDLERS:
        if line.startswith(tag):
            handler(state.current, line[len(tag) :])
            break
    return state


def iter_lines(content: str) -> Iterable[str]:
    for raw in content.split("\n"):
        yield raw.strip()


def parse_lcov(content: str) -> CoverageReport:
    """Parse LCOV *content* into an immutable report.

    Records without a closing ``end_of_record`` are dropped.
    """
    files: list[FileCoverage] = []
    state: _State = _Idle()
    for line in iter_lines(content):
        state = _step(state, line, files)

    if isinstance(state, _InFile):
        logger.debug("dropping unterminated record for %s", state.current.path)

    logger.debug("parsed %d file record(s)", len(files))
    return CoverageReport(files=tuple(files), summary=summarize(files))


__all__ = ["LcovParser", "parse_int", "parse_lcov"]
