from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

import pytest
from click.testing import CliRunner

SIMPLE_LCOV = """\
TN:
SF:src/utils/math.ts
FN:1,add
FN:5,subtract
FNDA:10,add
FNDA:5,subtract
FNF:2
FNH:2
DA:1,10
DA:2,10
DA:5,5
DA:6,5
LF:4
LH:4
end_of_record
"""

MULTI_FILE_LCOV = """\
SF:src/index.ts
FN:1,main
FNDA:1,main
FNF:1
FNH:1
DA:1,1
DA:2,1
DA:3,0
LF:3
LH:2
BRDA:2,0,0,1
BRDA:2,0,1,0
BRF:2
BRH:1
end_of_record
SF:src/utils/helpers.ts
FN:1,format
FN:4,parse
FNDA:3,format
FNDA:0,parse
FNF:2
FNH:1
DA:1,3
DA:2,3
DA:4,0
DA:5,0
LF:4
LH:2
end_of_record
SF:src/lib/calculator.ts
FN:1,calculate
FNDA:7,calculate
FNF:1
FNH:1
DA:1,7
DA:2,7
DA:3,7
DA:4,7
DA:5,7
DA:6,7
LF:6
LH:6
BRDA:3,0,0,4
BRDA:3,0,1,3
BRF:2
BRH:2
end_of_record
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def lcov_content() -> Callable[..., str]:
    """Build LCOV text from ``{path: {line: hits}}``; found/hit totals are derived."""

    def build(mapping: Mapping[str, Mapping[int, int] | Iterable[int]]) -> str:
        records: list[str] = []
        for path, lines in mapping.items():
            items = list(lines.items()) if isinstance(lines, Mapping) else [(ln, 0) for ln in lines]
            body = [f"SF:{path}"]
            body.extend(f"DA:{ln},{hits}" for ln, hits in items)
            body.append(f"LF:{len(items)}")
            body.append(f"LH:{sum(1 for _, hits in items if hits > 0)}")
            body.append("end_of_record")
            records.append("\n".join(body))
        return "\n".join(records) + "\n"

    return build


@pytest.fixture
def lcov_file(tmp_path: Path, lcov_content: Callable[..., str]) -> Callable[..., Path]:
    def write(
        mapping: Mapping[str, Mapping[int, int] | Iterable[int]] | None = None,
        *,
        text: str | None = None,
        filename: str = "lcov.info",
    ) -> Path:
        content = text if text is not None else lcov_content(mapping or {})
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def simple_lcov() -> str:
    return SIMPLE_LCOV


@pytest.fixture
def multi_file_lcov() -> str:
    return MULTI_FILE_LCOV
