from __future__ import annotations

from collections.abc import Callable

import pytest

from sheetadjust.models import Cell, Row, Worksheet
from sheetadjust.workbook import Workbook


def _build_rows(refs: list[str]) -> list[Row]:
    """Group A1 references into rows, in the order given."""
    rows: dict[int, Row] = {}
    for ref in refs:
        row_index = int("".join(char for char in ref if char.isdigit()))
        row = rows.setdefault(row_index, Row(r=row_index))
        row.cells.append(Cell(ref=ref, value=ref))
    return list(rows.values())


def _cell_refs(ws: Worksheet) -> list[str]:
    return [cell.ref for row in ws.rows for cell in row.cells]


@pytest.fixture
def build_rows() -> Callable[[list[str]], list[Row]]:
    return _build_rows


@pytest.fixture
def cell_refs() -> Callable[[Worksheet], list[str]]:
    return _cell_refs


@pytest.fixture
def make_workbook() -> Callable[..., Workbook]:
    """Return a factory creating a workbook with sheets ``Sheet1`` and ``Sheet2``."""

    def _make(worksheet: Worksheet | None = None) -> Workbook:
        workbook = Workbook()
        workbook.add_sheet("Sheet1", worksheet)
        workbook.add_sheet("Sheet2")
        return workbook

    return _make
