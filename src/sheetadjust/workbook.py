from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from sheetadjust.adjust.service import adjust
from sheetadjust.errors import SheetNotFoundError
from sheetadjust.models import CalcChain, Worksheet
from sheetadjust.shared.a1 import cell_name_to_coordinates, column_label_to_index

logger = logging.getLogger(__name__)


class Sheet(BaseModel):
    """Worksheet entry owned by a workbook."""

    sheet_id: int
    worksheet: Worksheet = Field(default_factory=Worksheet)
    relationships: dict[str, str] = Field(
        default_factory=dict, description="Relationship id to target."
    )


class Workbook(BaseModel):
    """In-memory workbook holding worksheets keyed by sheet name."""

    sheets: dict[str, Sheet] = Field(default_factory=dict)
    calc_chain: CalcChain | None = None

    def add_sheet(self, name: str, worksheet: Worksheet | None = None) -> Sheet:
        """Register ``name`` with the next free sheet id."""
        next_id = max((sheet.sheet_id for sheet in self.sheets.values()), default=0) + 1
        sheet = Sheet(
            sheet_id=next_id,
            worksheet=worksheet if worksheet is not None else Worksheet(),
        )
        self.sheets[name] = sheet
        return sheet

    def get_worksheet(self, sheet: str) -> Worksheet:
        """Return the worksheet model for ``sheet``."""
        return self._get_sheet(sheet).worksheet

    def get_sheet_id(self, sheet: str) -> int:
        """Return the sheet id for ``sheet``."""
        return self._get_sheet(sheet).sheet_id

    def delete_sheet_relationship(self, sheet: str, rid: str) -> None:
        """Drop relationship ``rid`` from ``sheet``; unknown ids are ignored."""
        removed = self._get_sheet(sheet).relationships.pop(rid, None)
        if removed is not None:
            logger.debug("Deleted relationship %s (%s) on sheet %s", rid, removed, sheet)

    def _get_sheet(self, sheet: str) -> Sheet:
        entry = self.sheets.get(sheet)
        if entry is None:
            raise SheetNotFoundError(sheet, f"Sheet not found: {sheet}")
        return entry


def insert_rows(workbook: Workbook, sheet: str, row: int, n: int = 1) -> None:
    """Insert ``n`` rows before ``row`` on ``sheet``."""
    if row < 1:
        raise ValueError(f"Row index must be positive: {row}")
    if n < 1:
        raise ValueError(f"Row count must be positive: {n}")
    adjust(workbook, sheet, "rows", row, n)


def remove_row(workbook: Workbook, sheet: str, row: int) -> None:
    """Remove ``row`` and its cells from ``sheet``, shifting later rows up."""
    if row < 1:
        raise ValueError(f"Row index must be positive: {row}")
    ws = workbook.get_worksheet(sheet)
    ws.rows = [row_data for row_data in ws.rows if row_data.r != row]
    adjust(workbook, sheet, "rows", row, -1)


def insert_cols(workbook: Workbook, sheet: str, col: int | str, n: int = 1) -> None:
    """Insert ``n`` columns before ``col`` (index or label) on ``sheet``."""
    col_index = _resolve_column(col)
    if n < 1:
        raise ValueError(f"Column count must be positive: {n}")
    adjust(workbook, sheet, "columns", col_index, n)


def remove_col(workbook: Workbook, sheet: str, col: int | str) -> None:
    """Remove column ``col`` (index or label) from ``sheet``."""
    col_index = _resolve_column(col)
    ws = workbook.get_worksheet(sheet)
    for row_data in ws.rows:
        row_data.cells = [
            cell
            for cell in row_data.cells
            if cell_name_to_coordinates(cell.ref)[0] != col_index
        ]
    adjust(workbook, sheet, "columns", col_index, -1)


def _resolve_column(col: int | str) -> int:
    """Return a 1-based column index from an index or label."""
    index = column_label_to_index(col) if isinstance(col, str) else col
    if index < 1:
        raise ValueError(f"Column index must be positive: {col}")
    return index


__all__ = [
    "Sheet",
    "Workbook",
    "insert_cols",
    "insert_rows",
    "remove_col",
    "remove_row",
]
