from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from openpyxl.workbook.workbook import Workbook as OpenpyxlWorkbook
from openpyxl.worksheet.worksheet import Worksheet as OpenpyxlWorksheet

from .models import AutoFilter, Cell, Hyperlink, MergeCell, MergeCells, Row, Worksheet
from .workbook import Sheet, Workbook

_PRIMITIVE_TYPES = (str, int, float, bool)


def workbook_from_openpyxl(workbook: OpenpyxlWorkbook) -> Workbook:
    """Build a workbook model from a loaded openpyxl workbook.

    Sheet ids follow the openpyxl sheet order starting at 1.
    """
    result = Workbook()
    for index, sheet in enumerate(workbook.worksheets, start=1):
        result.sheets[sheet.title] = sheet_from_openpyxl(sheet, sheet_id=index)
    return result


def worksheet_from_openpyxl(sheet: OpenpyxlWorksheet) -> Worksheet:
    """Build a worksheet model from a loaded openpyxl worksheet."""
    return sheet_from_openpyxl(sheet, sheet_id=1).worksheet


def sheet_from_openpyxl(sheet: OpenpyxlWorksheet, *, sheet_id: int) -> Sheet:
    """Build a sheet entry, including hyperlink relationships.

    Every hyperlink gets its own relationship id. Links without one, and
    anchors repeating an id already taken, get the next free ``rIdN``.
    """
    rows: list[Row] = []
    links: list[tuple[str, Any]] = []
    for row_cells in sheet.iter_rows():
        cells: list[Cell] = []
        row_index = 0
        for cell in row_cells:
            row_index = cell.row
            link = getattr(cell, "hyperlink", None)
            if link is not None:
                links.append((cell.coordinate, link))
            if cell.value is None:
                continue
            cells.append(Cell(ref=cell.coordinate, value=_coerce_value(cell.value)))
        hidden = _is_row_hidden(sheet, row_index)
        if row_index and (cells or hidden):
            rows.append(Row(r=row_index, hidden=hidden, cells=cells))
    rows.extend(_hidden_empty_rows(sheet, {row.r for row in rows}))
    rows.sort(key=lambda row: row.r)
    hyperlinks, relationships = _hyperlinks(links)
    worksheet = Worksheet(
        rows=rows,
        hyperlinks=hyperlinks or None,
        merge_cells=_merge_cells(str(item) for item in sheet.merged_cells.ranges),
        auto_filter=_auto_filter(sheet.auto_filter.ref),
    )
    return Sheet(sheet_id=sheet_id, worksheet=worksheet, relationships=relationships)


def _coerce_value(value: Any) -> str | int | float | bool:
    if isinstance(value, _PRIMITIVE_TYPES):
        return value
    return str(value)


def _is_row_hidden(sheet: OpenpyxlWorksheet, row_index: int) -> bool:
    dimension = sheet.row_dimensions.get(row_index)
    return bool(dimension is not None and dimension.hidden)


def _hidden_empty_rows(sheet: OpenpyxlWorksheet, seen: set[int]) -> list[Row]:
    """Return hidden rows that hold no values, e.g. beyond ``max_row``."""
    return [
        Row(r=index, hidden=True)
        for index, dimension in sheet.row_dimensions.items()
        if isinstance(index, int)
        and index >= 1
        and index not in seen
        and dimension.hidden
    ]


def _hyperlinks(
    links: list[tuple[str, Any]],
) -> tuple[list[Hyperlink], dict[str, str]]:
    """Assign a distinct relationship id to every hyperlink anchor."""
    reserved = {link.id for _, link in links if link.id}
    relationships: dict[str, str] = {}
    hyperlinks: list[Hyperlink] = []
    counter = 0
    for ref, link in links:
        rid = link.id
        if not rid or rid in relationships:
            counter += 1
            while f"rId{counter}" in relationships or f"rId{counter}" in reserved:
                counter += 1
            rid = f"rId{counter}"
        relationships[rid] = link.target or link.location or ""
        hyperlinks.append(Hyperlink(ref=ref, rid=rid))
    return hyperlinks, relationships


def _merge_cells(ranges: Iterable[str]) -> MergeCells | None:
    cells = [MergeCell(ref=ref) for ref in ranges]
    if not cells:
        return None
    return MergeCells(cells=cells)


def _auto_filter(ref: str | None) -> AutoFilter | None:
    if not ref:
        return None
    if ":" not in ref:
        ref = f"{ref}:{ref}"
    return AutoFilter(ref=ref)


__all__ = ["sheet_from_openpyxl", "workbook_from_openpyxl", "worksheet_from_openpyxl"]
