from __future__ import annotations

from sheetadjust.models import Row, Worksheet
from sheetadjust.shared.a1 import (
    cell_name_to_coordinates,
    coordinates_to_cell_name,
    join_cell_name,
    split_cell_name,
)


def adjust_row_dimensions(ws: Worksheet, row: int, offset: int) -> None:
    """Renumber rows at or after ``row`` and rewrite their cell references.

    Rows whose new number would be below 1 are left untouched.
    """
    for row_data in ws.rows:
        new_row = row_data.r + offset
        if row_data.r >= row and new_row > 0:
            _adjust_single_row(row_data, new_row)


def _adjust_single_row(row_data: Row, num: int) -> None:
    row_data.r = num
    for cell in row_data.cells:
        column, _ = split_cell_name(cell.ref)
        cell.ref = join_cell_name(column, num)


def adjust_col_dimensions(ws: Worksheet, col: int, offset: int) -> None:
    """Rewrite references of cells at or after column ``col``.

    Cells whose new column would be below 1 keep their reference.
    """
    for row_data in ws.rows:
        for cell in row_data.cells:
            cell_col, cell_row = cell_name_to_coordinates(cell.ref)
            if col <= cell_col:
                new_col = cell_col + offset
                if new_col > 0:
                    cell.ref = coordinates_to_cell_name(new_col, cell_row)
