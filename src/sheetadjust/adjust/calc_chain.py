from __future__ import annotations

from sheetadjust.models import CalcChain
from sheetadjust.shared.a1 import cell_name_to_coordinates, coordinates_to_cell_name

from .types import AdjustDirection


def adjust_calc_chain(
    calc_chain: CalcChain | None,
    direction: AdjustDirection,
    num: int,
    offset: int,
    sheet_id: int,
) -> None:
    """Shift calculation chain entries that belong to ``sheet_id``.

    Entries are never removed; a shift that would leave the grid is skipped.
    """
    if calc_chain is None:
        return
    for entry in calc_chain.c:
        if entry.i != sheet_id:
            continue
        col_num, row_num = cell_name_to_coordinates(entry.r)
        if direction == "rows" and num <= row_num:
            new_row = row_num + offset
            if new_row > 0:
                entry.r = coordinates_to_cell_name(col_num, new_row)
        if direction == "columns" and num <= col_num:
            new_col = col_num + offset
            if new_col > 0:
                entry.r = coordinates_to_cell_name(new_col, row_num)
