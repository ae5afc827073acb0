from __future__ import annotations

from sheetadjust.models import Worksheet
from sheetadjust.shared.a1 import cell_name_to_coordinates


def check_sheet(ws: Worksheet) -> None:
    """Normalize worksheet structure after an adjustment.

    Rows are ordered by number and cells by column. Empty optional containers
    are replaced with ``None``.
    """
    ws.rows.sort(key=lambda row_data: row_data.r)
    for row_data in ws.rows:
        row_data.cells.sort(key=lambda cell: cell_name_to_coordinates(cell.ref)[0])
    if not ws.hyperlinks:
        ws.hyperlinks = None
    if ws.merge_cells is not None:
        ws.merge_cells.count = len(ws.merge_cells.cells)
        if ws.merge_cells.count == 0:
            ws.merge_cells = None
