from __future__ import annotations

import logging

from sheetadjust.models import MergeCells, Worksheet
from sheetadjust.shared.a1 import (
    coordinates_to_range_ref,
    range_ref_to_coordinates,
    sort_coordinates,
)

from .shift import shift_pivot
from .types import AdjustDirection

logger = logging.getLogger(__name__)


def adjust_merge_cells(
    ws: Worksheet, direction: AdjustDirection, num: int, offset: int
) -> None:
    """Update merged ranges when inserting or deleting rows or columns.

    A range lying entirely on a deleted row/column, or one that shrinks to a
    single cell, is removed. ``ws.merge_cells`` becomes ``None`` once empty.
    """
    merge_cells = ws.merge_cells
    if merge_cells is None:
        return

    index = 0
    while index < len(merge_cells.cells):
        area = merge_cells.cells[index]
        x1, y1, x2, y2 = sort_coordinates(range_ref_to_coordinates(area.ref))
        if direction == "rows":
            if y1 == num and y2 == num and offset < 0:
                _delete_merge_cell(merge_cells, index, area.ref)
                continue
            y1 = shift_pivot(y1, num, offset)
            y2 = shift_pivot(y2, num, offset)
        else:
            if x1 == num and x2 == num and offset < 0:
                _delete_merge_cell(merge_cells, index, area.ref)
                continue
            x1 = shift_pivot(x1, num, offset)
            x2 = shift_pivot(x2, num, offset)
        if x1 == x2 and y1 == y2:
            _delete_merge_cell(merge_cells, index, area.ref)
            continue
        area.ref = coordinates_to_range_ref(sort_coordinates([x1, y1, x2, y2]))
        index += 1

    if not merge_cells.cells:
        ws.merge_cells = None


def _delete_merge_cell(merge_cells: MergeCells, index: int, ref: str) -> None:
    merge_cells.delete(index)
    logger.debug("Removed merged range %s", ref)
