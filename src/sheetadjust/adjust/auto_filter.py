from __future__ import annotations

import logging

from sheetadjust.models import Worksheet
from sheetadjust.shared.a1 import (
    coordinates_to_range_ref,
    range_ref_to_coordinates,
    sort_coordinates,
)

from .shift import shift_pivot
from .types import AdjustDirection

logger = logging.getLogger(__name__)


def adjust_auto_filter(
    ws: Worksheet, direction: AdjustDirection, num: int, offset: int
) -> None:
    """Update the auto filter when inserting or deleting rows or columns.

    Deleting the filter's header row, or editing the single column it spans,
    clears the filter and un-hides the rows it covered.
    """
    if ws.auto_filter is None:
        return

    coordinates = range_ref_to_coordinates(ws.auto_filter.ref)
    x1, y1, x2, y2 = coordinates

    if (direction == "rows" and y1 == num and offset < 0) or (
        direction == "columns" and x1 == num and x2 == num
    ):
        logger.debug("Cleared auto filter %s", ws.auto_filter.ref)
        ws.auto_filter = None
        for row_data in ws.rows:
            if y1 < row_data.r <= y2:
                row_data.hidden = False
        return

    coordinates = _adjust_auto_filter_coordinates(direction, coordinates, num, offset)
    ws.auto_filter.ref = coordinates_to_range_ref(sort_coordinates(coordinates))


def _adjust_auto_filter_coordinates(
    direction: AdjustDirection, coordinates: list[int], num: int, offset: int
) -> list[int]:
    """Shift filter bounds; column edits move only the right edge."""
    if direction == "rows":
        coordinates[1] = shift_pivot(coordinates[1], num, offset)
        coordinates[3] = shift_pivot(coordinates[3], num, offset)
    else:
        coordinates[2] = shift_pivot(coordinates[2], num, offset)
    return coordinates
