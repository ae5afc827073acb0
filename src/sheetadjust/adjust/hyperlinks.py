from __future__ import annotations

import logging
from typing import Protocol

from sheetadjust.models import Worksheet
from sheetadjust.shared.a1 import cell_name_to_coordinates, coordinates_to_cell_name

from .shift import shift_pivot
from .types import AdjustDirection

logger = logging.getLogger(__name__)


class RelationshipStore(Protocol):
    """Collaborator owning the sheet relationship records."""

    def delete_sheet_relationship(self, sheet: str, rid: str) -> None: ...


def adjust_hyperlinks(
    ws: Worksheet,
    store: RelationshipStore,
    sheet: str,
    direction: AdjustDirection,
    num: int,
    offset: int,
) -> None:
    """Update hyperlink anchors when inserting or deleting rows or columns.

    On deletion, hyperlinks anchored on the deleted row/column are removed and
    their relationship records dropped before the survivors are shifted.
    """
    if not ws.hyperlinks:
        ws.hyperlinks = None
        return

    if offset < 0:
        # reverse so removals don't skip the next entry
        for index in range(len(ws.hyperlinks) - 1, -1, -1):
            link = ws.hyperlinks[index]
            col_num, row_num = cell_name_to_coordinates(link.ref)
            if (direction == "rows" and num == row_num) or (
                direction == "columns" and num == col_num
            ):
                if link.rid is not None:
                    store.delete_sheet_relationship(sheet, link.rid)
                del ws.hyperlinks[index]
                logger.debug("Removed hyperlink %s on sheet %s", link.ref, sheet)
        if not ws.hyperlinks:
            ws.hyperlinks = None
            return

    for link in ws.hyperlinks:
        col_num, row_num = cell_name_to_coordinates(link.ref)
        if direction == "rows":
            if row_num >= num:
                link.ref = coordinates_to_cell_name(
                    col_num, shift_pivot(row_num, num, offset)
                )
        elif col_num >= num:
            link.ref = coordinates_to_cell_name(
                shift_pivot(col_num, num, offset), row_num
            )
