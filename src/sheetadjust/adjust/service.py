from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field, field_validator

from sheetadjust.errors import AdjustError
from sheetadjust.models import CalcChain, Worksheet

from .auto_filter import adjust_auto_filter
from .calc_chain import adjust_calc_chain
from .cleanup import check_sheet
from .dimensions import adjust_col_dimensions, adjust_row_dimensions
from .hyperlinks import adjust_hyperlinks
from .merge_cells import adjust_merge_cells
from .types import AdjustDirection, AdjustStage

logger = logging.getLogger(__name__)


@runtime_checkable
class WorkbookProtocol(Protocol):
    """Workbook access consumed by the adjustment orchestrator."""

    calc_chain: CalcChain | None

    def get_worksheet(self, sheet: str) -> Worksheet: ...

    def get_sheet_id(self, sheet: str) -> int: ...

    def delete_sheet_relationship(self, sheet: str, rid: str) -> None: ...


class AdjustRequest(BaseModel):
    """Single structural edit on one worksheet."""

    sheet: str
    direction: AdjustDirection
    num: int = Field(..., ge=1, description="1-based row/column edit position.")
    offset: int = Field(
        ..., description="Rows/columns inserted (positive) or deleted (negative)."
    )

    @field_validator("sheet")
    @classmethod
    def _validate_sheet(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("sheet must not be empty.")
        return value

    @field_validator("offset")
    @classmethod
    def _validate_offset(cls, value: int) -> int:
        if value == 0:
            raise ValueError("offset must not be zero.")
        return value


def adjust(
    workbook: WorkbookProtocol,
    sheet: str,
    direction: AdjustDirection,
    num: int,
    offset: int,
) -> None:
    """Adjust references on ``sheet`` after inserting or deleting rows/columns.

    Args:
        workbook: Workbook collaborator owning the sheet.
        sheet: Worksheet name being edited.
        direction: ``"rows"`` or ``"columns"``.
        num: Index of the row/column the edit happens before (1-based).
        offset: Number of rows/columns to insert; negative values delete.

    Raises:
        AdjustError: When a stored reference cannot be decoded or re-encoded.
            Stages already run are not rolled back.
    """
    run_adjust(
        workbook,
        AdjustRequest(sheet=sheet, direction=direction, num=num, offset=offset),
    )


def run_adjust(workbook: WorkbookProtocol, request: AdjustRequest) -> None:
    """Run every adjustment stage for ``request`` in order, failing fast."""
    ws = workbook.get_worksheet(request.sheet)
    sheet_id = workbook.get_sheet_id(request.sheet)
    direction, num, offset = request.direction, request.num, request.offset
    logger.debug(
        "Adjusting %s on sheet %s at %d by %d", direction, request.sheet, num, offset
    )

    stage: AdjustStage = "dimensions"
    try:
        if direction == "rows":
            adjust_row_dimensions(ws, num, offset)
        else:
            adjust_col_dimensions(ws, num, offset)
        stage = "hyperlinks"
        adjust_hyperlinks(ws, workbook, request.sheet, direction, num, offset)
        stage = "merge_cells"
        adjust_merge_cells(ws, direction, num, offset)
        stage = "auto_filter"
        adjust_auto_filter(ws, direction, num, offset)
        stage = "calc_chain"
        adjust_calc_chain(workbook.calc_chain, direction, num, offset, sheet_id)
        stage = "cleanup"
        check_sheet(ws)
    except AdjustError as exc:
        logger.warning(
            "Adjusting sheet %s stopped at %s: %s", request.sheet, stage, exc
        )
        raise

    if workbook.calc_chain is not None and not workbook.calc_chain.c:
        workbook.calc_chain = None


__all__ = ["AdjustRequest", "WorkbookProtocol", "adjust", "run_adjust"]
