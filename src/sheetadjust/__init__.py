"""Keep worksheet references consistent across row and column edits."""

from __future__ import annotations

from .adjust import AdjustDirection, AdjustRequest, adjust, run_adjust
from .errors import (
    AdjustError,
    AdjustErrorDetail,
    InvalidCoordinateError,
    InvalidRangeError,
    InvalidReferenceError,
    SheetNotFoundError,
)
from .models import (
    AutoFilter,
    CalcChain,
    CalcChainEntry,
    Cell,
    Hyperlink,
    MergeCell,
    MergeCells,
    Row,
    Worksheet,
)
from .workbook import Sheet, Workbook, insert_cols, insert_rows, remove_col, remove_row

__all__ = [
    "AdjustDirection",
    "AdjustError",
    "AdjustErrorDetail",
    "AdjustRequest",
    "AutoFilter",
    "CalcChain",
    "CalcChainEntry",
    "Cell",
    "Hyperlink",
    "InvalidCoordinateError",
    "InvalidRangeError",
    "InvalidReferenceError",
    "MergeCell",
    "MergeCells",
    "Row",
    "Sheet",
    "SheetNotFoundError",
    "Workbook",
    "Worksheet",
    "adjust",
    "insert_cols",
    "insert_rows",
    "remove_col",
    "remove_row",
    "run_adjust",
]
