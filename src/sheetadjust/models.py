from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class Cell(BaseModel):
    """Single populated cell. ``ref`` always encodes the cell's position."""

    ref: str
    value: str | int | float | bool | None = None


class Row(BaseModel):
    """Worksheet row with 1-based ``r`` and its populated cells."""

    r: int = Field(..., ge=1)
    hidden: bool = False
    cells: list[Cell] = Field(default_factory=list)


class Hyperlink(BaseModel):
    """Hyperlink anchored on one cell, backed by a sheet relationship."""

    ref: str
    rid: str | None = None


class MergeCell(BaseModel):
    """Merged range such as ``A1:B2``."""

    ref: str


class MergeCells(BaseModel):
    """Merged-range container; ``count`` mirrors ``len(cells)``."""

    count: int = 0
    cells: list[MergeCell] = Field(default_factory=list)

    @model_validator(mode="after")
    def _sync_count(self) -> MergeCells:
        self.count = len(self.cells)
        return self

    def delete(self, index: int) -> None:
        """Delete the range at ``index`` and re-sync ``count``."""
        if len(self.cells) > index:
            del self.cells[index]
            self.count = len(self.cells)


class AutoFilter(BaseModel):
    """Auto-filter extent such as ``A1:C10``."""

    ref: str


class Worksheet(BaseModel):
    """In-memory worksheet model mutated by the adjusters.

    Optional containers are ``None`` when absent; an empty list is never left
    behind after an adjustment.
    """

    rows: list[Row] = Field(default_factory=list)
    hyperlinks: list[Hyperlink] | None = None
    merge_cells: MergeCells | None = None
    auto_filter: AutoFilter | None = None


class CalcChainEntry(BaseModel):
    """Calculation chain cell ``ref`` on the sheet identified by ``i``."""

    r: str
    i: int


class CalcChain(BaseModel):
    """Workbook-wide calculation chain."""

    c: list[CalcChainEntry] = Field(default_factory=list)


__all__ = [
    "AutoFilter",
    "CalcChain",
    "CalcChainEntry",
    "Cell",
    "Hyperlink",
    "MergeCell",
    "MergeCells",
    "Row",
    "Worksheet",
]
