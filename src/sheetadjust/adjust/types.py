from __future__ import annotations

from typing import Literal

AdjustDirection = Literal["rows", "columns"]
AdjustStage = Literal[
    "dimensions",
    "hyperlinks",
    "merge_cells",
    "auto_filter",
    "calc_chain",
    "cleanup",
]
