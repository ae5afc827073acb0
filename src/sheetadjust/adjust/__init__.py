from __future__ import annotations

from .hyperlinks import RelationshipStore
from .service import AdjustRequest, WorkbookProtocol, adjust, run_adjust
from .shift import shift_pivot
from .types import AdjustDirection

__all__ = [
    "AdjustDirection",
    "AdjustRequest",
    "RelationshipStore",
    "WorkbookProtocol",
    "adjust",
    "run_adjust",
    "shift_pivot",
]
