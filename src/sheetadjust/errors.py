from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

AdjustErrorKind = Literal[
    "invalid_reference",
    "invalid_range",
    "invalid_coordinate",
    "sheet_not_found",
]


class AdjustErrorDetail(BaseModel):
    """Structured error details for adjustment failures."""

    kind: AdjustErrorKind
    value: str
    message: str


class AdjustError(ValueError):
    """Adjustment error with structured detail."""

    kind: AdjustErrorKind = "invalid_reference"

    def __init__(self, value: object, message: str) -> None:
        super().__init__(message)
        self.detail = AdjustErrorDetail(kind=self.kind, value=str(value), message=message)


class InvalidReferenceError(AdjustError):
    """Cell reference text does not match the letters+digits grammar."""

    kind: AdjustErrorKind = "invalid_reference"


class InvalidRangeError(AdjustError):
    """Range reference text is not exactly two cell references."""

    kind: AdjustErrorKind = "invalid_range"


class InvalidCoordinateError(AdjustError):
    """Column or row index is out of range for encoding."""

    kind: AdjustErrorKind = "invalid_coordinate"


class SheetNotFoundError(AdjustError):
    """Worksheet name is unknown to the workbook."""

    kind: AdjustErrorKind = "sheet_not_found"


__all__ = [
    "AdjustError",
    "AdjustErrorDetail",
    "AdjustErrorKind",
    "InvalidCoordinateError",
    "InvalidRangeError",
    "InvalidReferenceError",
    "SheetNotFoundError",
]
