from __future__ import annotations

from collections.abc import Sequence
import re

from sheetadjust.errors import (
    InvalidCoordinateError,
    InvalidRangeError,
    InvalidReferenceError,
)

_A1_PATTERN = re.compile(r"^\$?([A-Za-z]+)\$?([1-9][0-9]*)$")
_COLUMN_LABEL_PATTERN = re.compile(r"^[A-Za-z]+$")


def split_cell_name(value: str) -> tuple[str, int]:
    """Split A1 notation into normalized (column_label, row_index)."""
    match = _A1_PATTERN.match(value.strip())
    if match is None:
        raise InvalidReferenceError(value, f"Invalid cell reference: {value}")
    return match.group(1).upper(), int(match.group(2))


def join_cell_name(column: str, row: int) -> str:
    """Join a column label and row number into A1 notation."""
    if not _COLUMN_LABEL_PATTERN.match(column):
        raise InvalidReferenceError(column, f"Invalid column label: {column}")
    if row < 1:
        raise InvalidCoordinateError(row, f"Row index must be positive: {row}")
    return f"{column.upper()}{row}"


def column_label_to_index(label: str) -> int:
    """Convert Excel-style column label (A/AA) to 1-based index."""
    normalized = label.strip().upper()
    if not _COLUMN_LABEL_PATTERN.match(normalized):
        raise InvalidReferenceError(label, f"Invalid column label: {label}")
    index = 0
    for char in normalized:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index


def column_index_to_label(index: int) -> str:
    """Convert 1-based column index to Excel-style column label."""
    if index < 1:
        raise InvalidCoordinateError(index, f"Column index must be positive: {index}")
    chunks: list[str] = []
    current = index
    while current > 0:
        current -= 1
        chunks.append(chr(ord("A") + (current % 26)))
        current //= 26
    return "".join(reversed(chunks))


def cell_name_to_coordinates(value: str) -> tuple[int, int]:
    """Convert A1 notation to 1-based (column, row) coordinates."""
    column, row = split_cell_name(value)
    return column_label_to_index(column), row


def coordinates_to_cell_name(col: int, row: int) -> str:
    """Convert 1-based (column, row) coordinates to A1 notation."""
    if col < 1 or row < 1:
        raise InvalidCoordinateError(
            (col, row), f"Invalid cell coordinates: ({col}, {row})"
        )
    return f"{column_index_to_label(col)}{row}"


def range_ref_to_coordinates(ref: str) -> list[int]:
    """Convert an A1 range to ``[col1, row1, col2, row2]``.

    Absolute markers (``$``) are ignored. The corners are returned in the order
    they appear in ``ref``; use :func:`sort_coordinates` to normalize them.

    Raises:
        InvalidRangeError: If ``ref`` is not exactly two cell references.
        InvalidReferenceError: If either corner is malformed.
    """
    parts = ref.replace("$", "").split(":")
    if len(parts) != 2:
        raise InvalidRangeError(ref, f"Invalid range reference: {ref}")
    first_col, first_row = cell_name_to_coordinates(parts[0])
    last_col, last_row = cell_name_to_coordinates(parts[1])
    return [first_col, first_row, last_col, last_row]


def coordinates_to_range_ref(coordinates: Sequence[int]) -> str:
    """Convert ``[col1, row1, col2, row2]`` to an A1 range."""
    if len(coordinates) != 4:
        raise InvalidCoordinateError(
            list(coordinates), "Range coordinates must contain exactly 4 integers."
        )
    first = coordinates_to_cell_name(coordinates[0], coordinates[1])
    last = coordinates_to_cell_name(coordinates[2], coordinates[3])
    return f"{first}:{last}"


def sort_coordinates(coordinates: list[int]) -> list[int]:
    """Correct an inverted area in place, e.g. ``C1:B3`` becomes ``B1:C3``."""
    if len(coordinates) != 4:
        raise InvalidCoordinateError(
            list(coordinates), "Range coordinates must contain exactly 4 integers."
        )
    if coordinates[2] < coordinates[0]:
        coordinates[0], coordinates[2] = coordinates[2], coordinates[0]
    if coordinates[3] < coordinates[1]:
        coordinates[1], coordinates[3] = coordinates[3], coordinates[1]
    return coordinates
