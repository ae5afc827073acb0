from __future__ import annotations

from .a1 import (
    cell_name_to_coordinates,
    column_index_to_label,
    column_label_to_index,
    coordinates_to_cell_name,
    coordinates_to_range_ref,
    join_cell_name,
    range_ref_to_coordinates,
    sort_coordinates,
    split_cell_name,
)

__all__ = [
    "cell_name_to_coordinates",
    "column_index_to_label",
    "column_label_to_index",
    "coordinates_to_cell_name",
    "coordinates_to_range_ref",
    "join_cell_name",
    "range_ref_to_coordinates",
    "sort_coordinates",
    "split_cell_name",
]
