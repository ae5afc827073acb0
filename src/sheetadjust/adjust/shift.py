from __future__ import annotations


def shift_pivot(pivot: int, num: int, offset: int) -> int:
    """Shift ``pivot`` by ``offset`` when it sits at or after ``num``.

    The result never drops below 1.

    Args:
        pivot: Row or column index being adjusted.
        num: Edit position (1-based).
        offset: Signed count; positive inserts, negative deletes.

    Returns:
        Adjusted index.
    """
    if pivot >= num:
        return max(pivot + offset, 1)
    return pivot
