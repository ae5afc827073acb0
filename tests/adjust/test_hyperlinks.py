from __future__ import annotations

from sheetadjust.adjust.hyperlinks import adjust_hyperlinks
from sheetadjust.models import Hyperlink, Worksheet


class _RecordingStore:
    def __init__(self) -> None:
        self.deleted: list[tuple[str, str]] = []

    def delete_sheet_relationship(self, sheet: str, rid: str) -> None:
        self.deleted.append((sheet, rid))


def _links(*refs: str) -> list[Hyperlink]:
    return [Hyperlink(ref=ref, rid=f"rId{index}") for index, ref in enumerate(refs, 1)]


def test_delete_row_removes_anchored_link_and_shifts_rest() -> None:
    ws = Worksheet(hyperlinks=_links("B3", "B5", "B7"))
    store = _RecordingStore()
    adjust_hyperlinks(ws, store, "Sheet1", "rows", 5, -1)
    assert ws.hyperlinks is not None
    assert [link.ref for link in ws.hyperlinks] == ["B3", "B6"]
    assert [link.rid for link in ws.hyperlinks] == ["rId1", "rId3"]
    assert store.deleted == [("Sheet1", "rId2")]


def test_delete_column_removes_every_link_in_column() -> None:
    ws = Worksheet(hyperlinks=_links("C1", "A2", "C9", "D4"))
    store = _RecordingStore()
    adjust_hyperlinks(ws, store, "Data", "columns", 3, -1)
    assert ws.hyperlinks is not None
    assert [link.ref for link in ws.hyperlinks] == ["A2", "C4"]
    assert store.deleted == [("Data", "rId3"), ("Data", "rId1")]


def test_removing_last_link_clears_container() -> None:
    ws = Worksheet(hyperlinks=_links("A2"))
    store = _RecordingStore()
    adjust_hyperlinks(ws, store, "Sheet1", "rows", 2, -1)
    assert ws.hyperlinks is None
    assert store.deleted == [("Sheet1", "rId1")]


def test_insert_never_removes_links() -> None:
    ws = Worksheet(hyperlinks=_links("A2", "A5"))
    store = _RecordingStore()
    adjust_hyperlinks(ws, store, "Sheet1", "rows", 2, 3)
    assert ws.hyperlinks is not None
    assert [link.ref for link in ws.hyperlinks] == ["A5", "A8"]
    assert store.deleted == []


def test_insert_columns_shifts_anchor_column() -> None:
    ws = Worksheet(hyperlinks=_links("A1", "Z1"))
    adjust_hyperlinks(ws, _RecordingStore(), "Sheet1", "columns", 2, 2)
    assert ws.hyperlinks is not None
    assert [link.ref for link in ws.hyperlinks] == ["A1", "AB1"]


def test_link_without_relationship_is_removed_silently() -> None:
    ws = Worksheet(hyperlinks=[Hyperlink(ref="A4"), Hyperlink(ref="A6", rid="rId9")])
    store = _RecordingStore()
    adjust_hyperlinks(ws, store, "Sheet1", "rows", 4, -1)
    assert ws.hyperlinks == [Hyperlink(ref="A5", rid="rId9")]
    assert store.deleted == []


def test_empty_container_is_normalized_to_none() -> None:
    ws = Worksheet(hyperlinks=[])
    adjust_hyperlinks(ws, _RecordingStore(), "Sheet1", "rows", 1, 1)
    assert ws.hyperlinks is None
