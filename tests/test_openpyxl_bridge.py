from __future__ import annotations

from openpyxl import Workbook as OpenpyxlWorkbook
from openpyxl.worksheet.hyperlink import Hyperlink as OpenpyxlHyperlink

from sheetadjust.models import AutoFilter, MergeCell, MergeCells
from sheetadjust.openpyxl_bridge import workbook_from_openpyxl, worksheet_from_openpyxl
from sheetadjust.workbook import remove_col, remove_row


def _build_openpyxl_workbook() -> OpenpyxlWorkbook:
    workbook = OpenpyxlWorkbook()
    sheet = workbook.active
    assert sheet is not None
    sheet.title = "Data"
    sheet["A1"] = "name"
    sheet["B1"] = "score"
    sheet["A2"] = "alpha"
    sheet["B2"] = 10
    sheet["A3"] = "beta"
    sheet["B3"] = 2.5
    sheet["A5"] = "link"
    sheet["A5"].hyperlink = "https://example.com"
    sheet.merge_cells("C1:D2")
    sheet.auto_filter.ref = "A1:B3"
    sheet.row_dimensions[3].hidden = True
    workbook.create_sheet("Other")["A1"] = "x"
    return workbook


def test_worksheet_from_openpyxl_reads_structure() -> None:
    workbook = _build_openpyxl_workbook()
    ws = worksheet_from_openpyxl(workbook["Data"])
    assert [row.r for row in ws.rows] == [1, 2, 3, 5]
    assert [cell.ref for cell in ws.rows[0].cells] == ["A1", "B1"]
    assert ws.rows[1].cells[1].value == 10
    assert ws.rows[2].hidden is True
    assert ws.merge_cells == MergeCells(cells=[MergeCell(ref="C1:D2")])
    assert ws.auto_filter == AutoFilter(ref="A1:B3")
    assert ws.hyperlinks is not None
    assert [link.ref for link in ws.hyperlinks] == ["A5"]


def test_workbook_from_openpyxl_supports_edits() -> None:
    workbook = workbook_from_openpyxl(_build_openpyxl_workbook())
    assert workbook.get_sheet_id("Data") == 1
    assert workbook.get_sheet_id("Other") == 2
    sheet = workbook.sheets["Data"]
    assert sheet.relationships == {"rId1": "https://example.com"}

    remove_row(workbook, "Data", 1)

    ws = sheet.worksheet
    assert ws.auto_filter is None
    assert [row.r for row in ws.rows] == [1, 2, 4]
    assert all(not row.hidden for row in ws.rows)
    assert ws.merge_cells == MergeCells(cells=[MergeCell(ref="C1:D1")])
    assert ws.hyperlinks is not None
    assert [link.ref for link in ws.hyperlinks] == ["A4"]
    assert workbook.get_worksheet("Other").rows[0].cells[0].ref == "A1"


def test_internal_link_does_not_take_explicit_relationship_id() -> None:
    source = OpenpyxlWorkbook()
    sheet = source.active
    assert sheet is not None
    sheet.title = "Data"
    source.create_sheet("Other")
    sheet["A1"] = "jump"
    sheet["A1"].hyperlink = OpenpyxlHyperlink(ref="A1", location="Other!A1")
    sheet["A2"] = "site"
    sheet["A2"].hyperlink = OpenpyxlHyperlink(
        ref="A2", target="https://example.com", id="rId1"
    )
    workbook = workbook_from_openpyxl(source)
    entry = workbook.sheets["Data"]
    assert entry.worksheet.hyperlinks is not None
    rids = [link.rid for link in entry.worksheet.hyperlinks]
    assert rids == ["rId2", "rId1"]
    assert entry.relationships == {
        "rId2": "Other!A1",
        "rId1": "https://example.com",
    }

    remove_row(workbook, "Data", 1)

    assert entry.worksheet.hyperlinks is not None
    assert [(link.ref, link.rid) for link in entry.worksheet.hyperlinks] == [
        ("A1", "rId1")
    ]
    assert entry.relationships == {"rId1": "https://example.com"}


def test_repeated_relationship_id_gets_distinct_ids() -> None:
    source = OpenpyxlWorkbook()
    sheet = source.active
    assert sheet is not None
    sheet.title = "Data"
    for ref in ("A1", "B1"):
        sheet[ref] = ref
        sheet[ref].hyperlink = OpenpyxlHyperlink(
            ref=ref, target="https://example.com", id="rId1"
        )
    workbook = workbook_from_openpyxl(source)
    entry = workbook.sheets["Data"]

    remove_col(workbook, "Data", 1)

    assert entry.worksheet.hyperlinks is not None
    assert [(link.ref, link.rid) for link in entry.worksheet.hyperlinks] == [
        ("A1", "rId2")
    ]
    assert entry.relationships == {"rId2": "https://example.com"}


def test_hidden_rows_without_values_are_read() -> None:
    source = OpenpyxlWorkbook()
    sheet = source.active
    assert sheet is not None
    sheet.title = "Data"
    sheet["A1"] = "header"
    sheet["A2"] = "value"
    sheet.row_dimensions[8].hidden = True
    sheet.auto_filter.ref = "A1:A8"
    workbook = workbook_from_openpyxl(source)
    ws = workbook.get_worksheet("Data")
    assert [(row.r, row.hidden) for row in ws.rows] == [
        (1, False),
        (2, False),
        (8, True),
    ]

    remove_row(workbook, "Data", 1)

    assert ws.auto_filter is None
    assert [(row.r, row.hidden) for row in ws.rows] == [
        (1, False),
        (7, False),
    ]
