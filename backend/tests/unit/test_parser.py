"""Tests for manifest file parsing."""

from __future__ import annotations

import io
from datetime import datetime, time

import pytest
import xlrd
from openpyxl import Workbook
from xlrd.sheet import Cell

from tests.conftest import csv_bytes
from tripflow.core.constants import FileFormat
from tripflow.importer import parser
from tripflow.importer.errors import FileParseError, UnsupportedFormatError


def _xlsx_bytes(rows: list[list]) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


# ─── Format detection ─────────────────────────────────────

@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("trips.csv", FileFormat.DELIMITED_TEXT),
        ("TRIPS.TSV", FileFormat.DELIMITED_TEXT),
        ("manifest.xlsx", FileFormat.SPREADSHEET),
        ("manifest.xls", FileFormat.SPREADSHEET),
    ],
)
def test_detect_format(file_name: str, expected: FileFormat):
    assert parser.detect_format(file_name)[1] == expected


async def test_unsupported_extension_is_rejected_before_reading():
    with pytest.raises(UnsupportedFormatError) as exc_info:
        await parser.parse("manifest.pdf", b"%PDF-1.4")
    assert ".pdf" in str(exc_info.value)
    assert "CSV, TSV, XLS, or XLSX" in str(exc_info.value)


# ─── Delimited text ───────────────────────────────────────

async def test_csv_rows_keyed_by_header():
    content = csv_bytes([
        ["First Name", "Last Name", "Trip Date"],
        ["Jane", "Doe", "2024-01-05"],
        ["John", "Smith", "2024-01-06"],
    ])
    result = await parser.parse("trips.csv", content)

    assert result.headers == ["First Name", "Last Name", "Trip Date"]
    assert result.rows[1] == {"First Name": "John", "Last Name": "Smith", "Trip Date": "2024-01-06"}
    assert result.row_numbers == [1, 2]
    assert result.parse_errors == []


async def test_tsv_uses_tab_delimiter():
    content = csv_bytes([["Name", "Miles"], ["Jane Doe", "12,5"]], delimiter="\t")
    result = await parser.parse("trips.tsv", content)
    assert result.rows == [{"Name": "Jane Doe", "Miles": "12,5"}]


async def test_blank_lines_are_skipped():
    content = b"Name,Date\r\n\r\nJane,2024-01-05\r\n,\r\nJohn,2024-01-06\r\n"
    result = await parser.parse("trips.csv", content)
    assert [r["Name"] for r in result.rows] == ["Jane", "John"]
    assert result.row_numbers == [1, 2]


async def test_field_count_mismatch_is_reported_and_row_kept():
    content = b"A,B,C\r\n1,2,3\r\n4,5\r\n6,7,8,9\r\n"
    result = await parser.parse("trips.csv", content)

    assert result.parse_errors == [
        "Row 2: Too few fields: expected 3 fields but parsed 2",
        "Row 3: Too many fields: expected 3 fields but parsed 4",
    ]
    assert result.rows[1] == {"A": "4", "B": "5", "C": ""}
    assert len(result.rows) == 3


async def test_bad_quoting_skips_only_that_row():
    content = b'Name,Notes\r\nJane,ok\r\nJohn,"bad"quote\r\nMary,fine\r\n'
    result = await parser.parse("trips.csv", content)

    assert [r["Name"] for r in result.rows] == ["Jane", "Mary"]
    assert result.row_numbers == [1, 3]
    assert len(result.parse_errors) == 1
    assert result.parse_errors[0].startswith("Row 2: ")


async def test_blank_and_repeated_headers_are_renamed():
    content = b"ZipCode,,ZipCode,ZipCode\r\n1,2,3,4\r\n"
    result = await parser.parse("trips.csv", content)
    assert result.headers == ["ZipCode", "column_2", "ZipCode_1", "ZipCode_2"]
    assert result.rows[0]["ZipCode_1"] == "3"


async def test_utf8_bom_and_latin1_are_decoded():
    bom = await parser.parse("a.csv", "\ufeffName\r\nJosé\r\n".encode("utf-8"))
    latin = await parser.parse("b.csv", "Name\r\nJosé\r\n".encode("latin-1"))
    assert bom.headers == ["Name"]
    assert bom.rows[0]["Name"] == "José"
    assert latin.rows[0]["Name"] == "José"


async def test_empty_file_yields_no_rows():
    result = await parser.parse("empty.csv", b"")
    assert result.headers == []
    assert result.rows == []
    assert result.parse_errors == []


def test_build_headers_strips_names():
    assert parser.build_headers([" Name ", None, "Name"]) == ["Name", "column_2", "Name_1"]


# ─── Spreadsheets ─────────────────────────────────────────

async def test_xlsx_cells_render_as_text():
    content = _xlsx_bytes([
        [None],
        ["Rider", "Transport Date", "PU Time", "Loaded Miles", "Pickup At"],
        ["Jane Doe", datetime(2024, 1, 5), time(9, 30), 12, datetime(2024, 1, 5, 9, 30)],
    ])
    result = await parser.parse("manifest.xlsx", content)

    assert result.headers == ["Rider", "Transport Date", "PU Time", "Loaded Miles", "Pickup At"]
    assert result.rows == [{
        "Rider": "Jane Doe",
        "Transport Date": "2024-01-05",
        "PU Time": "09:30",
        "Loaded Miles": "12",
        "Pickup At": "2024-01-05 09:30",
    }]
    assert result.row_numbers == [1]


async def test_xlsx_short_rows_are_padded():
    content = _xlsx_bytes([["A", "B", "C"], ["1"]])
    result = await parser.parse("manifest.xlsx", content)
    assert result.rows == [{"A": "1", "B": "", "C": ""}]


async def test_corrupt_workbook_raises():
    with pytest.raises(FileParseError):
        await parser.parse("manifest.xlsx", b"not a zip archive")


class _StubBook:
    def __init__(self, datemode: int = 0) -> None:
        self.datemode = datemode
        self.released = False

    def release_resources(self) -> None:
        self.released = True


class _StubSheet:
    def __init__(self, rows: list[list[Cell]]) -> None:
        self._rows = rows
        self.nrows = len(rows)

    def row(self, index: int) -> list[Cell]:
        return self._rows[index]


def _xls_sheet(trip_date: float) -> _StubSheet:
    return _StubSheet([
        [Cell(xlrd.XL_CELL_EMPTY, "")],
        [
            Cell(xlrd.XL_CELL_TEXT, "Rider"),
            Cell(xlrd.XL_CELL_TEXT, "Transport Date"),
            Cell(xlrd.XL_CELL_TEXT, "PU Time"),
            Cell(xlrd.XL_CELL_TEXT, "Pickup At"),
            Cell(xlrd.XL_CELL_TEXT, "Miles"),
            Cell(xlrd.XL_CELL_TEXT, "Wheelchair"),
            Cell(xlrd.XL_CELL_TEXT, "Notes"),
        ],
        [
            Cell(xlrd.XL_CELL_TEXT, "Jane Doe"),
            Cell(xlrd.XL_CELL_DATE, trip_date),
            Cell(xlrd.XL_CELL_DATE, 10.5 / 24),
            Cell(xlrd.XL_CELL_DATE, trip_date + 9.5 / 24),
            Cell(xlrd.XL_CELL_NUMBER, 12.0),
            Cell(xlrd.XL_CELL_BOOLEAN, 1),
            Cell(xlrd.XL_CELL_ERROR, 0x07),
        ],
        [Cell(xlrd.XL_CELL_BLANK, ""), Cell(xlrd.XL_CELL_EMPTY, "")],
    ])


@pytest.mark.parametrize(
    ("datemode", "trip_date"),
    [
        (0, 45296.0),  # 1900 date system
        (1, 43834.0),  # 1904 date system
    ],
)
async def test_xls_cells_render_like_xlsx(monkeypatch, datemode: int, trip_date: float):
    book = _StubBook(datemode)
    monkeypatch.setattr(
        parser, "_open_sheet", lambda content, extension: parser.XlrdSheetAdapter(book, _xls_sheet(trip_date))
    )

    result = await parser.parse("manifest.xls", b"")

    assert result.headers == ["Rider", "Transport Date", "PU Time", "Pickup At", "Miles", "Wheelchair", "Notes"]
    assert result.rows == [{
        "Rider": "Jane Doe",
        "Transport Date": "2024-01-05",
        "PU Time": "10:30",
        "Pickup At": "2024-01-05 09:30",
        "Miles": "12",
        "Wheelchair": "TRUE",
        "Notes": "",
    }]
    assert result.row_numbers == [1]
    assert book.released


def test_xls_time_only_cell_is_a_time_of_day():
    sheet = _StubSheet([[Cell(xlrd.XL_CELL_DATE, 10.5 / 24), Cell(xlrd.XL_CELL_BLANK, "")]])
    adapter = parser.XlrdSheetAdapter(_StubBook(), sheet)
    assert list(adapter.iter_rows()) == [[time(10, 30), None]]


async def test_corrupt_xls_raises():
    with pytest.raises(FileParseError):
        await parser.parse("manifest.xls", b"not an OLE2 compound document")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        (True, "TRUE"),
        (3.0, "3"),
        (3.25, "3.25"),
        (datetime(2024, 1, 5, 0, 0), "2024-01-05"),
        (time(14, 5), "14:05"),
    ],
)
def test_cell_to_text(value, expected):
    assert parser._cell_to_text(value) == expected
