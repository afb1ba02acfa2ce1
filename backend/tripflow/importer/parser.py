"""
Manifest File Parser — uploaded bytes → raw header/value rows.

Dispatches on the file extension:
    .csv / .tsv     → csv module (comma / tab)
    .xlsx / .xlsm   → openpyxl, first worksheet
    .xls            → xlrd, first sheet

Row-level problems in delimited text (bad quoting, field-count mismatch)
are collected as ``"Row <n>: <message>"`` and never abort the parse.
A container that cannot be opened at all raises FileParseError.
"""

from __future__ import annotations

import asyncio
import csv
import io
import os
from datetime import date, datetime, time
from typing import Any, Iterator

from tripflow.core.constants import FileFormat
from tripflow.core.logging import get_logger
from tripflow.importer.errors import FileParseError, UnsupportedFormatError
from tripflow.importer.rows import ParseResult

logger = get_logger(__name__)

EXTENSION_MAP: dict[str, FileFormat] = {
    ".csv": FileFormat.DELIMITED_TEXT,
    ".tsv": FileFormat.DELIMITED_TEXT,
    ".xlsx": FileFormat.SPREADSHEET,
    ".xlsm": FileFormat.SPREADSHEET,
    ".xls": FileFormat.SPREADSHEET,
}

DELIMITERS: dict[str, str] = {
    ".csv": ",",
    ".tsv": "\t",
}


def detect_format(file_name: str) -> tuple[str, FileFormat]:
    """Return ``(extension, FileFormat)`` or raise UnsupportedFormatError."""
    extension = os.path.splitext(file_name or "")[1].lower()
    file_format = EXTENSION_MAP.get(extension)
    if file_format is None:
        raise UnsupportedFormatError(extension)
    return extension, file_format


async def parse(file_name: str, content: bytes) -> ParseResult:
    """
    Parse one manifest.

    The format check happens before any byte is read.  The actual parse
    runs in a worker thread so the event loop stays responsive and the
    awaiting caller can be cancelled.
    """
    extension, file_format = detect_format(file_name)
    result = await asyncio.to_thread(_parse_sync, file_name, extension, content)
    logger.info(
        "Manifest parsed",
        file_name=file_name,
        format=file_format.value,
        columns=len(result.headers),
        rows=len(result.rows),
        parse_errors=len(result.parse_errors),
    )
    return result


def _parse_sync(file_name: str, extension: str, content: bytes) -> ParseResult:
    if extension in DELIMITERS:
        return parse_delimited(file_name, content, delimiter=DELIMITERS[extension])
    return parse_spreadsheet(file_name, content, extension=extension)


# ─── Headers ──────────────────────────────────────────────

def build_headers(raw_headers: list[Any]) -> list[str]:
    """
    Strip header names, name blanks ``column_<n>`` and suffix repeats.

    The second ``ZipCode`` becomes ``ZipCode_1``, the third ``ZipCode_2``.
    """
    headers: list[str] = []
    seen: dict[str, int] = {}
    for index, raw in enumerate(raw_headers, start=1):
        name = _cell_to_text(raw).strip() or f"column_{index}"
        if name in seen:
            seen[name] += 1
            candidate = f"{name}_{seen[name]}"
            while candidate in seen:
                seen[name] += 1
                candidate = f"{name}_{seen[name]}"
            name = candidate
        seen[name] = 0
        headers.append(name)
    return headers


def _row_has_data(values: list[str]) -> bool:
    return any(value.strip() for value in values)


# ═══════════════════════════════════════════════════════════
#  Delimited text
# ═══════════════════════════════════════════════════════════

def decode_upload_bytes(raw_bytes: bytes) -> str:
    """UTF-8 (BOM tolerated) with a Latin-1 fallback."""
    try:
        return raw_bytes.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw_bytes.decode("latin-1")


def parse_delimited(file_name: str, content: bytes, *, delimiter: str = ",") -> ParseResult:
    """Parse CSV/TSV bytes, collecting per-row problems."""
    result = ParseResult(file_name=file_name)
    text = decode_upload_bytes(content)
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)

    header_row: list[str] | None = None
    data_row = 0
    while True:
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            if header_row is None:
                raise FileParseError(
                    f"Could not read header row of {file_name}: {exc}",
                    details={"line": reader.line_num},
                ) from exc
            data_row += 1
            result.parse_errors.append(f"Row {data_row}: {exc}")
            continue

        if header_row is None:
            if not _row_has_data(record):
                continue
            header_row = record
            result.headers = build_headers(record)
            continue

        if not _row_has_data(record):
            continue
        data_row += 1

        expected = len(result.headers)
        if len(record) < expected:
            result.parse_errors.append(
                f"Row {data_row}: Too few fields: expected {expected} fields but parsed {len(record)}"
            )
        elif len(record) > expected:
            result.parse_errors.append(
                f"Row {data_row}: Too many fields: expected {expected} fields but parsed {len(record)}"
            )

        padded = record + [""] * (expected - len(record))
        result.rows.append(dict(zip(result.headers, padded)))
        result.row_numbers.append(data_row)

    return result


# ═══════════════════════════════════════════════════════════
#  Sheet adapters over xlrd / openpyxl
# ═══════════════════════════════════════════════════════════

class XlrdSheetAdapter:
    """
    Adapter for xlrd sheets; converts date cells using the book's datemode.

    A date cell below 1.0 holds only a time of day and becomes a ``time``,
    matching what openpyxl returns for the same cell.
    """

    def __init__(self, book, sheet) -> None:
        self._book = book
        self._s = sheet

    def iter_rows(self) -> Iterator[list[Any]]:
        import xlrd

        for r in range(self._s.nrows):
            values = []
            for cell in self._s.row(r):
                if cell.ctype == xlrd.XL_CELL_DATE and cell.value < 1.0:
                    _, _, _, hour, minute, second = xlrd.xldate.xldate_as_tuple(cell.value, self._book.datemode)
                    values.append(time(hour, minute, second))
                elif cell.ctype == xlrd.XL_CELL_DATE:
                    values.append(xlrd.xldate.xldate_as_datetime(cell.value, self._book.datemode))
                elif cell.ctype == xlrd.XL_CELL_BOOLEAN:
                    values.append(bool(cell.value))
                elif cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
                    values.append(None)
                else:
                    values.append(cell.value)
            yield values

    def close(self) -> None:
        self._book.release_resources()


class OpenpyxlSheetAdapter:
    """Adapter for openpyxl worksheets opened read-only."""

    def __init__(self, workbook) -> None:
        self._wb = workbook
        self._ws = workbook.worksheets[0]

    def iter_rows(self) -> Iterator[list[Any]]:
        for row in self._ws.iter_rows(values_only=True):
            yield list(row)

    def close(self) -> None:
        self._wb.close()


def _open_sheet(content: bytes, extension: str):
    """Open the first sheet of an XLS or XLSX payload."""
    if extension == ".xls":
        import xlrd

        book = xlrd.open_workbook(file_contents=content)
        return XlrdSheetAdapter(book, book.sheet_by_index(0))

    from openpyxl import load_workbook

    workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    return OpenpyxlSheetAdapter(workbook)


def _cell_to_text(value: Any) -> str:
    """Render a spreadsheet cell the way a user sees it in the grid."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_spreadsheet(file_name: str, content: bytes, *, extension: str) -> ParseResult:
    """Parse the first sheet of a workbook; first non-blank row is the header."""
    result = ParseResult(file_name=file_name)
    try:
        sheet = _open_sheet(content, extension)
    except Exception as exc:
        raise FileParseError(
            f"Could not open spreadsheet {file_name}: {exc}",
            details={"extension": extension},
        ) from exc

    try:
        data_row = 0
        for raw_values in sheet.iter_rows():
            values = [_cell_to_text(v) for v in raw_values]
            if not _row_has_data(values):
                continue
            if not result.headers:
                while values and not values[-1].strip():
                    values.pop()
                result.headers = build_headers(values)
                continue

            data_row += 1
            width = len(result.headers)
            padded = (values + [""] * width)[:width]
            result.rows.append(dict(zip(result.headers, padded)))
            result.row_numbers.append(data_row)
    except Exception as exc:
        raise FileParseError(
            f"Could not read spreadsheet {file_name}: {exc}",
            details={"extension": extension},
        ) from exc
    finally:
        sheet.close()

    return result
