"""Shared fixtures for the import engine tests."""

from __future__ import annotations

import csv
import io

import pytest

from tests.fakes import MemoryTripStore
from tripflow.importer.mapper import derive
from tripflow.importer.rows import ImportRow
from tripflow.importer.validator import validate

NEMT_HEADERS = [
    "Patient First Name",
    "Patient Last Name",
    "Pickup Address",
    "Pickup City",
    "Pickup State",
    "Pickup Zip",
    "Dropoff Address",
    "Trip Date",
    "Pickup Time",
]


def csv_bytes(rows: list[list[str]], *, delimiter: str = ",") -> bytes:
    """Render rows as delimited text the way a broker export would."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\r\n")
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def nemt_manifest(*rows: list[str]) -> bytes:
    """CSV with the future_nemt_template headers."""
    return csv_bytes([NEMT_HEADERS, *rows])


def nemt_row(first: str, last: str, *, pickup: str = "1 Main St", trip_date: str = "2024-01-05") -> list[str]:
    return [first, last, pickup, "Springfield", "IL", "62701", "2 Oak Ave", trip_date, "9:30 AM"]


@pytest.fixture
def store() -> MemoryTripStore:
    return MemoryTripStore()


@pytest.fixture
def make_row():
    """Factory for mapped + validated rows with sensible trip defaults."""

    def _make(row_number: int = 1, **values) -> ImportRow:
        defaults = {
            "patient_first_name": "Jane",
            "patient_last_name": "Doe",
            "pickup_address": "1 Main St",
            "dropoff_address": "2 Oak Ave",
            "trip_date": "2024-01-05",
            "pickup_time": "09:30",
        }
        defaults.update(values)
        row = ImportRow(row_number=row_number, **defaults)
        derive(row)
        validate(row)
        return row

    return _make
