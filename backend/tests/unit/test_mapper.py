"""Tests for raw row → canonical row mapping and derivations."""

from __future__ import annotations

import pytest

from tripflow.importer.mapper import compose_address, derive, header_key, lookup_raw, map_row, map_rows
from tripflow.importer.review import ReviewStore
from tripflow.importer.rows import ImportRow
from tripflow.importer.templates import get_template
from tripflow.importer.templates.base import template
from tripflow.importer.validator import validate

FIRST_LAST = template("first_last", [
    ("First Name", "patient_first_name"),
    ("Last Name", "patient_last_name"),
    ("Name", "patient_full_name"),
    ("Street", "pickup_address"),
    ("City", "pickup_city"),
    ("State", "pickup_state"),
    ("Zip", "pickup_zip"),
    "Comments",
])


def test_full_name_derived_from_first_and_last():
    row = map_row({"First Name": "Jane", "Last Name": "Doe"}, FIRST_LAST, row_number=1)
    assert row.patient_full_name == "Jane Doe"
    assert "patient_full_name" in row.derived


def test_explicit_full_name_is_kept():
    raw = {"First Name": "Jane", "Last Name": "Doe", "Name": "Doe, Jane"}
    row = map_row(raw, FIRST_LAST, row_number=1)
    assert row.patient_full_name == "Doe, Jane"
    assert row.derived == set()


def test_blank_and_missing_values_are_both_absent():
    row = map_row({"First Name": "   ", "Comments": "call ahead"}, FIRST_LAST, row_number=1)
    assert row.patient_first_name is None
    assert row.patient_last_name is None
    assert row.raw["Comments"] == "call ahead"


def test_values_are_stripped():
    row = map_row({"Street": "  1 Main St  "}, FIRST_LAST, row_number=1)
    assert row.pickup_address == "1 Main St"


def test_composite_pickup_location():
    raw = {"Street": "1 Main St", "City": "Springfield", "State": "IL", "Zip": "62701"}
    row = map_row(raw, FIRST_LAST, row_number=1)
    assert row.pickup_location == "1 Main St, Springfield, IL 62701"
    assert row.pickup_address == "1 Main St"


def test_incomplete_address_has_no_composite():
    raw = {"Street": "1 Main St", "City": "Springfield", "State": "IL"}
    row = map_row(raw, FIRST_LAST, row_number=1)
    assert row.pickup_location is None


def test_compose_address_includes_second_line():
    assert compose_address("1 Main St", "Apt 4", "Springfield", "IL", "62701") == (
        "1 Main St, Apt 4, Springfield, IL 62701"
    )


def test_derive_is_idempotent():
    raw = {"First Name": "Jane", "Last Name": "Doe", "Street": "1 Main St", "City": "X", "State": "IL", "Zip": "1"}
    row = map_row(raw, FIRST_LAST, row_number=1)
    before = row.canonical_values()
    derive(row)
    derive(row)
    assert row.canonical_values() == before


def test_derived_value_follows_source_changes():
    row = ImportRow(patient_first_name="Jane", patient_last_name="Doe")
    derive(row)
    row.patient_first_name = "Janet"
    derive(row)
    assert row.patient_full_name == "Janet Doe"


def test_headers_match_ignoring_case_and_spacing():
    row = map_row({"first  name": "Jane", "LAST NAME": "Doe"}, FIRST_LAST, row_number=1)
    assert row.patient_first_name == "Jane"
    assert row.patient_last_name == "Doe"


def test_header_key():
    assert header_key("  Pick Up\tTime ") == "pick up time"


def test_lookup_raw_prefers_exact_header():
    assert lookup_raw({"name": "lower", "Name": "exact"}, "Name") == "exact"
    assert lookup_raw({"NAME": " x "}, "Name") == "x"
    assert lookup_raw({}, "Name") is None


def test_map_rows_uses_parser_row_numbers():
    rows = map_rows(
        [{"First Name": "A"}, {"First Name": "B"}],
        FIRST_LAST,
        row_numbers=[1, 3],
        headers=["First Name"],
    )
    assert [r.row_number for r in rows] == [1, 3]
    assert all(r.template is FIRST_LAST for r in rows)


def test_raw_snapshot_is_read_only():
    row = map_row({"First Name": "Jane"}, FIRST_LAST, row_number=1)
    with pytest.raises(TypeError):
        row.raw["First Name"] = "Mary"


def test_ride_2_md_second_stop_maps_to_dropoff():
    entry = get_template("ride_2_md_template")
    raw = {
        "Rider": "Jane Doe",
        "Address": "1 Main St",
        "City": "Springfield",
        "ZipCode": "62701",
        "Actual Drop Address": "2 Oak Ave",
        "Actual Drop City": "Shelbyville",
        "ZipCode_1": "62565",
    }
    row = map_row(raw, entry, row_number=1)
    assert row.pickup_zip == "62701"
    assert row.dropoff_zip == "62565"
    assert row.patient_full_name == "Jane Doe"


def test_derived_full_name_does_not_satisfy_blank_required_column():
    raw = {"First Name": "Jane", "Last Name": "Doe", "Name": "", "Street": "1 Main St"}
    row = map_row(raw, FIRST_LAST, row_number=1)
    assert row.patient_full_name == "Jane Doe"

    errors = validate(row)

    assert "Missing required field: Name" in errors
    assert "Missing required field: First Name" not in errors


def test_derived_location_does_not_satisfy_blank_required_column():
    entry = template("location_column", [
        ("Pickup Location", "pickup_location"),
        ("Street", "pickup_address"),
        ("City", "pickup_city"),
        ("State", "pickup_state"),
        ("Zip", "pickup_zip"),
    ])
    raw = {"Pickup Location": " ", "Street": "1 Main St", "City": "Springfield", "State": "IL", "Zip": "62701"}
    row = map_row(raw, entry, row_number=1)
    assert row.pickup_location == "1 Main St, Springfield, IL 62701"

    assert "Missing required field: Pickup Location" in validate(row)


def test_editing_derived_full_name_satisfies_required_column():
    raw = {"First Name": "Jane", "Last Name": "Doe", "Name": "", "Street": "1 Main St"}
    review = ReviewStore([map_row(raw, FIRST_LAST, row_number=1)])

    updated = review.update_field(0, "patient_full_name", "Jane Doe")

    assert "Missing required field: Name" not in updated.validation_errors
