"""Tests for row validation."""

from __future__ import annotations

from tripflow.importer.mapper import map_row
from tripflow.importer.rows import ImportRow
from tripflow.importer.templates.base import BrokerTemplate, TemplateField, template
from tripflow.importer.validator import (
    DROPOFF_ADDRESS_REQUIRED,
    PATIENT_NAME_REQUIRED,
    PICKUP_ADDRESS_REQUIRED,
    PICKUP_TIME_UNRECOGNIZED,
    TRIP_DATE_REQUIRED,
    TRIP_DATE_UNRECOGNIZED,
    validate,
    validate_rows,
)

ALL_REQUIRED = BrokerTemplate(
    id="all_required",
    display_name="all_required",
    fields=(
        TemplateField("First Name", True, "patient_first_name"),
        TemplateField("Last Name", True, "patient_last_name"),
        TemplateField("Pickup Address", True, "pickup_address"),
        TemplateField("Trip Date", True, "trip_date"),
    ),
)


def test_blank_required_pickup_reported_once():
    raw = {"First Name": "Jane", "Last Name": "Doe", "Pickup Address": "", "Trip Date": "2024-01-05"}
    row = map_row(raw, ALL_REQUIRED, row_number=1)
    errors = validate(row)

    pickup_errors = [e for e in errors if "pickup address" in e.lower()]
    assert pickup_errors == ["Missing required field: Pickup Address"]
    assert PICKUP_ADDRESS_REQUIRED not in errors
    assert TRIP_DATE_REQUIRED not in errors
    assert PATIENT_NAME_REQUIRED not in errors


def test_validate_is_idempotent():
    raw = {"First Name": "", "Last Name": "", "Pickup Address": "", "Trip Date": "soon"}
    row = map_row(raw, ALL_REQUIRED, row_number=1)
    first = validate(row)
    second = validate(row)
    assert first == second
    assert row.validation_errors == first


def test_canonical_checks_apply_without_template_flags():
    entry = template("loose", [("Rider", "patient_full_name"), ("Comments", "notes")])
    row = map_row({"Rider": "Jane Doe"}, entry, row_number=1)
    assert validate(row) == [PICKUP_ADDRESS_REQUIRED, DROPOFF_ADDRESS_REQUIRED, TRIP_DATE_REQUIRED]


def test_composite_location_satisfies_pickup_check():
    row = ImportRow(
        patient_full_name="Jane Doe",
        pickup_location="1 Main St, Springfield, IL 62701",
        dropoff_address="2 Oak Ave",
        trip_date="2024-01-05",
    )
    assert validate(row) == []


def test_any_name_part_satisfies_name_check():
    row = ImportRow(
        patient_last_name="Doe",
        pickup_address="1 Main St",
        dropoff_address="2 Oak Ave",
        trip_date="2024-01-05",
    )
    assert validate(row) == []


def test_unmapped_required_column_checks_raw_value():
    entry = template("raw_only", [("Rider", "patient_full_name"), "Pickup Instructions"])
    raw = {"Rider": "Jane Doe", "Pickup Instructions": " "}
    row = map_row(raw, entry, row_number=1)
    assert "Missing required field: Pickup Instructions" in validate(row)


def test_unrecognized_date_and_time():
    row = ImportRow(
        patient_full_name="Jane Doe",
        pickup_address="1 Main St",
        dropoff_address="2 Oak Ave",
        trip_date="sometime next week",
        pickup_time="after lunch",
    )
    assert validate(row) == [TRIP_DATE_UNRECOGNIZED, PICKUP_TIME_UNRECOGNIZED]


def test_messages_do_not_embed_values():
    rows = [
        ImportRow(patient_full_name="A", pickup_address="x", dropoff_address="y", trip_date="bad-1"),
        ImportRow(patient_full_name="B", pickup_address="x", dropoff_address="y", trip_date="bad-2"),
    ]
    validate_rows(rows)
    assert rows[0].validation_errors == rows[1].validation_errors
