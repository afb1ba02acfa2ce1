"""
Row Validator — recomputes a row's validation errors from scratch.

Two independent passes:
    1. Template-required: every required TemplateField must have a value.
       Mapped fields are checked against the row's current canonical
       attribute (so a correction satisfies them), but a derived value
       does not stand in for a blank source column; unmapped fields are
       checked against the raw snapshot.
    2. Canonical-required: pickup, dropoff, trip date and some patient
       name, whatever the template says.  A gap already reported by pass 1
       for the same attribute is not reported twice.

Format checks follow, so that an error-free row always produces a
schedulable trip.  Messages never embed row values, which keeps them
usable as histogram keys.
"""

from __future__ import annotations

from typing import Iterable

from tripflow.importer.mapper import lookup_raw
from tripflow.importer.normalize import parse_date, parse_time
from tripflow.importer.rows import ImportRow

MISSING_REQUIRED_FIELD = "Missing required field: {column}"
PICKUP_ADDRESS_REQUIRED = "Pickup address is required"
DROPOFF_ADDRESS_REQUIRED = "Dropoff address is required"
TRIP_DATE_REQUIRED = "Trip date is required"
PATIENT_NAME_REQUIRED = "Patient name is required"
TRIP_DATE_UNRECOGNIZED = "Trip date is not a recognizable date"
PICKUP_TIME_UNRECOGNIZED = "Pickup time is not a recognizable time"

# (any-of attributes, message)
CANONICAL_CHECKS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("pickup_address", "pickup_location"), PICKUP_ADDRESS_REQUIRED),
    (("dropoff_address", "dropoff_location"), DROPOFF_ADDRESS_REQUIRED),
    (("trip_date",), TRIP_DATE_REQUIRED),
    (("patient_full_name", "patient_first_name", "patient_last_name"), PATIENT_NAME_REQUIRED),
)


def validate(row: ImportRow) -> list[str]:
    """Replace ``row.validation_errors`` with a freshly computed list."""
    errors: list[str] = []
    reported: set[str] = set()

    # ── Pass 1: template-required ────────────
    if row.template is not None:
        for f in row.template.required_fields:
            if f.canonical_target in row.derived:
                value = None
            elif f.canonical_target is not None:
                value = row.get(f.canonical_target)
            else:
                value = lookup_raw(row.raw, f.source_column)
            if value is None:
                errors.append(MISSING_REQUIRED_FIELD.format(column=f.source_column))
                if f.canonical_target is not None:
                    reported.add(f.canonical_target)

    # ── Pass 2: canonical-required ───────────
    for attributes, message in CANONICAL_CHECKS:
        if any(row.get(a) is not None for a in attributes):
            continue
        if reported.intersection(attributes):
            continue
        errors.append(message)

    # ── Formats ──────────────────────────────
    if row.trip_date is not None and parse_date(row.trip_date) is None:
        errors.append(TRIP_DATE_UNRECOGNIZED)
    if row.pickup_time is not None and parse_time(row.pickup_time) is None:
        errors.append(PICKUP_TIME_UNRECOGNIZED)

    row.validation_errors = errors
    return list(errors)


def validate_rows(rows: Iterable[ImportRow]) -> None:
    """Validate every row in place."""
    for row in rows:
        validate(row)
