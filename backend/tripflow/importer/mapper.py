"""
Mapper / Normalizer — raw manifest rows → canonical ImportRows.

Mapping is driven entirely by the BrokerTemplate: each field with a
canonical target copies its (stripped, non-empty) raw value onto the row.
Source columns are matched to file headers exactly first, then ignoring
case and repeated whitespace, since brokers re-export files with small
header drift.

Derivation rules run after mapping and are pure, row-local and
idempotent.  Derived attributes are tracked on ``row.derived`` and
recomputed from scratch on every pass.
"""

from __future__ import annotations

import re
from typing import Mapping, Sequence

from tripflow.core.logging import get_logger
from tripflow.importer.rows import ImportRow, normalize_value
from tripflow.importer.templates.base import BrokerTemplate

logger = get_logger(__name__)

_WS_RE = re.compile(r"\s+")

ADDRESS_PREFIXES: tuple[str, ...] = ("pickup", "dropoff")


def header_key(name: str) -> str:
    """Case- and whitespace-insensitive comparison key for column names."""
    return _WS_RE.sub(" ", name).strip().lower()


def lookup_raw(raw: Mapping[str, str], column: str) -> str | None:
    """Normalised raw value for ``column``; exact header match wins."""
    if column in raw:
        return normalize_value(raw[column])
    wanted = header_key(column)
    for header, value in raw.items():
        if header_key(header) == wanted:
            return normalize_value(value)
    return None


def resolve_columns(template: BrokerTemplate, headers: Sequence[str]) -> dict[str, str]:
    """Map each template source column to the file header it reads from."""
    exact = set(headers)
    by_key: dict[str, str] = {}
    for header in headers:
        by_key.setdefault(header_key(header), header)

    resolved: dict[str, str] = {}
    for f in template.fields:
        if f.source_column in exact:
            resolved[f.source_column] = f.source_column
        else:
            match = by_key.get(header_key(f.source_column))
            if match is not None:
                resolved[f.source_column] = match
    return resolved


def map_rows(
    raw_rows: Sequence[Mapping[str, str]],
    template: BrokerTemplate,
    *,
    row_numbers: Sequence[int] | None = None,
    headers: Sequence[str] | None = None,
) -> list[ImportRow]:
    """Map every raw row onto a canonical ImportRow and apply derivations."""
    if headers is None:
        headers = list(raw_rows[0].keys()) if raw_rows else []
    columns = resolve_columns(template, headers)

    missing = [f.source_column for f in template.fields if f.source_column not in columns]
    if missing:
        logger.warning(
            "Template columns not found in file",
            template_id=template.id,
            missing=missing,
            headers=list(headers),
        )

    rows: list[ImportRow] = []
    for idx, raw in enumerate(raw_rows):
        row_number = row_numbers[idx] if row_numbers is not None else idx + 1
        rows.append(map_row(raw, template, row_number=row_number, columns=columns))
    return rows


def map_row(
    raw: Mapping[str, str],
    template: BrokerTemplate,
    *,
    row_number: int,
    columns: Mapping[str, str] | None = None,
) -> ImportRow:
    """Map a single raw row."""
    row = ImportRow(row_number=row_number, raw=raw, template=template)
    for f in template.mapped_fields:
        header = columns.get(f.source_column) if columns is not None else None
        value = normalize_value(raw.get(header)) if header is not None else lookup_raw(raw, f.source_column)
        if value is not None:
            setattr(row, f.canonical_target, value)
    derive(row)
    return row


# ═══════════════════════════════════════════════════════════
#  Derivation rules
# ═══════════════════════════════════════════════════════════

def compose_address(
    line: str | None,
    line_2: str | None,
    city: str | None,
    state: str | None,
    postal: str | None,
) -> str | None:
    """``"<line>[, <line 2>], <city>, <state> <postal>"`` or None if incomplete."""
    if not (line and city and state and postal):
        return None
    parts = [line]
    if line_2:
        parts.append(line_2)
    parts.append(city)
    parts.append(f"{state} {postal}")
    return ", ".join(parts)


def derive(row: ImportRow) -> ImportRow:
    """
    Recompute derived attributes in place.

    - first + last, no full name → full name ``"<first> <last>"``
    - address line, city, state and postal code → composite location
    """
    for attribute in row.derived:
        setattr(row, attribute, None)
    row.derived.clear()

    if row.patient_first_name and row.patient_last_name and not row.patient_full_name:
        row.patient_full_name = f"{row.patient_first_name} {row.patient_last_name}"
        row.derived.add("patient_full_name")

    for prefix in ADDRESS_PREFIXES:
        target = f"{prefix}_location"
        if getattr(row, target) is not None:
            continue
        composite = compose_address(
            getattr(row, f"{prefix}_address"),
            getattr(row, f"{prefix}_address_2"),
            getattr(row, f"{prefix}_city"),
            getattr(row, f"{prefix}_state"),
            getattr(row, f"{prefix}_zip"),
        )
        if composite is not None:
            setattr(row, target, composite)
            row.derived.add(target)

    return row
