"""
Canonical import rows and the result containers produced around them.

An ImportRow is the broker-independent shape of one manifest line.  Every
canonical attribute is optional: ``None`` means "absent", and a blank or
whitespace-only string is normalised to ``None`` at every write boundary
(mapping and review edits), so the two cannot be told apart downstream.

Rows are never persisted.  The commit pipeline reads them to produce
patients and trips.
"""

from __future__ import annotations

import dataclasses
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Mapping

if TYPE_CHECKING:
    from tripflow.importer.templates.base import BrokerTemplate


# ═══════════════════════════════════════════════════════════
#  ImportRow
# ═══════════════════════════════════════════════════════════

@dataclass
class ImportRow:
    """
    One canonical trip row.

    Args:
        row_number: 1-based position of the row in the manifest body.
        raw: Read-only snapshot of the original header → value row.
        template: Broker template the row was mapped with.
        derived: Attributes produced by derivation rules (recomputed on
                 every derive pass; user edits remove the attribute).
        validation_errors: Current error messages.  Empty means eligible
                           for commit.
    """

    # ── Patient ──────────────────────────────
    patient_first_name: str | None = None
    patient_last_name: str | None = None
    patient_full_name: str | None = None
    patient_dob: str | None = None
    patient_phone: str | None = None
    patient_member_id: str | None = None
    patient_gender: str | None = None
    patient_weight: str | None = None

    # ── Pickup ───────────────────────────────
    pickup_address: str | None = None
    pickup_address_2: str | None = None
    pickup_city: str | None = None
    pickup_state: str | None = None
    pickup_zip: str | None = None
    pickup_county: str | None = None
    pickup_latitude: str | None = None
    pickup_longitude: str | None = None
    pickup_phone: str | None = None
    pickup_location_name: str | None = None
    pickup_notes: str | None = None
    pickup_location: str | None = None

    # ── Dropoff ──────────────────────────────
    dropoff_address: str | None = None
    dropoff_address_2: str | None = None
    dropoff_city: str | None = None
    dropoff_state: str | None = None
    dropoff_zip: str | None = None
    dropoff_county: str | None = None
    dropoff_latitude: str | None = None
    dropoff_longitude: str | None = None
    dropoff_phone: str | None = None
    dropoff_location_name: str | None = None
    dropoff_notes: str | None = None
    dropoff_location: str | None = None

    # ── Trip ─────────────────────────────────
    trip_date: str | None = None
    pickup_time: str | None = None
    appointment_time: str | None = None
    trip_type: str | None = None
    trip_number: str | None = None
    trip_id: str | None = None
    status: str | None = None
    distance_miles: str | None = None
    duration_minutes: str | None = None
    vehicle_type: str | None = None
    mobility_needs: str | None = None
    special_needs: str | None = None
    wheelchair: str | None = None
    stretcher: str | None = None

    # ── Passengers ───────────────────────────
    additional_passengers: str | None = None
    passenger_count: str | None = None
    escorts: str | None = None
    attendants: str | None = None

    # ── Other ────────────────────────────────
    notes: str | None = None
    authorization_number: str | None = None
    case_number: str | None = None
    confirmation_number: str | None = None

    # ── Bookkeeping (not canonical) ──────────
    row_number: int = 0
    raw: Mapping[str, str] = field(default_factory=dict)
    template: BrokerTemplate | None = field(default=None, repr=False, compare=False)
    derived: set[str] = field(default_factory=set)
    validation_errors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.raw, MappingProxyType):
            self.raw = MappingProxyType(dict(self.raw))

    @property
    def is_valid(self) -> bool:
        return not self.validation_errors

    def get(self, attribute: str) -> str | None:
        """Read a canonical attribute by name."""
        if attribute not in CANONICAL_ATTRIBUTES:
            raise KeyError(attribute)
        return getattr(self, attribute)

    def copy(self) -> ImportRow:
        """Independent copy; the raw snapshot is shared (it is read-only)."""
        return dataclasses.replace(
            self,
            derived=set(self.derived),
            validation_errors=list(self.validation_errors),
        )

    def canonical_values(self) -> dict[str, str]:
        """Present canonical attributes only."""
        values = {}
        for name in CANONICAL_ATTRIBUTES:
            value = getattr(self, name)
            if value is not None:
                values[name] = value
        return values

    def to_dict(self) -> dict[str, Any]:
        """Serialise for API responses."""
        return {
            "row_number": self.row_number,
            "values": self.canonical_values(),
            "derived": sorted(self.derived),
            "raw": dict(self.raw),
            "validation_errors": list(self.validation_errors),
            "is_valid": self.is_valid,
        }


_BOOKKEEPING = {"row_number", "raw", "template", "derived", "validation_errors"}

CANONICAL_ATTRIBUTES: tuple[str, ...] = tuple(
    f.name for f in dataclasses.fields(ImportRow) if f.name not in _BOOKKEEPING
)


def normalize_value(value: Any) -> str | None:
    """Strip a raw value; blank, whitespace-only and missing all become None."""
    if value is None:
        return None
    text = value.strip() if isinstance(value, str) else str(value).strip()
    return text or None


# ═══════════════════════════════════════════════════════════
#  ParseResult
# ═══════════════════════════════════════════════════════════

@dataclass
class ParseResult:
    """Raw rows read from one manifest plus per-row parse problems."""

    file_name: str
    headers: list[str] = field(default_factory=list)
    rows: list[dict[str, str]] = field(default_factory=list)
    row_numbers: list[int] = field(default_factory=list)
    parse_errors: list[str] = field(default_factory=list)


# ═══════════════════════════════════════════════════════════
#  ImportSummary
# ═══════════════════════════════════════════════════════════

@dataclass
class ImportSummary:
    """Counts shown to the user after mapping/validation."""

    total: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    error_type_histogram: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_rows(cls, rows: Iterable[ImportRow]) -> ImportSummary:
        histogram: Counter[str] = Counter()
        total = valid = 0
        for row in rows:
            total += 1
            if row.is_valid:
                valid += 1
            histogram.update(row.validation_errors)
        return cls(
            total=total,
            valid_count=valid,
            invalid_count=total - valid,
            error_type_histogram=dict(histogram),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "valid_count": self.valid_count,
            "invalid_count": self.invalid_count,
            "error_type_histogram": dict(self.error_type_histogram),
        }
