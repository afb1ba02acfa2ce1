"""
Persistence contract used by the commit pipeline.

The engine never talks to a database directly.  A TripStore resolves and
creates patients and bulk-inserts trips; implementations raise
PersistenceError for any backend failure and own their own timeout and
retry policy.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class PatientRecord:
    """A persisted patient as seen by the import engine."""

    id: uuid.UUID
    org_id: str
    first_name: str
    last_name: str
    phone: str | None = None
    date_of_birth: date | None = None


@dataclass(frozen=True)
class NewPatient:
    """Fields used to create a patient from an import row."""

    first_name: str
    last_name: str
    phone: str | None = None
    date_of_birth: date | None = None


@dataclass
class TripDraft:
    """A trip ready for insertion."""

    org_id: str
    patient_id: uuid.UUID
    pickup_location: str | None
    dropoff_location: str | None
    scheduled_time: datetime
    pickup_time: datetime | None = None
    trip_type: str = "one_way"
    notes: str | None = None
    distance_miles: float | None = None
    duration_minutes: float | None = None
    status: str = "pending"
    external_trip_id: str | None = None
    source_row_number: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "org_id": self.org_id,
            "patient_id": str(self.patient_id),
            "pickup_location": self.pickup_location,
            "dropoff_location": self.dropoff_location,
            "scheduled_time": self.scheduled_time.isoformat(),
            "pickup_time": self.pickup_time.isoformat() if self.pickup_time else None,
            "trip_type": self.trip_type,
            "notes": self.notes,
            "distance_miles": self.distance_miles,
            "duration_minutes": self.duration_minutes,
            "status": self.status,
            "external_trip_id": self.external_trip_id,
            "source_row_number": self.source_row_number,
        }


@dataclass(frozen=True)
class TripRecord:
    """A persisted trip: the draft plus its assigned id."""

    id: uuid.UUID
    draft: TripDraft
    created_at: datetime | None = None

    @property
    def patient_id(self) -> uuid.UUID:
        return self.draft.patient_id

    def to_dict(self) -> dict[str, Any]:
        data = {"id": str(self.id), **self.draft.to_dict()}
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data


@runtime_checkable
class TripStore(Protocol):
    """Patient lookup/creation and bulk trip insert."""

    async def find_patients(self, org_id: str, first_name: str, last_name: str) -> list[PatientRecord]:
        """Patients in ``org_id`` whose names match case-insensitively."""
        ...

    async def create_patient(self, org_id: str, patient: NewPatient) -> PatientRecord:
        ...

    async def insert_trips(self, drafts: list[TripDraft]) -> list[TripRecord]:
        """All-or-nothing bulk insert."""
        ...


__all__ = [
    "NewPatient",
    "PatientRecord",
    "TripDraft",
    "TripRecord",
    "TripStore",
]
