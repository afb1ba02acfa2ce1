"""
In-memory TripStore for local development, headless dry runs and tests.

Failure injection hooks let callers simulate a backend that rejects a
particular patient or the whole trip batch.
"""

from __future__ import annotations

import asyncio
import uuid
from datetime import datetime, timezone

from tripflow.importer.errors import PersistenceError
from tripflow.persistence.protocols import NewPatient, PatientRecord, TripDraft, TripRecord


def _name_key(first_name: str, last_name: str) -> tuple[str, str]:
    return first_name.strip().lower(), last_name.strip().lower()


class MemoryTripStore:
    """Dict-backed patients and trips, scoped by org id."""

    def __init__(self) -> None:
        self.patients: list[PatientRecord] = []
        self.trips: list[TripRecord] = []
        self.fail_lookup_for: set[tuple[str, str]] = set()
        self.fail_create_for: set[tuple[str, str]] = set()
        self.fail_insert: bool = False
        self.insert_delay: float = 0.0
        self.lookup_calls: int = 0
        self.create_calls: int = 0
        self._lock = asyncio.Lock()

    # ─── Failure injection ───────────────────

    def fail_lookup(self, first_name: str, last_name: str) -> None:
        self.fail_lookup_for.add(_name_key(first_name, last_name))

    def fail_create(self, first_name: str, last_name: str) -> None:
        self.fail_create_for.add(_name_key(first_name, last_name))

    # ─── Seeding ─────────────────────────────

    def add_patient(self, org_id: str, first_name: str, last_name: str, **extra) -> PatientRecord:
        record = PatientRecord(
            id=uuid.uuid4(),
            org_id=org_id,
            first_name=first_name,
            last_name=last_name,
            phone=extra.get("phone"),
            date_of_birth=extra.get("date_of_birth"),
        )
        self.patients.append(record)
        return record

    # ─── TripStore ───────────────────────────

    async def find_patients(self, org_id: str, first_name: str, last_name: str) -> list[PatientRecord]:
        self.lookup_calls += 1
        key = _name_key(first_name, last_name)
        if key in self.fail_lookup_for:
            raise PersistenceError(f"Patient lookup failed for {first_name} {last_name}")
        return [
            p for p in self.patients
            if p.org_id == org_id and _name_key(p.first_name, p.last_name) == key
        ]

    async def create_patient(self, org_id: str, patient: NewPatient) -> PatientRecord:
        self.create_calls += 1
        if _name_key(patient.first_name, patient.last_name) in self.fail_create_for:
            raise PersistenceError(f"Patient insert failed for {patient.first_name} {patient.last_name}")
        return self.add_patient(
            org_id,
            patient.first_name,
            patient.last_name,
            phone=patient.phone,
            date_of_birth=patient.date_of_birth,
        )

    async def insert_trips(self, drafts: list[TripDraft]) -> list[TripRecord]:
        async with self._lock:
            if self.insert_delay:
                await asyncio.sleep(self.insert_delay)
            if self.fail_insert:
                raise PersistenceError("Trip batch insert failed")
            now = datetime.now(timezone.utc)
            records = [TripRecord(id=uuid.uuid4(), draft=d, created_at=now) for d in drafts]
            self.trips.extend(records)
            return records
