"""TripStore contract and its implementations."""

from __future__ import annotations

from tripflow.persistence.memory_store import MemoryTripStore
from tripflow.persistence.protocols import NewPatient, PatientRecord, TripDraft, TripRecord, TripStore

__all__ = ["MemoryTripStore", "NewPatient", "PatientRecord", "TripDraft", "TripRecord", "TripStore"]
