"""
SQLAlchemy-backed TripStore.

Each contract call runs in its own transaction so a failed patient insert
never poisons the rest of the commit.  Driver errors are wrapped into
PersistenceError; callers never see SQLAlchemy exceptions.

Celery workers call ``asyncio.run()`` per task, so they build a fresh
engine with ``make_session_factory()`` and dispose it afterwards instead of
sharing the application's pooled engine across event loops.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from tripflow.core.config import settings
from tripflow.core.logging import get_logger
from tripflow.db.models.patient import Patient
from tripflow.importer.errors import PersistenceError
from tripflow.persistence.protocols import NewPatient, PatientRecord, TripDraft, TripRecord
from tripflow.repositories import patients as patient_repository
from tripflow.repositories import trips as trip_repository

logger = get_logger(__name__)


def make_session_factory(database_url: str | None = None) -> tuple[async_sessionmaker[AsyncSession], AsyncEngine]:
    """Create a fresh async engine + session factory."""
    engine = create_async_engine(database_url or settings.DATABASE_URL, echo=False)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    return factory, engine


def _to_patient_record(patient: Patient) -> PatientRecord:
    return PatientRecord(
        id=patient.id,
        org_id=patient.org_id,
        first_name=patient.first_name,
        last_name=patient.last_name,
        phone=patient.phone,
        date_of_birth=patient.date_of_birth,
    )


class SqlAlchemyTripStore:
    """TripStore over the patients/trips tables."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def find_patients(self, org_id: str, first_name: str, last_name: str) -> list[PatientRecord]:
        try:
            async with self._session_factory() as session:
                found = await patient_repository.find_patients_by_name(
                    session,
                    org_id=org_id,
                    first_name=first_name,
                    last_name=last_name,
                )
                return [_to_patient_record(p) for p in found]
        except SQLAlchemyError as exc:
            logger.error("Patient lookup failed", org_id=org_id, error=str(exc))
            raise PersistenceError(f"Patient lookup failed: {exc}") from exc

    async def create_patient(self, org_id: str, patient: NewPatient) -> PatientRecord:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    created = await patient_repository.create_patient(
                        session,
                        org_id=org_id,
                        first_name=patient.first_name,
                        last_name=patient.last_name,
                        phone=patient.phone,
                        date_of_birth=patient.date_of_birth,
                    )
                    record = _to_patient_record(created)
                return record
        except SQLAlchemyError as exc:
            logger.error("Patient insert failed", org_id=org_id, error=str(exc))
            raise PersistenceError(f"Patient insert failed: {exc}") from exc

    async def insert_trips(self, drafts: list[TripDraft]) -> list[TripRecord]:
        rows = [
            {
                "org_id": d.org_id,
                "patient_id": d.patient_id,
                "pickup_location": d.pickup_location,
                "dropoff_location": d.dropoff_location,
                "scheduled_time": d.scheduled_time,
                "pickup_time": d.pickup_time,
                "trip_type": d.trip_type,
                "status": d.status,
                "notes": d.notes,
                "distance_miles": d.distance_miles,
                "duration_minutes": d.duration_minutes,
                "external_trip_id": d.external_trip_id,
                "source_row_number": d.source_row_number,
            }
            for d in drafts
        ]
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    trips = await trip_repository.bulk_create_trips(session, rows)
                    records = [
                        TripRecord(id=trip.id, draft=draft, created_at=trip.created_at)
                        for trip, draft in zip(trips, drafts)
                    ]
                return records
        except SQLAlchemyError as exc:
            logger.error("Trip batch insert failed", drafts=len(drafts), error=str(exc))
            raise PersistenceError(f"Trip batch insert failed: {exc}") from exc
