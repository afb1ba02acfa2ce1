"""Tests for the SQLAlchemy TripStore against in-memory SQLite."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tripflow.db.models import Base
from tripflow.db.models.patient import Patient
from tripflow.db.models.trip import Trip
from tripflow.importer.commit import CommitPipeline
from tripflow.importer.errors import PersistenceError
from tripflow.persistence.protocols import NewPatient, TripDraft, TripStore
from tripflow.persistence.sqlalchemy_store import SqlAlchemyTripStore, make_session_factory

ORG = "org-1"


async def _stored_trips(session_factory) -> list[Trip]:
    async with session_factory() as session:
        result = await session.execute(select(Trip).where(Trip.org_id == ORG))
        return list(result.scalars().all())


@pytest.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def sql_store(session_factory) -> SqlAlchemyTripStore:
    return SqlAlchemyTripStore(session_factory)


def _draft(patient_id, **overrides) -> TripDraft:
    values = {
        "org_id": ORG,
        "patient_id": patient_id,
        "pickup_location": "1 Main St, Springfield, IL 62701",
        "dropoff_location": "2 Oak Ave",
        "scheduled_time": datetime(2024, 1, 5, 9, 30, tzinfo=timezone.utc),
    }
    values.update(overrides)
    return TripDraft(**values)


def test_store_satisfies_protocol(sql_store):
    assert isinstance(sql_store, TripStore)


async def test_create_and_find_patient_case_insensitively(sql_store, session_factory):
    created = await sql_store.create_patient(
        ORG,
        NewPatient(first_name="Jane", last_name="Doe", phone="555-0100", date_of_birth=date(1950, 2, 3)),
    )

    found = await sql_store.find_patients(ORG, "JANE", "doe")
    assert [p.id for p in found] == [created.id]
    assert found[0].date_of_birth == date(1950, 2, 3)

    assert await sql_store.find_patients("other-org", "Jane", "Doe") == []

    async with session_factory() as session:
        stored = await session.get(Patient, created.id)
    assert stored.phone == "555-0100"


async def test_insert_trips_persists_batch(sql_store, session_factory):
    patient = await sql_store.create_patient(ORG, NewPatient(first_name="Jane", last_name="Doe"))
    drafts = [_draft(patient.id, source_row_number=1), _draft(patient.id, source_row_number=2, notes="wheelchair")]

    records = await sql_store.insert_trips(drafts)

    assert len(records) == 2
    assert records[0].id != records[1].id
    assert records[1].draft.notes == "wheelchair"

    trips = await _stored_trips(session_factory)
    assert sorted(t.source_row_number for t in trips) == [1, 2]
    assert all(t.status == "pending" for t in trips)


async def test_failed_batch_inserts_nothing(sql_store, session_factory):
    patient = await sql_store.create_patient(ORG, NewPatient(first_name="Jane", last_name="Doe"))
    drafts = [_draft(patient.id), _draft(patient.id, scheduled_time=None)]

    with pytest.raises(PersistenceError):
        await sql_store.insert_trips(drafts)

    assert await _stored_trips(session_factory) == []


async def test_draft_status_is_persisted(sql_store, session_factory):
    patient = await sql_store.create_patient(ORG, NewPatient(first_name="Jane", last_name="Doe"))
    await sql_store.insert_trips([_draft(patient.id), _draft(patient.id, status="scheduled")])

    trips = await _stored_trips(session_factory)
    assert sorted(t.status for t in trips) == ["pending", "scheduled"]


async def test_commit_pipeline_end_to_end(sql_store, make_row):
    rows = [
        make_row(1, patient_full_name="john smith", patient_first_name=None, patient_last_name=None),
        make_row(2, patient_full_name="JOHN SMITH", patient_first_name=None, patient_last_name=None),
        make_row(3),
    ]
    result = await CommitPipeline(sql_store, tz_name="UTC").commit(rows, ORG)

    assert result.inserted_count == 3
    assert result.patients_created == 2
    assert result.trips[0].patient_id == result.trips[1].patient_id


async def test_make_session_factory_builds_working_engine():
    factory, engine = make_session_factory("sqlite+aiosqlite://")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        store = SqlAlchemyTripStore(factory)
        assert await store.find_patients(ORG, "Jane", "Doe") == []
    finally:
        await engine.dispose()
