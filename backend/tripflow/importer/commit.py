"""
Commit Pipeline — validated rows → patients + trips.

Flow for one commit call:
    1. Keep the error-free rows; none left → NoValidRowsError
    2. Resolve each row's patient, sequentially (match by name, else create).
       A backend failure skips that row only and is reported back.
    3. Build one TripDraft per resolved row
    4. Insert all drafts in one batch; a failure fails the whole commit
       (patients created in step 2 are kept)
    5. Return inserted trips plus the skipped rows

Patients are matched on case-insensitive first + last name within the
organisation.  Identities resolved earlier in the same commit are reused
from a per-call cache, so ``john smith`` and ``JOHN SMITH`` share one id.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, time, timezone
from typing import Any, Sequence
from zoneinfo import ZoneInfo

from tripflow.core.config import settings
from tripflow.core.constants import SkipReason
from tripflow.core.logging import get_logger
from tripflow.importer.errors import CommitError, NoValidRowsError, PatientResolutionError, PersistenceError
from tripflow.importer.normalize import parse_date, parse_number, parse_time
from tripflow.importer.rows import ImportRow
from tripflow.persistence.protocols import NewPatient, TripDraft, TripRecord, TripStore

logger = get_logger(__name__)


# ═══════════════════════════════════════════════════════════
#  Results
# ═══════════════════════════════════════════════════════════

@dataclass
class PatientResolution:
    """Outcome of match-or-create for one row."""

    row: ImportRow
    patient_id: uuid.UUID | None = None
    created: bool = False
    reason: SkipReason | None = None
    message: str | None = None

    @property
    def resolved(self) -> bool:
        return self.patient_id is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "row_number": self.row.row_number,
            "patient_id": str(self.patient_id) if self.patient_id else None,
            "created": self.created,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
        }


@dataclass
class CommitResult:
    """What a successful commit produced."""

    inserted_count: int = 0
    trips: list[TripRecord] = field(default_factory=list)
    skipped: list[PatientResolution] = field(default_factory=list)
    patients_created: int = 0
    patients_matched: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "inserted_count": self.inserted_count,
            "trips": [t.to_dict() for t in self.trips],
            "skipped": [s.to_dict() for s in self.skipped],
            "patients_created": self.patients_created,
            "patients_matched": self.patients_matched,
        }


# ─── Name handling ────────────────────────────────────────

def split_patient_name(row: ImportRow) -> tuple[str, str]:
    """
    First/last name for patient matching.

    Explicit first/last win; otherwise the full name's first token is the
    first name and the remaining tokens the last name.
    """
    tokens = (row.patient_full_name or "").split()
    first = row.patient_first_name or (tokens[0] if tokens else "")
    last = row.patient_last_name or " ".join(tokens[1:])
    return first.strip(), last.strip()


# ═══════════════════════════════════════════════════════════
#  Pipeline
# ═══════════════════════════════════════════════════════════

class CommitPipeline:
    """Runs commits against one TripStore."""

    def __init__(
        self,
        store: TripStore,
        *,
        tz_name: str | None = None,
        default_trip_type: str | None = None,
        default_status: str | None = None,
    ) -> None:
        self._store = store
        self._tz = ZoneInfo(tz_name or settings.IMPORT_TIMEZONE)
        self._default_trip_type = default_trip_type or settings.IMPORT_DEFAULT_TRIP_TYPE
        self._default_status = default_status or settings.IMPORT_DEFAULT_TRIP_STATUS

    @staticmethod
    def eligible_rows(rows: Sequence[ImportRow]) -> list[ImportRow]:
        """Error-free rows; raises NoValidRowsError when there are none."""
        eligible = [row for row in rows if row.is_valid]
        if not eligible:
            raise NoValidRowsError()
        return eligible

    async def commit(
        self,
        rows: Sequence[ImportRow],
        org_id: str,
        *,
        session_id: str | None = None,
    ) -> CommitResult:
        log = logger.bind(session_id=session_id, org_id=org_id)
        eligible = self.eligible_rows(rows)
        log.info("Commit started", total_rows=len(rows), eligible_rows=len(eligible))

        # ── Step 1: resolve patients ─────────────
        cache: dict[tuple[str, str], uuid.UUID] = {}
        resolutions = []
        for row in eligible:
            resolutions.append(await self.resolve_patient(row, org_id, cache, session_id=session_id))

        resolved = [r for r in resolutions if r.resolved]
        skipped = [r for r in resolutions if not r.resolved]
        for skip in skipped:
            log.warning(
                "Row skipped during patient resolution",
                row_number=skip.row.row_number,
                reason=skip.reason.value if skip.reason else None,
                error=skip.message,
            )

        if not resolved:
            raise CommitError(
                "No rows could be committed: every patient resolution failed",
                session_id=session_id,
                details={"skipped": [s.to_dict() for s in skipped]},
            )

        # ── Step 2: build drafts ─────────────────
        drafts = [self.build_trip(r.row, org_id, r.patient_id) for r in resolved]

        # ── Step 3: batch insert ─────────────────
        try:
            trips = await self._store.insert_trips(drafts)
        except PersistenceError as exc:
            log.error("Trip batch insert failed", error=str(exc), drafts=len(drafts))
            raise CommitError(
                f"Trip insert failed: {exc}",
                session_id=session_id,
                details={"drafts": len(drafts), "skipped": [s.to_dict() for s in skipped]},
            ) from exc

        result = CommitResult(
            inserted_count=len(trips),
            trips=list(trips),
            skipped=skipped,
            patients_created=sum(1 for r in resolved if r.created),
            patients_matched=sum(1 for r in resolved if not r.created),
        )
        log.info(
            "Commit finished",
            inserted=result.inserted_count,
            skipped=len(skipped),
            patients_created=result.patients_created,
        )
        return result

    # ─── Patient resolution ──────────────────

    async def resolve_patient(
        self,
        row: ImportRow,
        org_id: str,
        cache: dict[tuple[str, str], uuid.UUID],
        *,
        session_id: str | None = None,
    ) -> PatientResolution:
        """Match-or-create one row's patient; failures become a skip result."""
        first, last = split_patient_name(row)
        if not first and not last:
            return PatientResolution(row=row, reason=SkipReason.NO_PATIENT_NAME, message="Row has no patient name")

        key = (first.lower(), last.lower())
        if key in cache:
            return PatientResolution(row=row, patient_id=cache[key])

        try:
            patient_id, created = await self._match_or_create(row, org_id, first, last, session_id=session_id)
        except PatientResolutionError as exc:
            reason = exc.details.get("reason", SkipReason.PATIENT_CREATE_FAILED)
            return PatientResolution(row=row, reason=reason, message=str(exc))

        cache[key] = patient_id
        return PatientResolution(row=row, patient_id=patient_id, created=created)

    async def _match_or_create(
        self,
        row: ImportRow,
        org_id: str,
        first: str,
        last: str,
        *,
        session_id: str | None = None,
    ) -> tuple[uuid.UUID, bool]:
        try:
            matches = await self._store.find_patients(org_id, first, last)
        except PersistenceError as exc:
            raise PatientResolutionError(
                f"Patient lookup failed: {exc}",
                row_number=row.row_number,
                session_id=session_id,
                details={"reason": SkipReason.PATIENT_LOOKUP_FAILED},
            ) from exc

        if matches:
            if len(matches) > 1:
                logger.warning(
                    "Several patients share this name; using the first match",
                    org_id=org_id,
                    row_number=row.row_number,
                    matches=len(matches),
                )
            return matches[0].id, False

        new_patient = NewPatient(
            first_name=first,
            last_name=last,
            phone=row.patient_phone,
            date_of_birth=parse_date(row.patient_dob),
        )
        try:
            record = await self._store.create_patient(org_id, new_patient)
        except PersistenceError as exc:
            raise PatientResolutionError(
                f"Patient creation failed: {exc}",
                row_number=row.row_number,
                session_id=session_id,
                details={"reason": SkipReason.PATIENT_CREATE_FAILED},
            ) from exc
        return record.id, True

    # ─── Trip drafts ─────────────────────────

    def build_trip(self, row: ImportRow, org_id: str, patient_id: uuid.UUID) -> TripDraft:
        """Trip draft for a resolved row."""
        trip_day = parse_date(row.trip_date)
        pickup_clock = parse_time(row.pickup_time)

        pickup_at = None
        if trip_day is not None and pickup_clock is not None:
            pickup_at = datetime.combine(trip_day, pickup_clock, tzinfo=self._tz)
            scheduled = pickup_at
        elif trip_day is not None:
            scheduled = datetime.combine(trip_day, time(0, 0), tzinfo=self._tz)
        else:
            scheduled = datetime.now(timezone.utc)

        return TripDraft(
            org_id=org_id,
            patient_id=patient_id,
            pickup_location=row.pickup_location or row.pickup_address,
            dropoff_location=row.dropoff_location or row.dropoff_address,
            scheduled_time=scheduled,
            pickup_time=pickup_at,
            trip_type=row.trip_type or self._default_trip_type,
            notes=row.notes,
            distance_miles=parse_number(row.distance_miles),
            duration_minutes=parse_number(row.duration_minutes),
            status=self._default_status,
            external_trip_id=row.trip_id or row.trip_number,
            source_row_number=row.row_number,
        )
