"""
Patient repository containing all data-access operations for the patients table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tripflow.db.models.patient import Patient


async def create_patient(
    db: AsyncSession,
    *,
    org_id: str,
    first_name: str,
    last_name: str,
    phone: str | None = None,
    date_of_birth: date | None = None,
) -> Patient:
    """Insert a patient and return it with its id assigned."""
    patient = Patient(
        org_id=org_id,
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        phone=phone,
        date_of_birth=date_of_birth,
    )
    db.add(patient)
    await db.flush()
    return patient


async def find_patients_by_name(
    db: AsyncSession,
    *,
    org_id: str,
    first_name: str,
    last_name: str,
    limit: int = 10,
) -> list[Patient]:
    """Case-insensitive exact match on first and last name within an org, oldest first."""
    stmt = (
        select(Patient)
        .where(
            Patient.org_id == org_id,
            func.lower(Patient.first_name) == first_name.strip().lower(),
            func.lower(Patient.last_name) == last_name.strip().lower(),
        )
        .order_by(Patient.created_at.asc())
        .limit(limit)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())
