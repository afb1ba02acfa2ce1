"""
Trip repository containing all data-access operations for the trips table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from tripflow.db.models.trip import Trip


async def bulk_create_trips(db: AsyncSession, rows: list[dict[str, Any]]) -> list[Trip]:
    """Insert many trips in one flush and return them with ids assigned."""
    trips = [Trip(**row) for row in rows]
    db.add_all(trips)
    await db.flush()
    return trips
