"""Shared dependencies for API routes."""

from __future__ import annotations

from fastapi import Depends, HTTPException, status

from tripflow.api.session_registry import SessionRegistry, session_registry
from tripflow.importer.session import ImportSession
from tripflow.persistence.protocols import TripStore

_trip_store: TripStore | None = None


def get_trip_store() -> TripStore:
    """TripStore backed by the application's database pool."""
    global _trip_store
    if _trip_store is None:
        from tripflow.db.session import async_session
        from tripflow.persistence.sqlalchemy_store import SqlAlchemyTripStore

        _trip_store = SqlAlchemyTripStore(async_session)
    return _trip_store


def get_session_registry() -> SessionRegistry:
    return session_registry


def get_import_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> ImportSession:
    """Resolve a live import session or 404."""
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Import session {session_id} not found or expired",
        )
    return session
