"""Shared test doubles — re-export the in-memory trip store."""

from __future__ import annotations

from tripflow.persistence.memory_store import MemoryTripStore

__all__ = ["MemoryTripStore"]
