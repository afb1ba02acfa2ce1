"""
Trip — one scheduled ride.

Rows created by bulk import carry the broker's trip id in
``external_trip_id`` and their manifest row in ``source_row_number``.
"""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from tripflow.core.constants import TripStatus, TripType
from tripflow.db.models.base import Base, generate_uuid, utcnow


class Trip(Base):
    """One row per trip leg."""

    __tablename__ = "trips"

    id = Column(Uuid, primary_key=True, default=generate_uuid)
    org_id = Column(String(64), nullable=False, index=True)
    patient_id = Column(Uuid, ForeignKey("patients.id"), nullable=False, index=True)

    # ── Route ────────────────────────────────
    pickup_location = Column(Text, nullable=True)
    dropoff_location = Column(Text, nullable=True)

    # ── Timing ───────────────────────────────
    scheduled_time = Column(DateTime(timezone=True), nullable=False, index=True)
    pickup_time = Column(DateTime(timezone=True), nullable=True)

    # ── Details ──────────────────────────────
    trip_type = Column(String(50), nullable=False, default=TripType.ONE_WAY.value)
    status = Column(String(50), nullable=False, default=TripStatus.PENDING.value, index=True)
    notes = Column(Text, nullable=True)
    distance_miles = Column(Float, nullable=True)
    duration_minutes = Column(Float, nullable=True)

    # ── Import provenance ────────────────────
    external_trip_id = Column(String(255), nullable=True)
    source_row_number = Column(Integer, nullable=True)

    # ── Audit timestamps ─────────────────────
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # ── Relationships ─────────────────────────
    patient = relationship("Patient", back_populates="trips")

    def __repr__(self) -> str:
        return f"<Trip {self.id} patient={self.patient_id} at={self.scheduled_time} status={self.status}>"
