"""
Patient — a rider known to one organisation.

Bulk imports match patients on (org_id, lower(first_name), lower(last_name))
and create one when nothing matches.
"""

from __future__ import annotations

from sqlalchemy import Column, Date, DateTime, Index, String, Uuid, func
from sqlalchemy.orm import relationship

from tripflow.db.models.base import Base, generate_uuid, utcnow


class Patient(Base):
    """One row per patient per organisation."""

    __tablename__ = "patients"

    id = Column(Uuid, primary_key=True, default=generate_uuid)
    org_id = Column(String(64), nullable=False, index=True)

    # ── Identity ─────────────────────────────
    first_name = Column(String(255), nullable=False, default="")
    last_name = Column(String(255), nullable=False, default="")
    phone = Column(String(50), nullable=True)
    date_of_birth = Column(Date, nullable=True)

    # ── Audit timestamps ─────────────────────
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # ── Relationships ─────────────────────────
    trips = relationship("Trip", back_populates="patient")

    __table_args__ = (
        Index("ix_patients_org_name", "org_id", func.lower(first_name), func.lower(last_name)),
    )

    def __repr__(self) -> str:
        return f"<Patient {self.id} org={self.org_id} name={self.first_name} {self.last_name}>"
