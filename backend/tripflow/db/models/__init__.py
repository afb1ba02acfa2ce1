"""Re-export all models so Base.metadata knows every table."""

from tripflow.db.models.base import Base
from tripflow.db.models.patient import Patient
from tripflow.db.models.trip import Trip

__all__ = ["Base", "Patient", "Trip"]
