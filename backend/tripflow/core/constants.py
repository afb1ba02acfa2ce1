"""Shared constants and enums used across the application."""

from enum import StrEnum


class ImportSessionState(StrEnum):
    """Lifecycle of one bulk-import session."""

    SELECTING_TEMPLATE = "SELECTING_TEMPLATE"
    AWAITING_FILE = "AWAITING_FILE"
    REVIEWING = "REVIEWING"
    COMMITTING = "COMMITTING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class FileFormat(StrEnum):
    """Manifest container families the parser understands."""

    DELIMITED_TEXT = "DELIMITED_TEXT"
    SPREADSHEET = "SPREADSHEET"


class TripStatus(StrEnum):
    """Status values written on persisted trips."""

    PENDING = "pending"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TripType(StrEnum):
    """Trip leg types."""

    ONE_WAY = "one_way"
    ROUND_TRIP = "round_trip"


class SkipReason(StrEnum):
    """Why a valid row was left out of a commit."""

    PATIENT_LOOKUP_FAILED = "PATIENT_LOOKUP_FAILED"
    PATIENT_CREATE_FAILED = "PATIENT_CREATE_FAILED"
    NO_PATIENT_NAME = "NO_PATIENT_NAME"
