"""
Domain-specific exception hierarchy for the bulk trip import engine.

All import exceptions inherit from TripImportError so callers can
catch broadly or narrowly as needed.  Each exception carries structured
context (session ID, row, etc.) for logging/debugging.

Row-level problems (a malformed CSV line, a missing required field) are
NOT raised: they are collected as messages on the parse result or on the
row itself.  Only whole-file, whole-batch and caller errors are raised.
"""

from __future__ import annotations


class TripImportError(Exception):
    """Base exception for all import errors."""

    def __init__(
        self,
        message: str,
        *,
        session_id: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.session_id = session_id
        self.details = details or {}
        super().__init__(message)


# ─── File level ───────────────────────────────────────────

class UnsupportedFormatError(TripImportError):
    """The file extension is not a recognised manifest container."""

    def __init__(self, extension: str, **kwargs) -> None:
        self.extension = extension
        super().__init__(
            f"Unsupported file format: {extension or '(none)'}. "
            "Please upload CSV, TSV, XLS, or XLSX files.",
            **kwargs,
        )


class FileParseError(TripImportError):
    """The whole file could not be read (corrupt workbook, bad container)."""
    pass


# ─── Registry / session ───────────────────────────────────

class TemplateNotFoundError(TripImportError):
    """No broker template is registered under the requested id."""

    def __init__(self, template_id: str, **kwargs) -> None:
        self.template_id = template_id
        super().__init__(f"Unknown broker template: {template_id}", **kwargs)


class InvalidSessionStateError(TripImportError):
    """An operation was attempted from a state that does not allow it."""

    def __init__(self, message: str, *, state: str | None = None, **kwargs) -> None:
        self.state = state
        super().__init__(message, **kwargs)


class SessionBusyError(InvalidSessionStateError):
    """The session is committing and its rows are read-only."""
    pass


class RowNotFoundError(TripImportError):
    """A review edit referenced a row index outside the working set."""
    pass


class UnknownAttributeError(TripImportError):
    """A review edit referenced an attribute that is not canonical."""
    pass


# ─── Commit ───────────────────────────────────────────────

class PersistenceError(TripImportError):
    """The persistence collaborator failed a read or write."""
    pass


class PatientResolutionError(TripImportError):
    """Match-or-create of a row's patient failed (row-level, non-fatal)."""

    def __init__(self, message: str, *, row_number: int | None = None, **kwargs) -> None:
        self.row_number = row_number
        super().__init__(message, **kwargs)


class CommitError(TripImportError):
    """The commit batch failed as a whole."""
    pass


class NoValidRowsError(CommitError):
    """There is nothing eligible to commit."""

    def __init__(self, message: str = "There are no valid rows to import", **kwargs) -> None:
        super().__init__(message, **kwargs)
