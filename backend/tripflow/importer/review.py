"""
Review Store — the ordered working set of rows under correction.

Edits are copy-on-write: ``update_field`` builds a new ImportRow, re-derives
and re-validates that one row, and swaps it into place.  Row objects handed
out earlier are never mutated, and no other row is touched, so the cost of
a correction does not depend on file size.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from tripflow.core.logging import get_logger
from tripflow.importer.errors import RowNotFoundError, SessionBusyError, UnknownAttributeError
from tripflow.importer.mapper import derive
from tripflow.importer.rows import CANONICAL_ATTRIBUTES, ImportRow, ImportSummary, normalize_value
from tripflow.importer.validator import validate

logger = get_logger(__name__)


class ReviewStore:
    """Ordered rows plus their current error state."""

    def __init__(self, rows: Sequence[ImportRow] = ()) -> None:
        self._rows: list[ImportRow] = list(rows)
        self._read_only = False

    # ─── Access ──────────────────────────────

    @property
    def rows(self) -> tuple[ImportRow, ...]:
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[ImportRow]:
        return iter(tuple(self._rows))

    def __getitem__(self, row_index: int) -> ImportRow:
        return self._row_at(row_index)

    def valid_rows(self) -> list[ImportRow]:
        return [row for row in self._rows if row.is_valid]

    def invalid_rows(self) -> list[ImportRow]:
        return [row for row in self._rows if not row.is_valid]

    def summary(self) -> ImportSummary:
        return ImportSummary.from_rows(self._rows)

    # ─── Locking ─────────────────────────────

    @property
    def read_only(self) -> bool:
        return self._read_only

    def freeze(self) -> None:
        self._read_only = True

    def unfreeze(self) -> None:
        self._read_only = False

    # ─── Edits ───────────────────────────────

    def update_field(self, row_index: int, attribute: str, value: str | None) -> ImportRow:
        """
        Replace one attribute of one row and re-validate that row only.

        Returns the new row object.  Editing a derived attribute makes the
        value user-owned: later derivation passes leave it alone.
        """
        if self._read_only:
            raise SessionBusyError("Rows cannot be edited while a commit is running")
        if attribute not in CANONICAL_ATTRIBUTES:
            raise UnknownAttributeError(
                f"Unknown attribute: {attribute}",
                details={"attribute": attribute},
            )
        current = self._row_at(row_index)

        updated = current.copy()
        updated.derived.discard(attribute)
        setattr(updated, attribute, normalize_value(value))
        derive(updated)
        validate(updated)

        self._rows[row_index] = updated
        logger.debug(
            "Row field updated",
            row_index=row_index,
            row_number=updated.row_number,
            attribute=attribute,
            errors_before=len(current.validation_errors),
            errors_after=len(updated.validation_errors),
        )
        return updated

    def _row_at(self, row_index: int) -> ImportRow:
        if not 0 <= row_index < len(self._rows):
            raise RowNotFoundError(
                f"Row index {row_index} is out of range (0-{len(self._rows) - 1})",
                details={"row_index": row_index},
            )
        return self._rows[row_index]
