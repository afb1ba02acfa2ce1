"""
ImportSession — one user's walk through a bulk import.

States:
    SELECTING_TEMPLATE → AWAITING_FILE → REVIEWING → COMMITTING → SUCCEEDED
                                            ↑            │
                                            └── FAILED ←─┘

Everything is forward-only except the FAILED → REVIEWING back-edge, and
re-picking the template before a file is uploaded.  Parsing only advances
the state once it succeeds, so cancelling an upload leaves the session
where it was.  A commit runs as a shielded task: if the awaiting caller is
cancelled, the commit still finishes and lands in SUCCEEDED or FAILED.
"""

from __future__ import annotations

import asyncio
import uuid
from typing import Any

from tripflow.core.constants import ImportSessionState
from tripflow.core.logging import get_logger
from tripflow.importer import parser
from tripflow.importer.commit import CommitPipeline, CommitResult
from tripflow.importer.errors import CommitError, InvalidSessionStateError, SessionBusyError
from tripflow.importer.mapper import map_rows
from tripflow.importer.review import ReviewStore
from tripflow.importer.rows import ImportRow, ImportSummary, ParseResult
from tripflow.importer.templates import BrokerTemplate, get_template
from tripflow.importer.validator import validate_rows
from tripflow.persistence.protocols import TripStore

logger = get_logger(__name__)

State = ImportSessionState

ALLOWED_TRANSITIONS: dict[ImportSessionState, set[ImportSessionState]] = {
    State.SELECTING_TEMPLATE: {State.AWAITING_FILE},
    State.AWAITING_FILE: {State.AWAITING_FILE, State.REVIEWING},
    State.REVIEWING: {State.COMMITTING},
    State.COMMITTING: {State.SUCCEEDED, State.FAILED},
    State.FAILED: {State.REVIEWING},
    State.SUCCEEDED: set(),
}


def build_rows(parsed: ParseResult, template: BrokerTemplate) -> list[ImportRow]:
    """Map and validate every parsed row."""
    rows = map_rows(parsed.rows, template, row_numbers=parsed.row_numbers, headers=parsed.headers)
    validate_rows(rows)
    return rows


class ImportSession:
    """State machine wiring registry, parser, mapper, validator, review and commit."""

    def __init__(
        self,
        store: TripStore,
        *,
        session_id: str | None = None,
        pipeline: CommitPipeline | None = None,
    ) -> None:
        self.session_id = session_id or str(uuid.uuid4())
        self.state: ImportSessionState = State.SELECTING_TEMPLATE
        self.template: BrokerTemplate | None = None
        self.parse_result: ParseResult | None = None
        self.review: ReviewStore | None = None
        self.last_result: CommitResult | None = None
        self.last_error: str | None = None
        self._pipeline = pipeline or CommitPipeline(store)
        self._commit_task: asyncio.Task | None = None
        self._log = logger.bind(session_id=self.session_id)

    # ─── Transitions ─────────────────────────

    def _require(self, *states: ImportSessionState, action: str) -> None:
        if self.state not in states:
            if self.state == State.COMMITTING:
                raise SessionBusyError(
                    f"Cannot {action} while a commit is running",
                    state=self.state.value,
                    session_id=self.session_id,
                )
            raise InvalidSessionStateError(
                f"Cannot {action} in state {self.state.value}",
                state=self.state.value,
                session_id=self.session_id,
            )

    def _transition(self, target: ImportSessionState) -> None:
        if target not in ALLOWED_TRANSITIONS[self.state]:
            raise InvalidSessionStateError(
                f"Illegal transition {self.state.value} → {target.value}",
                state=self.state.value,
                session_id=self.session_id,
            )
        self._log.info("Session state changed", from_state=self.state.value, to_state=target.value)
        self.state = target

    # ─── Template ────────────────────────────

    def select_template(self, template_id: str) -> BrokerTemplate:
        self._require(State.SELECTING_TEMPLATE, State.AWAITING_FILE, action="select a template")
        template = get_template(template_id)
        self.template = template
        self._transition(State.AWAITING_FILE)
        return template

    # ─── File ────────────────────────────────

    async def load_file(self, file_name: str, content: bytes) -> ImportSummary:
        """Parse, map and validate a manifest; REVIEWING on success."""
        self._require(State.AWAITING_FILE, action="upload a file")
        parsed = await parser.parse(file_name, content)
        rows = build_rows(parsed, self.template)

        self.parse_result = parsed
        self.review = ReviewStore(rows)
        self._transition(State.REVIEWING)

        summary = self.review.summary()
        self._log.info(
            "Manifest loaded",
            template_id=self.template.id,
            file_name=file_name,
            total=summary.total,
            valid=summary.valid_count,
            invalid=summary.invalid_count,
            parse_errors=len(parsed.parse_errors),
        )
        return summary

    # ─── Review ──────────────────────────────

    def update_field(self, row_index: int, attribute: str, value: str | None) -> ImportRow:
        self._require(State.REVIEWING, action="edit rows")
        return self.review.update_field(row_index, attribute, value)

    def summary(self) -> ImportSummary:
        if self.review is None:
            return ImportSummary()
        return self.review.summary()

    # ─── Commit ──────────────────────────────

    async def commit(self, org_id: str) -> CommitResult:
        """
        Commit every valid row.

        NoValidRowsError is raised before the session enters COMMITTING,
        so the user can keep correcting rows.
        """
        self._require(State.REVIEWING, action="commit")
        rows = self.review.rows
        CommitPipeline.eligible_rows(rows)

        self._transition(State.COMMITTING)
        self.review.freeze()
        self.last_error = None

        task = asyncio.ensure_future(self._run_commit(rows, org_id))
        task.add_done_callback(_consume_exception)
        self._commit_task = task
        return await asyncio.shield(task)

    async def _run_commit(self, rows: tuple[ImportRow, ...], org_id: str) -> CommitResult:
        try:
            result = await self._pipeline.commit(rows, org_id, session_id=self.session_id)
        except CommitError as exc:
            self.last_error = str(exc)
            self._transition(State.FAILED)
            raise
        except Exception as exc:
            self.last_error = str(exc)
            self._transition(State.FAILED)
            self._log.exception("Commit crashed", error=str(exc))
            raise CommitError(f"Commit failed: {exc}", session_id=self.session_id) from exc

        self.last_result = result
        self._transition(State.SUCCEEDED)
        return result

    async def wait_for_commit(self) -> CommitResult | None:
        """Await a commit started by a caller that has since gone away."""
        if self._commit_task is None:
            return None
        return await asyncio.shield(self._commit_task)

    def return_to_review(self) -> None:
        """FAILED → REVIEWING; rows become editable again."""
        self._require(State.FAILED, action="return to review")
        self._transition(State.REVIEWING)
        self.review.unfreeze()

    # ─── Serialisation ───────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "session_id": self.session_id,
            "state": self.state.value,
            "template_id": self.template.id if self.template else None,
            "file_name": self.parse_result.file_name if self.parse_result else None,
            "parse_errors": list(self.parse_result.parse_errors) if self.parse_result else [],
            "summary": self.summary().to_dict(),
            "last_error": self.last_error,
            "last_result": self.last_result.to_dict() if self.last_result else None,
        }


def _consume_exception(task: asyncio.Task) -> None:
    if not task.cancelled():
        task.exception()
