"""Tests for the import session state machine."""

from __future__ import annotations

import asyncio
import threading

import pytest

from tests.conftest import nemt_manifest, nemt_row
from tripflow.core.constants import ImportSessionState as State
from tripflow.importer.errors import (
    CommitError,
    InvalidSessionStateError,
    NoValidRowsError,
    SessionBusyError,
    TemplateNotFoundError,
    UnsupportedFormatError,
)
from tripflow.importer import parser
from tripflow.importer.session import ImportSession

ORG = "org-1"
TEMPLATE = "future_nemt_template"


@pytest.fixture
def session(store) -> ImportSession:
    return ImportSession(store, session_id="s-1")


async def _reviewing(session: ImportSession, *rows: list[str]) -> ImportSession:
    session.select_template(TEMPLATE)
    await session.load_file("trips.csv", nemt_manifest(*rows))
    return session


async def test_happy_path(session, store):
    assert session.state == State.SELECTING_TEMPLATE
    session.select_template(TEMPLATE)
    assert session.state == State.AWAITING_FILE

    summary = await session.load_file(
        "trips.csv",
        nemt_manifest(nemt_row("Jane", "Doe"), nemt_row("John", "Smith", pickup="")),
    )
    assert session.state == State.REVIEWING
    assert (summary.total, summary.valid_count, summary.invalid_count) == (2, 1, 1)

    fixed = session.update_field(1, "pickup_address", "10 Elm St")
    assert fixed.is_valid

    result = await session.commit(ORG)
    assert session.state == State.SUCCEEDED
    assert result.inserted_count == 2
    assert session.last_result is result
    assert len(store.trips) == 2


async def test_template_can_be_changed_before_upload(session):
    session.select_template("mtm_template")
    session.select_template(TEMPLATE)
    assert session.template.id == TEMPLATE
    assert session.state == State.AWAITING_FILE


async def test_unknown_template_keeps_state(session):
    with pytest.raises(TemplateNotFoundError):
        session.select_template("nope")
    assert session.state == State.SELECTING_TEMPLATE


async def test_upload_requires_template(session):
    with pytest.raises(InvalidSessionStateError):
        await session.load_file("trips.csv", nemt_manifest(nemt_row("Jane", "Doe")))


async def test_rejected_file_keeps_awaiting_file(session):
    session.select_template(TEMPLATE)
    with pytest.raises(UnsupportedFormatError):
        await session.load_file("trips.pdf", b"%PDF")
    assert session.state == State.AWAITING_FILE
    assert session.review is None


async def test_cancelled_upload_leaves_session_awaiting_file(session, monkeypatch):
    started = threading.Event()
    release = threading.Event()
    parse_sync = parser._parse_sync

    def _blocking_parse(*args):
        started.set()
        release.wait(5)
        return parse_sync(*args)

    monkeypatch.setattr(parser, "_parse_sync", _blocking_parse)
    session.select_template(TEMPLATE)

    upload = asyncio.create_task(session.load_file("trips.csv", nemt_manifest(nemt_row("Jane", "Doe"))))
    await asyncio.to_thread(started.wait, 5)
    upload.cancel()
    with pytest.raises(asyncio.CancelledError):
        await upload
    release.set()

    assert session.state == State.AWAITING_FILE
    assert session.review is None
    assert session.parse_result is None

    summary = await session.load_file("trips.csv", nemt_manifest(nemt_row("Jane", "Doe")))
    assert summary.total == 1
    assert session.state == State.REVIEWING


async def test_template_locked_after_upload(session):
    await _reviewing(session, nemt_row("Jane", "Doe"))
    with pytest.raises(InvalidSessionStateError):
        session.select_template("mtm_template")


async def test_edit_outside_review_is_rejected(session):
    with pytest.raises(InvalidSessionStateError):
        session.update_field(0, "pickup_address", "x")


async def test_no_valid_rows_stays_in_review(session):
    await _reviewing(session, nemt_row("Jane", "Doe", pickup=""))
    with pytest.raises(NoValidRowsError):
        await session.commit(ORG)
    assert session.state == State.REVIEWING
    assert session.review.read_only is False


async def test_failed_commit_then_back_to_review(session, store):
    await _reviewing(session, nemt_row("Jane", "Doe"))
    store.fail_insert = True

    with pytest.raises(CommitError):
        await session.commit(ORG)
    assert session.state == State.FAILED
    assert session.last_error

    with pytest.raises(InvalidSessionStateError):
        session.update_field(0, "notes", "x")

    session.return_to_review()
    assert session.state == State.REVIEWING
    session.update_field(0, "notes", "second attempt")

    store.fail_insert = False
    result = await session.commit(ORG)
    assert session.state == State.SUCCEEDED
    assert result.trips[0].draft.notes == "second attempt"


async def test_unexpected_failure_is_wrapped(session, store, monkeypatch):
    await _reviewing(session, nemt_row("Jane", "Doe"))

    async def explode(drafts):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(store, "insert_trips", explode)
    with pytest.raises(CommitError, match="connection reset"):
        await session.commit(ORG)
    assert session.state == State.FAILED


async def test_succeeded_is_terminal(session):
    await _reviewing(session, nemt_row("Jane", "Doe"))
    await session.commit(ORG)
    with pytest.raises(InvalidSessionStateError):
        await session.commit(ORG)
    with pytest.raises(InvalidSessionStateError):
        session.return_to_review()


async def test_rows_are_read_only_while_committing(session, store):
    await _reviewing(session, nemt_row("Jane", "Doe"))
    store.insert_delay = 0.05

    commit = asyncio.create_task(session.commit(ORG))
    await asyncio.sleep(0.01)
    assert session.state == State.COMMITTING

    with pytest.raises(SessionBusyError):
        session.update_field(0, "notes", "late edit")
    with pytest.raises(SessionBusyError):
        await session.commit(ORG)

    await commit
    assert session.state == State.SUCCEEDED


async def test_cancelled_caller_does_not_abort_commit(session, store):
    await _reviewing(session, nemt_row("Jane", "Doe"), nemt_row("John", "Smith"))
    store.insert_delay = 0.05

    commit = asyncio.create_task(session.commit(ORG))
    await asyncio.sleep(0.01)
    commit.cancel()
    with pytest.raises(asyncio.CancelledError):
        await commit

    result = await session.wait_for_commit()
    assert session.state == State.SUCCEEDED
    assert result.inserted_count == 2
    assert len(store.trips) == 2


async def test_to_dict(session):
    await _reviewing(session, nemt_row("Jane", "Doe"))
    data = session.to_dict()
    assert data["session_id"] == "s-1"
    assert data["state"] == "REVIEWING"
    assert data["template_id"] == TEMPLATE
    assert data["file_name"] == "trips.csv"
    assert data["summary"]["valid_count"] == 1
    assert data["last_result"] is None
