"""
Bulk trip import endpoints — templates, sessions, upload, review and commit.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from tripflow.api.deps import get_import_session, get_session_registry, get_trip_store
from tripflow.api.schemas.imports import (
    CommitRequest,
    CreateSessionRequest,
    ImportSummaryResponse,
    SelectTemplateRequest,
    TemplateResponse,
    UpdateFieldRequest,
    UploadResponse,
)
from tripflow.api.session_registry import SessionRegistry
from tripflow.core.config import settings
from tripflow.core.logging import get_logger
from tripflow.importer import errors
from tripflow.importer.session import ImportSession
from tripflow.importer.templates import get_template, list_templates
from tripflow.persistence.protocols import TripStore

logger = get_logger(__name__)

router = APIRouter(prefix="/imports", tags=["Imports"])

# Checked in order: subclasses before their bases.
ERROR_STATUS: tuple[tuple[type[errors.TripImportError], int], ...] = (
    (errors.TemplateNotFoundError, 404),
    (errors.RowNotFoundError, 404),
    (errors.UnknownAttributeError, 422),
    (errors.UnsupportedFormatError, 415),
    (errors.FileParseError, 422),
    (errors.NoValidRowsError, 422),
    (errors.SessionBusyError, 409),
    (errors.InvalidSessionStateError, 409),
    (errors.CommitError, 409),
)


def to_http_error(exc: errors.TripImportError) -> HTTPException:
    """Translate an engine exception into an HTTP error."""
    code = status.HTTP_400_BAD_REQUEST
    for exc_type, mapped in ERROR_STATUS:
        if isinstance(exc, exc_type):
            code = mapped
            break
    return HTTPException(
        status_code=code,
        detail={"error": type(exc).__name__, "message": str(exc), "details": exc.details},
    )


# ─── Templates ────────────────────────────────────────────
@router.get("/templates", response_model=list[TemplateResponse])
async def get_templates(include_fields: bool = False):
    """List broker templates in catalog order."""
    return [t.to_dict(include_fields=include_fields) for t in list_templates()]


@router.get("/templates/{template_id}", response_model=TemplateResponse)
async def get_template_detail(template_id: str):
    """One template with its ordered fields."""
    try:
        return get_template(template_id).to_dict()
    except errors.TripImportError as exc:
        raise to_http_error(exc) from exc


# ─── Sessions ─────────────────────────────────────────────
@router.post("/sessions", status_code=status.HTTP_201_CREATED)
async def create_session(
    body: CreateSessionRequest | None = None,
    store: TripStore = Depends(get_trip_store),
    registry: SessionRegistry = Depends(get_session_registry),
):
    """Start a new import session."""
    session = ImportSession(store)
    if body is not None and body.template_id:
        try:
            session.select_template(body.template_id)
        except errors.TripImportError as exc:
            raise to_http_error(exc) from exc
    registry.add(session)
    logger.info("Import session created", session_id=session.session_id, state=session.state.value)
    return session.to_dict()


@router.get("/sessions/{session_id}")
async def get_session(session: ImportSession = Depends(get_import_session)):
    """Current state, summary and last commit outcome."""
    return session.to_dict()


@router.post("/sessions/{session_id}/template")
async def select_template(
    body: SelectTemplateRequest,
    session: ImportSession = Depends(get_import_session),
):
    """Pick (or re-pick, before upload) the broker template."""
    try:
        session.select_template(body.template_id)
    except errors.TripImportError as exc:
        raise to_http_error(exc) from exc
    return session.to_dict()


# ─── Upload ───────────────────────────────────────────────
@router.post("/sessions/{session_id}/file", response_model=UploadResponse)
async def upload_file(
    file: UploadFile = File(...),
    session: ImportSession = Depends(get_import_session),
):
    """Parse, map and validate an uploaded manifest."""
    content = await file.read(settings.IMPORT_MAX_FILE_BYTES + 1)
    if len(content) > settings.IMPORT_MAX_FILE_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds {settings.IMPORT_MAX_FILE_BYTES} bytes",
        )

    try:
        summary = await session.load_file(file.filename or "", content)
    except errors.TripImportError as exc:
        raise to_http_error(exc) from exc

    parsed = session.parse_result
    return {
        "session_id": session.session_id,
        "state": session.state.value,
        "file_name": parsed.file_name,
        "headers": parsed.headers,
        "parse_errors": parsed.parse_errors,
        "summary": summary.to_dict(),
    }


# ─── Review ───────────────────────────────────────────────
@router.get("/sessions/{session_id}/rows")
async def list_rows(
    only_invalid: bool = False,
    offset: int = 0,
    limit: int = 100,
    session: ImportSession = Depends(get_import_session),
):
    """Rows under review, with their index for point edits."""
    if session.review is None:
        return {"data": [], "total": 0}

    indexed = list(enumerate(session.review.rows))
    if only_invalid:
        indexed = [(idx, row) for idx, row in indexed if not row.is_valid]
    page = indexed[offset: offset + limit]
    return {
        "data": [{"index": idx, **row.to_dict()} for idx, row in page],
        "total": len(indexed),
    }


@router.patch("/sessions/{session_id}/rows/{row_index}")
async def update_row_field(
    row_index: int,
    body: UpdateFieldRequest,
    session: ImportSession = Depends(get_import_session),
):
    """Correct one attribute of one row and re-validate that row."""
    try:
        row = session.update_field(row_index, body.attribute, body.value)
    except errors.TripImportError as exc:
        raise to_http_error(exc) from exc
    return {"index": row_index, **row.to_dict()}


@router.get("/sessions/{session_id}/summary", response_model=ImportSummaryResponse)
async def get_summary(session: ImportSession = Depends(get_import_session)):
    return session.summary().to_dict()


# ─── Commit ───────────────────────────────────────────────
@router.post("/sessions/{session_id}/commit")
async def commit_session(
    body: CommitRequest,
    session: ImportSession = Depends(get_import_session),
):
    """Commit every valid row; skipped rows are listed in the response."""
    try:
        result = await session.commit(body.org_id)
    except errors.TripImportError as exc:
        raise to_http_error(exc) from exc
    return {
        "session_id": session.session_id,
        "state": session.state.value,
        **result.to_dict(),
    }


@router.post("/sessions/{session_id}/review")
async def return_to_review(session: ImportSession = Depends(get_import_session)):
    """After a failed commit, reopen the rows for correction."""
    try:
        session.return_to_review()
    except errors.TripImportError as exc:
        raise to_http_error(exc) from exc
    return session.to_dict()
