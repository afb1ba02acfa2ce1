"""
Celery tasks — unattended manifest import.

For scheduled broker drops that nobody reviews by hand: parse, map and
validate the file, then commit every valid row.  Invalid rows are left out
and listed in the task result.
"""

import asyncio
from pathlib import Path

from tripflow.core.config import settings
from tripflow.core.logging import get_logger
from tripflow.importer import parser
from tripflow.importer.errors import FileParseError
from tripflow.importer.commit import CommitPipeline
from tripflow.importer.rows import ImportSummary
from tripflow.importer.session import build_rows
from tripflow.importer.templates import get_template
from tripflow.persistence.sqlalchemy_store import SqlAlchemyTripStore, make_session_factory
from tripflow.tasks import celery_app

logger = get_logger("tasks.imports")


def _open_store():
    """TripStore on a fresh engine (one event loop per task run)."""
    factory, engine = make_session_factory()
    return SqlAlchemyTripStore(factory), engine


async def _run_import(
    file_name: str,
    content: bytes,
    template_id: str,
    org_id: str,
    task_id: str | None = None,
) -> dict:
    template = get_template(template_id)
    parsed = await parser.parse(file_name, content)
    rows = build_rows(parsed, template)
    summary = ImportSummary.from_rows(rows)

    report = {
        "file_name": file_name,
        "template_id": template.id,
        "summary": summary.to_dict(),
        "parse_errors": list(parsed.parse_errors),
        "invalid_rows": [
            {"row_number": row.row_number, "errors": list(row.validation_errors)}
            for row in rows
            if not row.is_valid
        ],
        "inserted_count": 0,
        "skipped": [],
        "patients_created": 0,
        "patients_matched": 0,
    }
    if summary.valid_count == 0:
        report["status"] = "NO_VALID_ROWS"
        return report

    store, engine = _open_store()
    try:
        result = await CommitPipeline(store).commit(rows, org_id, session_id=task_id)
    finally:
        if engine is not None:
            await engine.dispose()

    report.update(
        status="COMMITTED",
        inserted_count=result.inserted_count,
        skipped=[s.to_dict() for s in result.skipped],
        patients_created=result.patients_created,
        patients_matched=result.patients_matched,
    )
    return report


@celery_app.task(
    bind=True,
    name="tripflow.tasks.import_tasks.import_manifest",
    acks_late=False,
    reject_on_worker_lost=False,
)
def import_manifest(self, file_path: str, template_id: str, org_id: str):
    """
    Import one manifest file from disk.

    Returns the validation summary, the invalid rows and the commit counts.
    A failed trip insert fails the task.  The task is acknowledged on
    receipt and is never retried, so one message imports a file at most once.
    """
    task_log = logger.bind(
        task_id=self.request.id,
        file_path=file_path,
        template_id=template_id,
        org_id=org_id,
    )
    task_log.info("Import task started")

    path = Path(file_path)
    try:
        size = path.stat().st_size
        if size > settings.IMPORT_MAX_FILE_BYTES:
            raise FileParseError(
                f"File exceeds {settings.IMPORT_MAX_FILE_BYTES} bytes",
                details={"file_path": file_path, "size": size},
            )
        report = asyncio.run(
            _run_import(path.name, path.read_bytes(), template_id, org_id, task_id=self.request.id)
        )
    except Exception as exc:
        task_log.exception("Import task failed", error=str(exc))
        raise

    task_log.info(
        "Import task finished",
        status=report["status"],
        total=report["summary"]["total"],
        inserted=report["inserted_count"],
        skipped=len(report["skipped"]),
    )
    return report
