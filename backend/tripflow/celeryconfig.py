"""
Celery configuration for the import workers.

Loaded by `celery_app.config_from_object("tripflow.celeryconfig")` in
tripflow/tasks/__init__.py.  Broker/result-backend URLs come from Settings,
defaulting to localhost for local dev.
"""

from tripflow.core.config import settings

# ═══════════════════════════════════════════════════════════
#  Broker & Result Backend
# ═══════════════════════════════════════════════════════════

broker_url = settings.CELERY_BROKER_URL
result_backend = settings.CELERY_RESULT_BACKEND

# ═══════════════════════════════════════════════════════════
#  Serialization (JSON only)
# ═══════════════════════════════════════════════════════════

task_serializer = "json"
result_serializer = "json"
accept_content = ["json"]

# ═══════════════════════════════════════════════════════════
#  Timezone
# ═══════════════════════════════════════════════════════════

timezone = "UTC"
enable_utc = True

# ═══════════════════════════════════════════════════════════
#  Task Execution
# ═══════════════════════════════════════════════════════════

# Imports create patients and insert trips, so a manifest must never run twice.
# Messages are acknowledged on receipt: a worker lost mid-run drops the
# message instead of re-queueing it, and the file is re-submitted by hand.
task_acks_late = False
task_reject_on_worker_lost = False
worker_prefetch_multiplier = 1

# No soft or hard time limit: once the commit starts it runs to completion.
# Work per task is bounded by IMPORT_MAX_FILE_BYTES, checked before parsing.
task_soft_time_limit = None
task_time_limit = None

result_expires = 86400

# ═══════════════════════════════════════════════════════════
#  Task Routes
# ═══════════════════════════════════════════════════════════
#   celery -A tripflow.tasks worker -Q imports

task_routes = {
    "tripflow.tasks.import_tasks.*": {"queue": "imports"},
}

task_default_queue = "default"
