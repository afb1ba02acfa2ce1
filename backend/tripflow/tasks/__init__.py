"""
Celery application factory.
"""

from celery import Celery
from celery.signals import setup_logging as celery_setup_logging

from tripflow.core.config import settings
from tripflow.core.logging import setup_logging

celery_app = Celery("tripflow")
celery_app.config_from_object("tripflow.celeryconfig")

# Auto-discover tasks in these modules
celery_app.autodiscover_tasks([
    "tripflow.tasks.import_tasks",
])


@celery_setup_logging.connect
def configure_worker_logging(**kwargs):
    """Use the app's structlog setup instead of Celery's root-logger hijack."""
    setup_logging(settings.effective_log_level)
