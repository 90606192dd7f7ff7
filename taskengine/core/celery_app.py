"""Celery application configuration and the daily assignment schedule."""

from typing import Any

from celery import Celery, Task
from celery.schedules import crontab
from celery.signals import task_postrun, task_prerun, worker_ready

from .config import settings
from .observability import get_logger

logger = get_logger(__name__)


# Create Celery application
celery_app = Celery(
    "taskengine",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=["taskengine.core.tasks.assignment"],
)

# Configure Celery
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    # Task execution settings
    task_track_started=True,
    task_time_limit=settings.CELERY_TASK_TIME_LIMIT,
    task_soft_time_limit=settings.CELERY_TASK_SOFT_TIME_LIMIT,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    # A single worker slot keeps assignment runs from overlapping
    worker_prefetch_multiplier=1,
    worker_max_tasks_per_child=100,
    result_expires=86400,
    task_routes={
        "taskengine.core.tasks.assignment.*": {"queue": "assignment"},
    },
    # Beat schedule (periodic tasks)
    beat_schedule={
        "daily-task-assignment": {
            "task": "taskengine.core.tasks.assignment.run_daily_assignment",
            "schedule": crontab(hour=settings.ASSIGNMENT_RUN_HOUR_UTC, minute=0),
        },
    },
)


class BaseTask(Task):
    """Base task that logs failures, retries and successes."""

    def on_failure(
        self, exc: Exception, task_id: str, args: tuple, kwargs: dict, einfo: Any
    ) -> None:
        """Handle task failure."""
        logger.error(
            "Task failed",
            task_id=task_id,
            task_name=self.name,
            kwargs=kwargs,
            exception=str(exc),
        )
        super().on_failure(exc, task_id, args, kwargs, einfo)

    def on_retry(
        self, exc: Exception, task_id: str, args: tuple, kwargs: dict, einfo: Any
    ) -> None:
        """Handle task retry."""
        logger.warning(
            "Task retrying",
            task_id=task_id,
            task_name=self.name,
            exception=str(exc),
        )
        super().on_retry(exc, task_id, args, kwargs, einfo)

    def on_success(self, retval: Any, task_id: str, args: tuple, kwargs: dict) -> None:
        """Handle task success."""
        logger.info("Task succeeded", task_id=task_id, task_name=self.name)
        super().on_success(retval, task_id, args, kwargs)


# Set default task base
celery_app.Task = BaseTask


@task_prerun.connect
def task_prerun_handler(
    task_id: str, task: Task, args: tuple, kwargs: dict, **kw: Any
) -> None:
    """Log task start."""
    logger.info("Task starting", task_id=task_id, task_name=task.name)


@task_postrun.connect
def task_postrun_handler(
    task_id: str,
    task: Task,
    args: tuple,
    kwargs: dict,
    retval: Any,
    state: str,
    **kw: Any,
) -> None:
    """Log task completion."""
    logger.info("Task completed", task_id=task_id, task_name=task.name, state=state)


@worker_ready.connect
def worker_ready_handler(sender: Any, **kw: Any) -> None:
    """Log when worker is ready."""
    logger.info("Celery worker is ready to accept tasks")


__all__ = ["celery_app", "BaseTask"]
