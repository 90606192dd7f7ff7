"""Daily assignment background task."""

import asyncio
from datetime import date
from typing import Any

from ...infrastructure.service_dependencies import get_optimizer
from ..celery_app import BaseTask, celery_app
from ..observability import get_logger, set_correlation_id

logger = get_logger(__name__)


async def _run(reference_date: date | None) -> dict[str, Any]:
    optimizer = get_optimizer()
    try:
        summary = await optimizer.run_once(reference_date)
    finally:
        await optimizer.close()
    return summary.model_dump(mode="json")


@celery_app.task(
    bind=True,
    base=BaseTask,
    name="taskengine.core.tasks.assignment.run_daily_assignment",
    queue="assignment",
)
def run_daily_assignment(
    self: BaseTask, reference_date: str | None = None
) -> dict[str, Any]:
    """
    Run the daily assignment optimizer once.

    Args:
        reference_date: ISO date to plan for, defaults to today

    Returns:
        The run summary as JSON-compatible data
    """
    set_correlation_id(self.request.id)
    ref = date.fromisoformat(reference_date) if reference_date else None
    logger.info("Daily assignment requested", reference_date=reference_date)
    return asyncio.run(_run(ref))
