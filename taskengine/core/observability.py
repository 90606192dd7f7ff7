"""
Observability Infrastructure

Structured logging and Prometheus metrics for the assignment engine.
"""

import contextvars
import logging
import sys
import uuid
from typing import TYPE_CHECKING, Any

import structlog
from prometheus_client import Counter, start_http_server

from .config import settings

if TYPE_CHECKING:
    from ..domain.maintenance.services.daily_optimizer import AssignmentRunSummary

# Context variable for correlation tracking
correlation_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)

# Prometheus metrics
ASSIGNMENT_RUNS = Counter(
    "taskengine_assignment_runs_total",
    "Daily assignment runs by outcome",
    ["outcome"],
)

TASKS_ASSIGNED = Counter(
    "taskengine_tasks_assigned_total", "Tasks assigned by the daily optimizer"
)

TASKS_SKIPPED = Counter(
    "taskengine_tasks_skipped_total",
    "Tasks left unassigned by the daily optimizer",
    ["reason"],
)

ASSIGNMENT_WRITE_FAILURES = Counter(
    "taskengine_assignment_write_failures_total",
    "Assignments that could not be written back to the store",
)

NOTIFICATION_FAILURES = Counter(
    "taskengine_notification_failures_total",
    "Notifications that could not be delivered",
    ["notification_type"],
)

CORRECTIVE_TASKS_CREATED = Counter(
    "taskengine_corrective_tasks_created_total",
    "Corrective maintenance tasks spawned",
    ["source"],
)


class CorrelationIdProcessor:
    """Structlog processor to add correlation ID to all log entries."""

    def __call__(
        self, logger: Any, name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        correlation_id = correlation_id_var.get("")
        if correlation_id:
            event_dict["correlation_id"] = correlation_id
        return event_dict


def setup_structured_logging() -> None:
    """Configure structured logging with JSON output and correlation tracking."""

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        CorrelationIdProcessor(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=settings.ENVIRONMENT == "local")
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def setup_metrics() -> None:
    """Expose Prometheus metrics over HTTP when enabled."""
    if not settings.ENABLE_METRICS:
        return
    start_http_server(settings.METRICS_PORT)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set correlation ID for run or request tracking."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    correlation_id_var.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str:
    """Get current correlation ID."""
    return correlation_id_var.get("")


def log_run_summary(summary: "AssignmentRunSummary") -> None:
    """Record metrics and a log line for a finished assignment run."""
    logger = get_logger("assignment_runs")

    ASSIGNMENT_RUNS.labels(outcome=summary.outcome.value).inc()
    TASKS_ASSIGNED.inc(summary.assigned_count)
    for reason, count in (
        ("non_work_day", summary.skipped_non_work_day),
        ("no_availability", summary.skipped_no_availability),
        ("below_threshold", summary.skipped_below_threshold),
        ("deferred", summary.deferred),
    ):
        if count:
            TASKS_SKIPPED.labels(reason=reason).inc(count)
    if summary.write_failures:
        ASSIGNMENT_WRITE_FAILURES.inc(len(summary.write_failures))

    logger.info(
        "Assignment run finished",
        run_date=summary.run_date.isoformat(),
        outcome=summary.outcome.value,
        candidate_tasks=summary.candidate_tasks,
        assigned=summary.assigned_count,
        engineers_used=len(summary.per_engineer),
        skipped_non_work_day=summary.skipped_non_work_day,
        skipped_no_availability=summary.skipped_no_availability,
        skipped_below_threshold=summary.skipped_below_threshold,
        deferred=summary.deferred,
        write_failures=len(summary.write_failures),
        errors=summary.errors,
        correlation_id=get_correlation_id(),
    )
