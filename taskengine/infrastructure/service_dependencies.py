"""
Service wiring.

Builds the domain services over the Supabase repositories and the HTTP
notification gateway. The API resolves services through these functions so
tests can substitute them with dependency overrides.
"""

from functools import lru_cache

from ..core.config import settings
from ..domain.maintenance.services import (
    DailyAssignmentOptimizer,
    PartsFulfillmentService,
    TaskLifecycleService,
)
from .database.repositories import (
    SupabaseCalendarRepository,
    SupabaseEngineerRepository,
    SupabasePartsRequestRepository,
    SupabaseTaskRepository,
)
from .notifications import HttpNotificationGateway


@lru_cache()
def get_task_repository() -> SupabaseTaskRepository:
    return SupabaseTaskRepository()


def get_optimizer() -> DailyAssignmentOptimizer:
    """Create an optimizer configured from settings."""
    return DailyAssignmentOptimizer(
        task_repository=get_task_repository(),
        engineer_repository=SupabaseEngineerRepository(),
        calendar_repository=SupabaseCalendarRepository(),
        notification_gateway=HttpNotificationGateway(),
        capacity_ceiling=settings.ASSIGNMENT_CAPACITY_CEILING,
        min_score=settings.ASSIGNMENT_MIN_SCORE,
        lookback_days=settings.ASSIGNMENT_LOOKBACK_DAYS,
        lookahead_days=settings.ASSIGNMENT_LOOKAHEAD_DAYS,
        run_time_limit_seconds=settings.ASSIGNMENT_RUN_TIME_LIMIT_SECONDS,
    )


def get_task_lifecycle_service() -> TaskLifecycleService:
    return TaskLifecycleService(get_task_repository())


def get_parts_fulfillment_service() -> PartsFulfillmentService:
    return PartsFulfillmentService(
        SupabasePartsRequestRepository(),
        get_task_repository(),
        get_task_lifecycle_service(),
    )
