from typing import Annotated

from fastapi import Depends

from ..domain.maintenance.services import (
    DailyAssignmentOptimizer,
    PartsFulfillmentService,
    TaskLifecycleService,
)
from ..infrastructure.service_dependencies import (
    get_optimizer,
    get_parts_fulfillment_service,
    get_task_lifecycle_service,
)

OptimizerDep = Annotated[DailyAssignmentOptimizer, Depends(get_optimizer)]
TaskLifecycleDep = Annotated[TaskLifecycleService, Depends(get_task_lifecycle_service)]
PartsFulfillmentDep = Annotated[
    PartsFulfillmentService, Depends(get_parts_fulfillment_service)
]
