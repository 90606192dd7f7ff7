from uuid import UUID

from fastapi import APIRouter, status

from ...domain.maintenance.entities import Task
from ...domain.maintenance.services import StatusChangeResult
from ..deps import TaskLifecycleDep
from ..schemas import CorrectiveTaskRequest, ErrorResponse, StatusChangeRequest

router = APIRouter()


@router.post(
    "/{task_id}/status",
    summary="Change a task's status",
    response_model=StatusChangeResult,
    responses={
        404: {"model": ErrorResponse, "description": "Task not found"},
        409: {"model": ErrorResponse, "description": "Transition not allowed"},
    },
)
async def change_task_status(
    task_id: UUID, request: StatusChangeRequest, lifecycle: TaskLifecycleDep
) -> StatusChangeResult:
    """Moving a task to Requires Follow-up also creates its corrective task."""
    return await lifecycle.change_status(
        task_id,
        request.status,
        reason=request.reason,
        assign_to_original_engineer=request.assign_to_original_engineer,
        urgency=request.urgency,
    )


@router.post(
    "/{task_id}/corrective",
    summary="Create a corrective task",
    status_code=status.HTTP_201_CREATED,
    response_model=Task,
    responses={404: {"model": ErrorResponse, "description": "Task not found"}},
)
async def create_corrective_task(
    task_id: UUID, request: CorrectiveTaskRequest, lifecycle: TaskLifecycleDep
) -> Task:
    return await lifecycle.create_corrective_task(
        task_id,
        request.reason,
        request.urgency,
        assign_to_original_engineer=request.assign_to_original_engineer,
        days_from_now=request.days_from_now,
        additional_notes=request.additional_notes,
    )
