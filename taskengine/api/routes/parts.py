from uuid import UUID

from fastapi import APIRouter

from ...domain.maintenance.entities import PartsRequest, Task
from ..deps import PartsFulfillmentDep
from ..schemas import ErrorResponse

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Parts request not found"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Transition not allowed"}}


@router.post(
    "/{parts_request_id}/ordered",
    summary="Mark parts as ordered",
    response_model=PartsRequest,
    responses={**NOT_FOUND, **CONFLICT},
)
async def mark_parts_ordered(
    parts_request_id: UUID, parts: PartsFulfillmentDep
) -> PartsRequest:
    return await parts.mark_ordered(parts_request_id)


@router.post(
    "/{parts_request_id}/received",
    summary="Record parts received",
    response_model=Task,
    responses={**NOT_FOUND, **CONFLICT},
)
async def mark_parts_received(parts_request_id: UUID, parts: PartsFulfillmentDep) -> Task:
    """Returns the corrective installation task created for the parts."""
    return await parts.handle_parts_received(parts_request_id)


@router.post(
    "/{parts_request_id}/installed",
    summary="Record parts installed",
    response_model=PartsRequest,
    responses={**NOT_FOUND, **CONFLICT},
)
async def mark_parts_installed(
    parts_request_id: UUID, parts: PartsFulfillmentDep
) -> PartsRequest:
    return await parts.handle_parts_installed(parts_request_id)
