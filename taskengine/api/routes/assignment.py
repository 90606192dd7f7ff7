from fastapi import APIRouter

from ...domain.maintenance.services import AssignmentRunSummary
from ..deps import OptimizerDep
from ..schemas import AssignmentRunRequest

router = APIRouter()


@router.post(
    "/run",
    summary="Run the daily assignment optimizer",
    response_model=AssignmentRunSummary,
)
async def run_assignment(
    optimizer: OptimizerDep, request: AssignmentRunRequest | None = None
) -> AssignmentRunSummary:
    """
    Run one assignment pass now, outside the daily schedule.

    Data load failures are reported in the summary with outcome ``aborted``.
    """
    reference_date = request.reference_date if request else None
    try:
        return await optimizer.run_once(reference_date)
    finally:
        await optimizer.close()
