"""
PartsFulfillmentService Domain Service

Moves parts requests through their lifecycle and keeps the originating task
and its corrective follow-up in step. The steps are not transactional: a
failure part way leaves earlier writes in place and is logged and re-raised.
"""

from collections.abc import Callable
from datetime import date
from uuid import UUID

from ....core.observability import get_logger
from ...shared.exceptions import DomainError, PartsRequestNotFoundError
from ..entities.parts_request import PartsRequest
from ..entities.task import Task
from ..events import publish_events
from ..repositories import PartsRequestRepository, TaskRepository
from ..value_objects.enums import TaskStatus, Urgency
from .task_lifecycle import TaskLifecycleService

logger = get_logger(__name__)


class PartsFulfillmentService:
    """Domain service linking parts requests to corrective tasks."""

    def __init__(
        self,
        parts_request_repository: PartsRequestRepository,
        task_repository: TaskRepository,
        lifecycle: TaskLifecycleService,
        today: Callable[[], date] = date.today,
    ):
        self._parts_request_repository = parts_request_repository
        self._task_repository = task_repository
        self._lifecycle = lifecycle
        self._today = today

    async def _get_request(self, parts_request_id: UUID) -> PartsRequest:
        request = await self._parts_request_repository.get_by_id(parts_request_id)
        if request is None:
            raise PartsRequestNotFoundError(parts_request_id)
        return request

    async def _persist(self, request: PartsRequest) -> PartsRequest:
        saved = await self._parts_request_repository.save(request)
        publish_events(request.get_domain_events())
        request.clear_domain_events()
        return saved

    async def mark_ordered(self, parts_request_id: UUID) -> PartsRequest:
        request = await self._get_request(parts_request_id)
        request.mark_ordered(self._today())
        saved = await self._persist(request)
        logger.info("Parts ordered", parts_request_id=str(parts_request_id))
        return saved

    async def handle_parts_received(self, parts_request_id: UUID) -> Task:
        """
        Record receipt of parts and raise the installation task.

        Returns:
            The corrective task created for the installation

        Raises:
            PartsRequestNotFoundError: If the request does not exist
            InvalidStatusTransitionError: If the request cannot be received
        """
        request = await self._get_request(parts_request_id)
        request.mark_received(self._today())
        request = await self._persist(request)

        try:
            corrective = await self._lifecycle.create_corrective_task(
                request.task_id,
                f"Parts received: {request.part_name}. "
                "Complete installation and return equipment to service.",
                request.urgency,
                assign_to_original_engineer=True,
                days_from_now=1 if request.urgency == Urgency.CRITICAL else 2,
                additional_notes=f"Received parts: {request.description}",
                source="parts_received",
            )
            request.link_corrective_task(corrective)
            await self._persist(request)
            await self._resume_original_task(request.task_id, corrective.reference)
        except DomainError as e:
            logger.error(
                "Parts receipt only partly processed",
                parts_request_id=str(parts_request_id),
                error=e.message,
            )
            raise

        logger.info(
            "Parts received",
            parts_request_id=str(parts_request_id),
            corrective_task_id=str(corrective.id),
        )
        return corrective

    async def _resume_original_task(self, task_id: UUID, corrective_reference: str) -> None:
        note = f"Parts received. Corrective task created: {corrective_reference}"
        task = await self._task_repository.get_by_id(task_id)
        if task is None:
            logger.warning("Original task missing for parts request", task_id=str(task_id))
            return
        if task.status == TaskStatus.COMPLETED:
            logger.warning(
                "Original task already completed, leaving it unchanged",
                task_id=str(task_id),
            )
            return
        if task.status == TaskStatus.IN_PROGRESS:
            await self._lifecycle.update_notes(task, note)
            return
        await self._lifecycle.change_status(task_id, TaskStatus.IN_PROGRESS, reason=note)

    async def handle_parts_installed(self, parts_request_id: UUID) -> PartsRequest:
        """
        Record installation and complete the linked corrective task.

        Raises:
            PartsRequestNotFoundError: If the request does not exist
            InvalidStatusTransitionError: If the request was never received
        """
        request = await self._get_request(parts_request_id)
        request.mark_installed(self._today())
        request = await self._persist(request)

        if request.corrective_task_id is not None:
            try:
                await self._lifecycle.complete_task(
                    request.corrective_task_id,
                    note=f"Parts installation completed: {request.part_name}",
                )
            except DomainError as e:
                logger.error(
                    "Parts installed but corrective task not completed",
                    parts_request_id=str(parts_request_id),
                    corrective_task_id=str(request.corrective_task_id),
                    error=e.message,
                )
                raise

        logger.info("Parts installed", parts_request_id=str(parts_request_id))
        return request
