"""
WorkloadTracker Domain Service

Per-run record of how many tasks each engineer holds on the reference date.
"""

from collections.abc import Mapping
from uuid import UUID

from ....core.observability import get_logger
from ...shared.exceptions import CapacityExceededError

logger = get_logger(__name__)

DEFAULT_CAPACITY_CEILING = 8


class WorkloadTracker:
    """
    Tracks engineer load during one optimizer run.

    Starts from the loads already in the store and grows as tasks are
    committed, so capacity used earlier in the run counts against later tasks.
    """

    def __init__(
        self,
        capacity_ceiling: int = DEFAULT_CAPACITY_CEILING,
        initial_loads: Mapping[UUID, int] | None = None,
    ):
        if capacity_ceiling <= 0:
            raise ValueError("capacity_ceiling must be positive")
        self.capacity_ceiling = capacity_ceiling
        self._loads: dict[UUID, int] = dict(initial_loads or {})
        self._assigned: dict[UUID, int] = {}

    def current_load(self, engineer_id: UUID) -> int:
        return self._loads.get(engineer_id, 0)

    def has_capacity(self, engineer_id: UUID) -> bool:
        return self.current_load(engineer_id) < self.capacity_ceiling

    def increment(self, engineer_id: UUID) -> int:
        """
        Record one more task for an engineer.

        Returns:
            The new load

        Raises:
            CapacityExceededError: If the engineer is already at the ceiling
        """
        if not self.has_capacity(engineer_id):
            raise CapacityExceededError(engineer_id, self.capacity_ceiling)
        self._loads[engineer_id] = self.current_load(engineer_id) + 1
        self._assigned[engineer_id] = self._assigned.get(engineer_id, 0) + 1
        logger.debug(
            "Workload incremented",
            engineer_id=str(engineer_id),
            load=self._loads[engineer_id],
        )
        return self._loads[engineer_id]

    def assigned_this_run(self, engineer_id: UUID) -> int:
        return self._assigned.get(engineer_id, 0)

    def snapshot(self) -> dict[UUID, int]:
        """Copy of the current loads."""
        return dict(self._loads)
