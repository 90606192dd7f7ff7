"""Domain enums for maintenance tasks, parts and leave."""

from enum import Enum


class TaskStatus(str, Enum):
    """Task status enumeration. Values match the stored labels."""

    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    AWAITING_PARTS = "Awaiting Parts"
    PARTS_REQUIRED = "Parts Required"
    ON_HOLD = "On Hold"
    REQUIRES_FOLLOW_UP = "Requires Follow-up"

    @property
    def is_terminal(self) -> bool:
        """Check if task status is terminal."""
        return self == TaskStatus.COMPLETED

    @property
    def is_side_branch(self) -> bool:
        """Check if the status blocks work pending some outside condition."""
        return self in SIDE_BRANCH_STATUSES

    def can_transition_to(self, target_status: "TaskStatus") -> bool:
        """Check if task can transition from current status to target status."""
        return target_status in _TASK_TRANSITIONS.get(self, frozenset())


SIDE_BRANCH_STATUSES = frozenset(
    {
        TaskStatus.AWAITING_PARTS,
        TaskStatus.PARTS_REQUIRED,
        TaskStatus.ON_HOLD,
        TaskStatus.REQUIRES_FOLLOW_UP,
    }
)

_TASK_TRANSITIONS: dict[TaskStatus, frozenset[TaskStatus]] = {
    TaskStatus.OPEN: SIDE_BRANCH_STATUSES | {TaskStatus.IN_PROGRESS},
    TaskStatus.IN_PROGRESS: SIDE_BRANCH_STATUSES | {TaskStatus.COMPLETED},
    TaskStatus.AWAITING_PARTS: frozenset({TaskStatus.IN_PROGRESS}),
    TaskStatus.PARTS_REQUIRED: frozenset({TaskStatus.IN_PROGRESS}),
    TaskStatus.ON_HOLD: frozenset({TaskStatus.IN_PROGRESS}),
    TaskStatus.REQUIRES_FOLLOW_UP: frozenset({TaskStatus.IN_PROGRESS}),
    TaskStatus.COMPLETED: frozenset(),  # Terminal state
}


class TaskPriority(str, Enum):
    """Task priority with the weight used by the assignment scorer."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def weight(self) -> int:
        return {TaskPriority.HIGH: 3, TaskPriority.MEDIUM: 2, TaskPriority.LOW: 1}[
            self
        ]

    @classmethod
    def parse(cls, value: str | None) -> "TaskPriority":
        """Parse a stored priority label; anything unrecognized weighs as Low."""
        for priority in cls:
            if value == priority.value:
                return priority
        return cls.LOW


class Urgency(str, Enum):
    """Urgency of follow-up work and parts requests."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def days_to_due(self) -> int:
        """Default number of days until a corrective task is due."""
        return {
            Urgency.CRITICAL: 1,
            Urgency.HIGH: 2,
            Urgency.MEDIUM: 5,
            Urgency.LOW: 7,
        }[self]

    @property
    def task_priority(self) -> TaskPriority:
        """Critical has no task priority of its own and maps to High."""
        if self == Urgency.CRITICAL:
            return TaskPriority.HIGH
        return TaskPriority(self.value)


class PartsRequestStatus(str, Enum):
    """Parts request lifecycle."""

    REQUESTED = "Requested"
    ORDERED = "Ordered"
    RECEIVED = "Received"
    INSTALLED = "Installed"
    CANCELLED = "Cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in {PartsRequestStatus.INSTALLED, PartsRequestStatus.CANCELLED}

    def can_transition_to(self, target_status: "PartsRequestStatus") -> bool:
        valid_transitions = {
            PartsRequestStatus.REQUESTED: {
                PartsRequestStatus.ORDERED,
                PartsRequestStatus.RECEIVED,
                PartsRequestStatus.CANCELLED,
            },
            PartsRequestStatus.ORDERED: {
                PartsRequestStatus.RECEIVED,
                PartsRequestStatus.CANCELLED,
            },
            PartsRequestStatus.RECEIVED: {PartsRequestStatus.INSTALLED},
            PartsRequestStatus.INSTALLED: set(),  # Terminal state
            PartsRequestStatus.CANCELLED: set(),  # Terminal state
        }
        return target_status in valid_transitions.get(self, set())


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotificationType(str, Enum):
    TASK_ASSIGNED = "task_assigned"
    TASK_OVERDUE = "task_overdue"
    TASK_COMPLETED = "task_completed"
    GENERAL = "general"


class NotificationPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
