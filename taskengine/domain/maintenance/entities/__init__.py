from .engineer import MANAGER_ROLES, VIEWER_ROLE, Engineer
from .parts_request import PartsRequest
from .task import CORRECTIVE_MAINTENANCE, Task

__all__ = [
    "CORRECTIVE_MAINTENANCE",
    "Engineer",
    "MANAGER_ROLES",
    "PartsRequest",
    "Task",
    "VIEWER_ROLE",
]
