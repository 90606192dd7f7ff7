"""
Domain Exceptions

Custom exceptions for domain-specific errors. Each carries an error type so the
API layer and the scheduled runner can discriminate failures without string
matching.
"""

from enum import Enum
from uuid import UUID


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    CONSTRAINT_VIOLATION = "constraint_violation"
    NOT_FOUND = "not_found"
    REPOSITORY = "repository"
    CONFIGURATION = "configuration"
    NOTIFICATION = "notification"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when domain validation rules are violated."""

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
    ) -> None:
        self.field_name = field_name
        self.value = value
        details = {
            "field": field_name,
            "value": str(value) if value is not None else None,
        }
        super().__init__(
            f"Validation failed for field '{field_name}': {message}",
            ErrorType.VALIDATION,
            details,
        )


class BusinessRuleError(DomainError):
    """Raised when business rules are violated."""

    def __init__(
        self, message: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(message, ErrorType.BUSINESS_RULE, details)


class ConstraintViolationError(DomainError):
    """Raised when scheduling constraints are violated."""

    def __init__(
        self, message: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(message, ErrorType.CONSTRAINT_VIOLATION, details)


class InvalidStatusTransitionError(BusinessRuleError):
    """Raised when a task or parts request is moved to an illegal status."""

    def __init__(self, entity_type: str, entity_id: UUID, current: str, target: str):
        details = {
            "entity_type": entity_type,
            "entity_id": str(entity_id),
            "current_status": current,
            "target_status": target,
        }
        super().__init__(
            f"Cannot move {entity_type} {entity_id} from '{current}' to '{target}'",
            details,
        )
        self.current = current
        self.target = target


class CapacityExceededError(ConstraintViolationError):
    """Raised when an engineer would be loaded past the capacity ceiling."""

    def __init__(self, engineer_id: UUID, capacity: int) -> None:
        details = {"engineer_id": str(engineer_id), "capacity": capacity}
        super().__init__(
            f"Engineer {engineer_id} is already at capacity ({capacity} tasks)",
            details,
        )
        self.engineer_id = engineer_id


class EntityNotFoundError(DomainError):
    """Base class for lookups that found nothing."""

    def __init__(self, entity_type: str, entity_id: UUID | str) -> None:
        details = {"entity_type": entity_type, f"{entity_type}_id": str(entity_id)}
        super().__init__(
            f"{entity_type.replace('_', ' ').capitalize()} not found: {entity_id}",
            ErrorType.NOT_FOUND,
            details,
        )
        self.entity_id = entity_id


class TaskNotFoundError(EntityNotFoundError):
    """Raised when a task is not found."""

    def __init__(self, task_id: UUID | str) -> None:
        super().__init__("task", task_id)


class EngineerNotFoundError(EntityNotFoundError):
    """Raised when an engineer is not found."""

    def __init__(self, engineer_id: UUID | str) -> None:
        super().__init__("engineer", engineer_id)


class PartsRequestNotFoundError(EntityNotFoundError):
    """Raised when a parts request is not found."""

    def __init__(self, parts_request_id: UUID | str) -> None:
        super().__init__("parts_request", parts_request_id)


class RepositoryError(DomainError):
    """Raised when the data store cannot be read or written."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        repo_details = details or {}
        repo_details["operation"] = operation
        super().__init__(f"{operation} failed: {message}", ErrorType.REPOSITORY, repo_details)
        self.operation = operation


class ConfigurationError(DomainError):
    """Raised when required configuration is missing."""

    def __init__(self, setting: str) -> None:
        super().__init__(
            f"Missing required setting: {setting}",
            ErrorType.CONFIGURATION,
            {"setting": setting},
        )


class NotificationDeliveryError(DomainError):
    """Raised by gateways when a notification could not be delivered."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(
            message, ErrorType.NOTIFICATION, {"status_code": status_code}
        )
        self.status_code = status_code
