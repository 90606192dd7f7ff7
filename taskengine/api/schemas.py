"""Request bodies for the task engine API."""

from datetime import date

from pydantic import BaseModel, Field

from ..domain.maintenance.value_objects import TaskStatus, Urgency


class AssignmentRunRequest(BaseModel):
    reference_date: date | None = None


class StatusChangeRequest(BaseModel):
    status: TaskStatus
    reason: str | None = None
    assign_to_original_engineer: bool = False
    urgency: Urgency = Urgency.MEDIUM


class CorrectiveTaskRequest(BaseModel):
    reason: str = Field(min_length=1)
    urgency: Urgency = Urgency.MEDIUM
    assign_to_original_engineer: bool = False
    days_from_now: int | None = Field(default=None, ge=0)
    additional_notes: str | None = None


class ErrorResponse(BaseModel):
    type: str
    message: str
    details: dict = Field(default_factory=dict)
