"""Task Schemas — Pydantic models with field-level validation for the task API.

Invariants:
    - TaskCreate.title: 1-100 raw chars, not whitespace-only, never rewritten
    - TaskCreate has no user_id/status fields; extra keys are ignored
    - TaskStatusUpdate.status is a closed TaskStatus enum
    - TaskResponse.created_at is always UTC-aware

Design Decisions:
    - field_validator checks only, no transforms: stored values match the request
    - TaskResponse reads ORM rows via from_attributes
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskdesk.core.domain_types import TaskStatus
from taskdesk.core.enforce_task import TITLE_MAX_LENGTH


class TaskCreate(BaseModel):
    """Task creation. Owner and status are never taken from the body."""
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = None

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class TaskResponse(BaseModel):
    """Public task shape."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None
    status: TaskStatus
    user_id: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes even for timezone=True columns
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class MutationResult(BaseModel):
    success: bool
