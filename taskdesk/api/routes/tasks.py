"""Task Routes — HTTP surface of the task service.

Invariants:
    - Every route depends on get_current_user; no handler body runs unauthenticated
    - Mutations respond only after commit (no client-side optimistic contract)
    - Invalid bodies are rejected by pydantic before the service is called
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from taskdesk.api.deps import get_current_user, get_task_service
from taskdesk.core.domain_types import AuthenticatedUser, TaskId
from taskdesk.schemas.task import (
    MutationResult, TaskCreate, TaskResponse, TaskStatusUpdate,
)
from taskdesk.services.task_service import TaskService

router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    user: AuthenticatedUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """List the caller's tasks, newest first."""
    return await service.list_tasks(user)


@router.post(
    "", response_model=TaskResponse, status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    return await service.create_task(user, body.title, body.description)


@router.patch("/{task_id}/status", response_model=MutationResult)
async def update_task_status(
    task_id: UUID,
    body: TaskStatusUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    return await service.update_task_status(user, TaskId(task_id), body.status)


@router.delete("/{task_id}", response_model=MutationResult)
async def delete_task(
    task_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    return await service.delete_task(user, TaskId(task_id))
