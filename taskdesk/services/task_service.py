"""Task Service — list, create, update-status, delete for the authenticated caller.

Invariants:
    - Every operation takes the caller's AuthenticatedUser as an explicit argument
    - create_task forces status=todo and user_id=caller; caller input cannot override
    - list_tasks returns only the caller's tasks, newest first
    - update/delete are owner-scoped; a task owned by someone else is reported
      as not found, exactly like a missing id
    - No retries: StorageError from the repository propagates unchanged

Design Decisions:
    - Validation runs in core/enforce_task.py before any storage call, so a
      rejected input never touches the database
"""

import logging
from typing import Sequence

from taskdesk.core.domain_types import AuthenticatedUser, TaskId, TaskStatus
from taskdesk.core.enforce_task import (
    check_title, normalize_description, parse_status,
)
from taskdesk.core.errors import ErrorContext, ResourceNotFoundError
from taskdesk.core.repository_protocols import TaskLike, TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Per-user task operations over a TaskRepository."""

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    async def list_tasks(self, user: AuthenticatedUser) -> Sequence[TaskLike]:
        return await self.repository.select_by_owner(user.id)

    async def create_task(
        self,
        user: AuthenticatedUser,
        title: str,
        description: str | None = None,
    ) -> TaskLike:
        """Validate and persist a new task owned by the caller."""
        clean_title = check_title(title)
        task = await self.repository.insert(
            user.id, clean_title, normalize_description(description),
        )
        logger.info(
            "Task created", extra={"user_id": user.id, "task_id": task.id},
        )
        return task

    async def update_task_status(
        self,
        user: AuthenticatedUser,
        task_id: TaskId,
        status: TaskStatus | str,
    ) -> dict:
        """Set status on one of the caller's tasks. Any→any is permitted."""
        new_status = parse_status(status)
        affected = await self.repository.update_status(task_id, user.id, new_status)
        if not affected:
            self._raise_not_found(user, task_id, "update_status")
        logger.info(
            f"Task status set to {new_status.value}",
            extra={"user_id": user.id, "task_id": task_id},
        )
        return {"success": True}

    async def delete_task(self, user: AuthenticatedUser, task_id: TaskId) -> dict:
        affected = await self.repository.delete(task_id, user.id)
        if not affected:
            self._raise_not_found(user, task_id, "delete")
        logger.info("Task deleted", extra={"user_id": user.id, "task_id": task_id})
        return {"success": True}

    @staticmethod
    def _raise_not_found(
        user: AuthenticatedUser, task_id: TaskId, operation: str,
    ) -> None:
        logger.warning(
            f"Task {operation} matched no owned row",
            extra={"user_id": user.id, "task_id": task_id},
        )
        raise ResourceNotFoundError(
            "Task", str(task_id),
            context=ErrorContext(user_id=user.id, task_id=str(task_id)),
        )
