"""Boundary Protocols — contracts between the task service and storage.

Invariants:
    - Services depend on TaskRepository, never on the ORM session directly
    - Every mutation is filtered by owner; row counts report what matched

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from datetime import datetime
from typing import Protocol, Sequence

from taskdesk.core.domain_types import TaskId, TaskStatus, UserId


class TaskLike(Protocol):
    """Structural contract for persisted tasks handed back by a repository."""
    id: TaskId
    title: str
    description: str | None
    status: str
    user_id: str
    created_at: datetime


class TaskRepository(Protocol):
    """Contract for task persistence, implemented by infrastructure/task_store.py."""
    async def insert(
        self, user_id: UserId, title: str, description: str | None,
    ) -> TaskLike: ...
    async def select_by_owner(self, user_id: UserId) -> Sequence[TaskLike]: ...
    async def update_status(
        self, task_id: TaskId, user_id: UserId, status: TaskStatus,
    ) -> int: ...
    async def delete(self, task_id: TaskId, user_id: UserId) -> int: ...
