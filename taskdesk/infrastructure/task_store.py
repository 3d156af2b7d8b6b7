"""Task Store — SQLAlchemy implementation of the TaskRepository protocol.

Invariants:
    - insert returns the fully populated row (id + created_at filled)
    - update_status/delete filter on primary key AND owner; return rows affected
    - select_by_owner orders by created_at descending
    - Each mutation commits its own statement; failures roll back and raise StorageError

Design Decisions:
    - Bulk UPDATE/DELETE statements over load-then-mutate: one round-trip,
      last-write-wins left to the database
    - populate_existing on reads: rows already in the identity map are
      overwritten with what the database holds now
"""

import logging
from typing import Sequence

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.core.domain_types import TaskId, TaskStatus, UserId
from taskdesk.infrastructure.database import to_storage_error
from taskdesk.models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Persistence for Task rows, scoped by owner."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self, user_id: UserId, title: str, description: str | None,
    ) -> Task:
        task = Task(
            title=title,
            description=description,
            status=TaskStatus.TODO.value,
            user_id=user_id,
        )
        try:
            self.db.add(task)
            await self.db.commit()
            await self.db.refresh(task)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e)
        return task

    async def select_by_owner(self, user_id: UserId) -> Sequence[Task]:
        try:
            result = await self.db.execute(
                select(Task)
                .where(Task.user_id == user_id)
                .order_by(Task.created_at.desc())
                .execution_options(populate_existing=True),
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e)
        return result.scalars().all()

    async def update_status(
        self, task_id: TaskId, user_id: UserId, status: TaskStatus,
    ) -> int:
        stmt = (
            update(Task)
            .where(Task.id == task_id)
            .where(Task.user_id == user_id)
            .values(status=status.value)
        )
        return await self._execute_mutation(stmt)

    async def delete(self, task_id: TaskId, user_id: UserId) -> int:
        stmt = (
            delete(Task)
            .where(Task.id == task_id)
            .where(Task.user_id == user_id)
        )
        return await self._execute_mutation(stmt)

    async def _execute_mutation(self, stmt) -> int:
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e)
        return result.rowcount
