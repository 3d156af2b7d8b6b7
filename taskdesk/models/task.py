"""Task ORM — a to-do item owned by exactly one user.

Invariants:
    - id is UUID primary key, generated at creation, immutable
    - title is non-nullable text (1-100 chars enforced in core/enforce_task.py)
    - status is one of TaskStatus values, default "todo"
    - user_id is non-nullable; task is destroyed with its owner (ON DELETE CASCADE)
    - created_at set once; listing sorts on it descending

Design Decisions:
    - status stored as String(20), not a DB enum: migrations stay dialect-neutral,
      the closed set is enforced by TaskStatus at the boundary
    - Composite index (user_id, created_at) backs the only list query
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from taskdesk.core.domain_types import TaskStatus
from taskdesk.db.base import Base


class Task(Base):
    """Task entity."""
    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_user_id_created_at", "user_id", "created_at"),
        CheckConstraint(
            "status IN ('todo', 'in_progress', 'done')",
            name="ck_tasks_status",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskStatus.TODO.value,
    )
    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    owner: Mapped["User"] = relationship("User", back_populates="tasks")
