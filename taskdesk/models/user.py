"""User ORM — account identity that owns tasks and auth sessions.

Invariants:
    - id is an opaque string (uuid4 hex), generated at registration, never mutated
    - email is unique and stored lower-cased
    - password_hash holds a bcrypt hash; the plain password is never persisted

Design Decisions:
    - String id instead of UUID: task rows reference users through a text FK
    - ORM cascade mirrors the ON DELETE CASCADE on tasks/auth_sessions FKs
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskdesk.db.base import Base


class User(Base):
    """Registered account."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: uuid.uuid4().hex,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="owner",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    sessions: Mapped[list["AuthSession"]] = relationship(
        "AuthSession", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True,
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
