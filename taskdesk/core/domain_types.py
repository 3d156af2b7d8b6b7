"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the auth-owned string id; TaskId wraps the task UUID
    - TaskStatus is closed: exactly todo, in_progress, done
    - AuthenticatedUser is immutable once the auth gate resolves it

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for TaskStatus: serializes to JSON and stores as plain text
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
TaskId = NewType("TaskId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task workflow states. Maps to DB `status` column. Any→any is allowed."""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


# ─── Resolved identity ───────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity produced by the auth gate and passed explicitly to services."""
    id: UserId
    email: str
    name: str
