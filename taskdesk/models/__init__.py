"""ORM Models — SQLAlchemy declarative models for users, sessions, and tasks.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root; tasks and auth sessions are scoped by user_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from taskdesk.models.user import User  # noqa: F401
from taskdesk.models.auth_session import AuthSession  # noqa: F401
from taskdesk.models.task import Task  # noqa: F401
