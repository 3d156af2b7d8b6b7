"""Request Dependencies — auth gate and service factories for route handlers.

Invariants:
    - get_current_user runs before any task route body; on failure the route never executes
    - Token source precedence: Authorization: Bearer header, then session cookie
    - Services are built per request around the request's AsyncSession
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.config import get_settings
from taskdesk.core.domain_types import AuthenticatedUser
from taskdesk.core.errors import UnauthorizedError
from taskdesk.infrastructure.database import get_db
from taskdesk.infrastructure.task_store import TaskStore
from taskdesk.services.auth_service import AuthService
from taskdesk.services.task_service import TaskService

logger = logging.getLogger(__name__)


def extract_token(request: Request) -> str | None:
    """Pull the session token from the bearer header or the session cookie."""
    header = request.headers.get("authorization")
    if header:
        scheme, _, credentials = header.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return request.cookies.get(get_settings().session_cookie_name)


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    settings = get_settings()
    return AuthService(
        db,
        session_ttl_hours=settings.session_ttl_hours,
        bcrypt_rounds=settings.bcrypt_rounds,
    )


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(TaskStore(db))


async def get_current_user(
    request: Request, auth: AuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """Auth gate: resolve the request's session or reject with 401."""
    try:
        return await auth.resolve_session(extract_token(request))
    except UnauthorizedError:
        logger.warning(
            "Rejected unauthenticated request",
            extra={"path": request.url.path},
        )
        raise
