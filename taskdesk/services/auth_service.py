"""Auth Service — registration, login, logout, and session resolution.

Invariants:
    - Passwords hashed with bcrypt; plain passwords and raw tokens never logged or stored
    - Session tokens are opaque (secrets.token_urlsafe); only their sha256 digest is persisted
    - resolve_session is read-only: expired or unknown tokens raise UnauthorizedError
    - Unknown email and wrong password produce the same InvalidCredentialsError

Design Decisions:
    - Server-side session rows over signed stateless tokens: logout is a DELETE,
      no revocation list needed
    - register opens a session immediately so the client lands signed in
"""

import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.core.domain_types import AuthenticatedUser, UserId
from taskdesk.core.enforce_auth import check_name, check_password, normalize_email
from taskdesk.core.errors import (
    ConflictError, InvalidCredentialsError, UnauthorizedError,
)
from taskdesk.infrastructure.database import to_storage_error
from taskdesk.models.auth_session import AuthSession
from taskdesk.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedSession:
    """A freshly opened session. `token` is only ever available here."""
    user: AuthenticatedUser
    token: str
    expires_at: datetime


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(rounds=rounds),
    ).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def digest_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone=True columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_identity(user: User) -> AuthenticatedUser:
    return AuthenticatedUser(id=UserId(user.id), email=user.email, name=user.name)


class AuthService:
    """Account and session operations over one AsyncSession."""

    def __init__(
        self,
        db: AsyncSession,
        session_ttl_hours: int = 24 * 7,
        bcrypt_rounds: int = 12,
    ):
        self.db = db
        self.session_ttl = timedelta(hours=session_ttl_hours)
        self.bcrypt_rounds = bcrypt_rounds

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        user_agent: str | None = None,
    ) -> IssuedSession:
        """Create an account and open its first session."""
        clean_name = check_name(name)
        clean_email = normalize_email(email)
        check_password(password)

        existing = await self._find_user_by_email(clean_email)
        if existing:
            raise ConflictError(
                "Email is already registered", "EMAIL_ALREADY_REGISTERED",
            )

        user = User(
            email=clean_email,
            name=clean_name,
            password_hash=hash_password(password, self.bcrypt_rounds),
        )
        try:
            self.db.add(user)
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(
                "Email is already registered", "EMAIL_ALREADY_REGISTERED",
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e)

        issued = await self._open_session(user, user_agent)
        logger.info("User registered", extra={"user_id": user.id})
        return issued

    async def login(
        self, email: str, password: str, user_agent: str | None = None,
    ) -> IssuedSession:
        user = await self._find_user_by_email(normalize_email(email))
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Login rejected")
            raise InvalidCredentialsError()
        issued = await self._open_session(user, user_agent)
        logger.info("User logged in", extra={"user_id": user.id})
        return issued

    async def logout(self, token: str) -> None:
        """Delete the session behind `token`. Unknown tokens are a no-op."""
        try:
            await self.db.execute(
                delete(AuthSession).where(
                    AuthSession.token_hash == digest_token(token),
                ),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e)

    async def resolve_session(self, token: str | None) -> AuthenticatedUser:
        """Map a bearer token to the user it authenticates."""
        if not token:
            raise UnauthorizedError()
        try:
            result = await self.db.execute(
                select(AuthSession, User)
                .join(User, AuthSession.user_id == User.id)
                .where(AuthSession.token_hash == digest_token(token))
                .execution_options(populate_existing=True),
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e)
        row = result.first()
        if row is None:
            raise UnauthorizedError("Session not found")
        auth_session, user = row
        if _as_utc(auth_session.expires_at) <= datetime.now(timezone.utc):
            raise UnauthorizedError("Session expired")
        return _to_identity(user)

    async def _find_user_by_email(self, email: str) -> User | None:
        try:
            result = await self.db.execute(select(User).where(User.email == email))
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e)
        return result.scalar_one_or_none()

    async def _open_session(
        self, user: User, user_agent: str | None,
    ) -> IssuedSession:
        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(timezone.utc) + self.session_ttl
        auth_session = AuthSession(
            token_hash=digest_token(token),
            user_id=user.id,
            expires_at=expires_at,
            user_agent=user_agent[:500] if user_agent else None,
        )
        try:
            self.db.add(auth_session)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e)
        return IssuedSession(
            user=_to_identity(user), token=token, expires_at=expires_at,
        )
