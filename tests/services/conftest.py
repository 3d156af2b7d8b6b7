"""Service test fixtures — async DB, seeded users, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness check sees the test engine
    - Seeded users are created through AuthService, never through the client
      (the client's cookie jar starts empty)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from taskdesk.db.base import Base
import taskdesk.models  # noqa: F401
from taskdesk.infrastructure.database import (
    get_db, DatabaseSessionManager, enable_sqlite_foreign_keys,
)
from taskdesk.infrastructure.task_store import TaskStore
from taskdesk.services.auth_service import AuthService
from taskdesk.services.task_service import TaskService
import taskdesk.infrastructure.database as db_module
from taskdesk.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine.sync_engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def auth_service(test_db):
    return AuthService(test_db, session_ttl_hours=1, bcrypt_rounds=4)


@pytest.fixture
def task_service(test_db):
    return TaskService(TaskStore(test_db))


@pytest.fixture
async def alice(auth_service):
    """Registered user with an open session (IssuedSession)."""
    return await auth_service.register(
        "Alice", "alice@example.com", "alice-password",
    )


@pytest.fixture
async def bob(auth_service):
    return await auth_service.register(
        "Bob", "bob@example.com", "bob-password-123",
    )


def bearer(issued) -> dict:
    return {"Authorization": f"Bearer {issued.token}"}


@pytest.fixture
def alice_headers(alice):
    return bearer(alice)


@pytest.fixture
def bob_headers(bob):
    return bearer(bob)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
