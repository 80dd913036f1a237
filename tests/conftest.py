"""Pytest configuration and fixtures for the projects service.

Uses app.main:app for HTTP tests and app.infrastructure.persistence for
DB-dependent fixtures. All imports use app.*.
"""

from collections.abc import AsyncIterator, Iterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from app.application.dtos.project import ProjectCreate
from app.core.config import get_settings
from app.core.limiter import limiter
from app.domain.value_objects.core import SharedEmailVariant
from app.infrastructure.persistence import models  # noqa: F401  (registers tables)
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models import Project, ProjectUser
from app.infrastructure.services.project_graph_builder import ProjectGraphBuilder
from app.main import app

TEST_CREATE_PROJECT_SECRET = "test-create-project-secret"


@pytest.fixture(autouse=True)
def _disable_rate_limits() -> None:
    limiter.enabled = False


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def create_project_secret(monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """Configure CREATE_PROJECT_SECRET for the test and return it."""
    monkeypatch.setenv("CREATE_PROJECT_SECRET", TEST_CREATE_PROJECT_SECRET)
    get_settings.cache_clear()
    yield TEST_CREATE_PROJECT_SECRET
    get_settings.cache_clear()


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL (PostgreSQL). Skips when it is not configured. The
    session joins an outer transaction through savepoints, so commits made by
    code under test are discarded at teardown. Use @pytest.mark.requires_db;
    run without DB via: pytest -m 'not requires_db'.
    """
    settings = get_settings()
    if not settings.database_url:
        pytest.skip("Postgres not configured: set DATABASE_URL")
    engine = create_async_engine(settings.database_url, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with engine.connect() as conn:
        outer = await conn.begin()
        session = AsyncSession(
            bind=conn,
            join_transaction_mode="create_savepoint",
            expire_on_commit=False,
            autoflush=False,
        )
        try:
            yield session
        finally:
            await session.close()
            await outer.rollback()
    await engine.dispose()


async def ensure_internal_project(session: AsyncSession) -> str:
    """Create the internal project (owner namespace) if missing; return its id."""
    internal_id = get_settings().internal_project_id
    if await session.get(Project, internal_id) is None:
        project = ProjectGraphBuilder().build_project(
            internal_id,
            ProjectCreate(display_name="Internal"),
            [],
            SharedEmailVariant(),
        )
        session.add(project)
        await session.flush()
    return internal_id


async def add_owner_user(
    session: AsyncSession, user_id: str, server_metadata: dict | None = None
) -> ProjectUser:
    """Insert a user of the internal project."""
    internal_id = await ensure_internal_project(session)
    user = ProjectUser(
        project_id=internal_id,
        project_user_id=user_id,
        server_metadata=server_metadata,
    )
    session.add(user)
    await session.flush()
    return user
