"""Test configuration and fixtures.

Each test gets its own in-memory SQLite database:
1. A fresh engine is created and the schema built from the model metadata
2. One AsyncSession is shared between the test and the FastAPI endpoints
3. The engine is disposed after the test, discarding all data
"""

import os
from collections.abc import AsyncGenerator

# Settings are read at import time, so the environment must be set first.
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("POLKA_KEY", "test-polka-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from chirpy.database.base import Base  # noqa: E402
from chirpy.database.dependencies import get_db_session  # noqa: E402
from chirpy.features.admin.metrics import ApiMetrics  # noqa: E402
from chirpy.features.auth.jwt_utils import issue_access_token  # noqa: E402
from chirpy.features.user.models import User  # noqa: E402
from chirpy.main import app  # noqa: E402

TEST_PASSWORD = "04234"


# Database Setup - Function Scope


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory database with the full schema for one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,  # one shared connection, so the in-memory database survives
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create the database session used by the test and by every request it makes."""
    async with AsyncSession(db_engine, expire_on_commit=False) as async_session:
        yield async_session


# Mock Database Initialization


@pytest.fixture(autouse=True)
def mock_db_initialization(monkeypatch):
    """Mock init_db and close_db so lifespan doesn't interfere with tests."""
    from chirpy.database import client as db_module

    async def mock_init_db():
        pass

    async def mock_close_db():
        pass

    monkeypatch.setattr(db_module, "init_db", mock_init_db)
    monkeypatch.setattr(db_module, "close_db", mock_close_db)


# FastAPI Client & Dependency Overrides


@pytest_asyncio.fixture(autouse=True)
async def override_get_db_session(session: AsyncSession):
    """Override the database session dependency with the test session."""

    async def _get_test_session():
        yield session

    app.dependency_overrides[get_db_session] = _get_test_session
    yield
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def fresh_metrics():
    """Give every test a zeroed hit counter."""
    app.state.metrics = ApiMetrics()
    return app.state.metrics


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create an async HTTP test client (unauthenticated)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# Test User Factories


@pytest_asyncio.fixture
async def make_user(session: AsyncSession):
    """Factory fixture to create test users.

    Usage:
        user = await make_user()                              # defaults
        user = await make_user(email="a@example.com", password="pw")
        red = await make_user(is_chirpy_red=True)
    """
    counter = 0

    async def _factory(email=None, password=TEST_PASSWORD, **kwargs) -> User:
        nonlocal counter
        counter += 1

        if email is None:
            email = f"testuser{counter}@example.com"

        user = User(email=email, hashed_password=User.hash_password(password), **kwargs)
        session.add(user)
        await session.flush()
        await session.refresh(user)
        return user

    yield _factory


@pytest.fixture
def bearer():
    """Build an Authorization header for a token."""

    def _bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _bearer


@pytest.fixture
def access_token_for():
    """Issue a valid one-hour access token for a user without going through login."""
    from chirpy.config.settings import settings

    def _issue(user: User, lifetime_seconds: int = 3600) -> str:
        return issue_access_token(str(user.id), lifetime_seconds, settings.jwt_secret)

    return _issue
