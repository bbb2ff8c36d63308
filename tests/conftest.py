"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, app/client built on a throwaway
SQLite file, signup/login helpers, service mocks
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest

TEST_SECRET = "test-session-secret"
DEFAULT_PASSWORD = "hunter2"


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from blogger.boundary.db.base import Base

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_settings(tmp_path):
    """
    Build Settings pointing at a per-test SQLite file.

    Returns:
        Callable: ``make_settings(**blog_overrides)`` -> Settings
    """
    from blogger.configs import Settings
    from blogger.configs.blog import BlogSettings
    from blogger.configs.database import DatabaseSettings
    from blogger.configs.session import SessionSettings

    def _make(session_max_age: int = 60, **blog_overrides) -> Settings:
        return Settings(
            log_level="WARNING",
            database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}"),
            session=SessionSettings(secret_key=TEST_SECRET, max_age=session_max_age),
            blog=BlogSettings(**blog_overrides),
        )

    return _make


@pytest.fixture
def settings(make_settings):
    """Default settings for the end-to-end tests."""
    return make_settings()


@pytest.fixture
def app(settings):
    """Application wired to the test settings (lifespan not started)."""
    from blogger.main import create_app

    return create_app(settings)


@pytest.fixture
def client(app):
    """
    TestClient with the lifespan running, so tables exist.

    Redirects are not followed so handlers' 302s can be asserted.
    """
    from fastapi.testclient import TestClient

    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def signup():
    """
    Sign up through the HTML form endpoint.

    Returns:
        Callable: ``signup(client, email, password)`` -> Response
    """

    def _signup(client, email: str, password: str = DEFAULT_PASSWORD):
        return client.post(
            "/users",
            data={"user[email]": email, "user[password]": password},
        )

    return _signup


@pytest.fixture
def login():
    """
    Log in through the HTML form endpoint.

    Returns:
        Callable: ``login(client, email, password)`` -> Response
    """

    def _login(client, email: str, password: str = DEFAULT_PASSWORD):
        return client.post(
            "/login",
            data={"user[email]": email, "user[password]": password},
        )

    return _login


@pytest.fixture
def mock_post_service():
    """Mocked PostService with async methods."""
    return AsyncMock()


@pytest.fixture
def mock_author_service():
    """Mocked AuthorService with async methods."""
    return AsyncMock()
