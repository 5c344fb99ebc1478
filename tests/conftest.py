"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator

# Keep the application engine off PostgreSQL during tests; the session it
# would hand out is replaced by the db_session fixture anyway.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from product_catalog.database import get_db
from product_catalog.main import app
from product_catalog.models.product import Product  # noqa: F401
from product_catalog.services.product_service import ProductService


@pytest.fixture
async def test_engine(tmp_path):
    """Create a test database engine backed by a fresh SQLite file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        future=True,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for each test."""
    async_session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session_factory() as session:
        yield session


@pytest.fixture
def service(db_session: AsyncSession) -> ProductService:
    """Provide a ProductService bound to the test session."""
    return ProductService(db_session)


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    # Unhandled errors must come back as the 500 response the app built,
    # not be re-raised into the test
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
