"""Database engine and session configuration."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from product_catalog.core.config import get_settings

settings = get_settings()

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    future=True,
)

# Objects stay readable after commit; services return them to the API layer
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides one session per request.

    ProductService opens and commits its own transactions; this only
    manages the session's lifetime.
    """
    async with async_session_factory() as session:
        yield session


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    await engine.dispose()
