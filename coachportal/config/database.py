from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from coachportal.config.settings import settings

_ASYNC_SCHEMES = {
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


def get_async_database_url(url: str) -> str:
    """Point plain Postgres URLs at the asyncpg driver; other URLs pass through."""
    for prefix, async_prefix in _ASYNC_SCHEMES.items():
        if url.startswith(prefix):
            return async_prefix + url[len(prefix):]
    return url


def _engine_options(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_pre_ping": True,
    }


_database_url = get_async_database_url(settings.DATABASE_URL)
engine = create_async_engine(_database_url, echo=settings.DEBUG, **_engine_options(_database_url))

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Session per request for the workout and trainer routers."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db() -> None:
    """Create the workout and assignment tables if they are missing."""
    from coachportal.domains import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
