# app/db/database.py
from typing import AsyncGenerator

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings
from app.db.base_class import Base

logger = structlog.get_logger(__name__)

engine = create_async_engine(settings.ASYNC_DATABASE_URL, pool_pre_ping=True)

# expire_on_commit=False: objects returned by CRUD stay readable after the commit in get_async_db
AsyncSessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency: one session per request.
    Commits if the endpoint finished without errors, otherwise rolls back.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_models() -> None:
    """Create all tables (used when running without Alembic)."""
    from app.db import models # noqa: F401  registers the models on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_tables_created")
