"""Database configuration and session management"""
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.exc import SQLAlchemyError
from typing import AsyncGenerator
import logging

from estate_listings.config import settings

logger = logging.getLogger(__name__)


# Create async engine
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
)

# Create async session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get a database session for one request"""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            if isinstance(e, SQLAlchemyError):
                logger.error(f"Rolling back request session: {e}")
            await session.rollback()
            raise


async def init_db() -> None:
    """Create database tables"""
    # Models must be registered on Base.metadata before create_all
    import estate_listings.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Close database connections"""
    await engine.dispose()
