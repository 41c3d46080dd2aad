import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .base import Base
from ..config import Settings
from ..core.exceptions import PortfolioError

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    options = {"pool_pre_ping": True}
    if not settings.is_sqlite:
        options["pool_size"] = settings.DB_POOL_SIZE
    return create_async_engine(settings.DATABASE_URL, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, autoflush=False, expire_on_commit=False)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    session_factory = request.app.state.session_factory
    async with session_factory() as db:
        try:
            yield db
        except PortfolioError:
            await db.rollback()
            raise
        except SQLAlchemyError as e:
            logger.error(f"Database error: {e}")
            await db.rollback()
            raise
        except Exception as e:
            logger.error(f"Unexpected error in database session: {e}")
            await db.rollback()
            raise


async def create_tables(engine: AsyncEngine) -> None:
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created successfully")
