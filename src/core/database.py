import logging

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger("recipes_finder.database")


class Base(DeclarativeBase):
    pass


class Database:
    """Store handle owned by the application.

    Holds the engine and the session factory. One instance is built by the
    app factory and shared through ``app.state.database``; every request
    opens its own ``AsyncSession`` from it.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            autocommit=False,
        )

    async def create_tables(self) -> None:
        # model modules must be imported so their tables are registered on Base
        import domains.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database tables ensured")

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request):
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        yield session
