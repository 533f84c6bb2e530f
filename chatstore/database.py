import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from chatstore.config import settings

logger = logging.getLogger(__name__)


class Database:
    """Store handle: one async engine and its session factory.

    Constructed once by the caller and passed to whoever needs sessions;
    ``close()`` disposes the engine.
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or settings.DATABASE_URL
        self.engine: AsyncEngine = create_async_engine(
            self.url, echo=settings.DEBUG if echo is None else echo
        )
        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )
        self._open = True
        logger.debug("Opened store at %s", self.url)

    @property
    def is_open(self) -> bool:
        return self._open

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            try:
                yield session
            finally:
                await session.close()

    async def close(self) -> None:
        if not self._open:
            return
        await self.engine.dispose()
        self._open = False
        logger.debug("Closed store at %s", self.url)
