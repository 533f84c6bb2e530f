import logging

from sqlalchemy import Table, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from chatstore.models import Base, User, Chat, ChatUser
from chatstore.schemas.result import OperationResult, StoreStatus

logger = logging.getLogger(__name__)


class SchemaManager:
    """Creates the userinfo, chats and chatusers tables.

    Table creation is not idempotent: asking for a table that is already
    present is reported as ALREADY_EXISTS rather than silently skipped.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def table_exists(self, name: str) -> bool:
        try:
            return await self._has_table(name)
        except SQLAlchemyError as e:
            logger.error("Couldn't inspect the table '%s': %s", name, e)
            return False

    async def create_user_table(self) -> OperationResult:
        return await self._create_table(User.__table__)

    async def create_chat_tables(self) -> OperationResult:
        result = await self._create_table(Chat.__table__)
        if not result:
            return result
        return await self._create_table(ChatUser.__table__)

    async def create_all(self) -> OperationResult:
        """Create whichever tables are missing."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error("Couldn't create the schema: %s", e)
            return OperationResult.failure(StoreStatus.EXECUTION_FAILED, str(e))
        return OperationResult.success()

    async def _has_table(self, name: str) -> bool:
        async with self.engine.connect() as conn:
            return await conn.run_sync(lambda sync_conn: inspect(sync_conn).has_table(name))

    async def _create_table(self, table: Table) -> OperationResult:
        try:
            if await self._has_table(table.name):
                logger.warning("Couldn't create the table '%s': it already exists", table.name)
                return OperationResult.failure(
                    StoreStatus.ALREADY_EXISTS, f"table '{table.name}' already exists"
                )
            async with self.engine.begin() as conn:
                await conn.run_sync(table.create)
        except SQLAlchemyError as e:
            logger.error("Couldn't create the table '%s': %s", table.name, e)
            return OperationResult.failure(StoreStatus.EXECUTION_FAILED, str(e))

        logger.info("Created table '%s'", table.name)
        return OperationResult.success()
