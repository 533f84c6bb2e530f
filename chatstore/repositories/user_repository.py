import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from sqlalchemy.exc import SQLAlchemyError

from chatstore.models.user import User
from chatstore.schemas.result import OperationResult, StoreStatus

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_username(self, username: str) -> Optional[User]:
        try:
            result = await self.db.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("User '%s' could not be retrieved: %s", username, e)
            return None

    async def user_exists(self, username: str) -> bool:
        """True if a userinfo row has this username."""
        try:
            return await self._has_user(username)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("userExists query failed for '%s': %s", username, e)
            return False

    async def add_user(self, username: str, password: str) -> OperationResult:
        """Register a user; the password is stored as given."""
        try:
            taken = await self._has_user(username)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("addUser lookup failed for '%s': %s", username, e)
            return OperationResult.failure(StoreStatus.EXECUTION_FAILED, str(e))

        if taken:
            logger.warning("addUser: user '%s' already exists", username)
            return OperationResult.failure(
                StoreStatus.ALREADY_EXISTS, f"user '{username}' already exists"
            )

        self.db.add(User(username=username, password=password))
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("addUser error for '%s': %s", username, e)
            return OperationResult.failure(StoreStatus.EXECUTION_FAILED, str(e))

        logger.info("Added user '%s'", username)
        return OperationResult.success()

    async def check_user_info(self, username: str, password: str) -> OperationResult:
        """Verify a username/password pair by exact, case-sensitive match."""
        try:
            known = await self._has_user(username)
            if known:
                result = await self.db.execute(
                    select(User.username).where(
                        and_(User.username == username, User.password == password)
                    )
                )
                match = result.first()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("checkUserInfo query failed for '%s': %s", username, e)
            return OperationResult.failure(StoreStatus.EXECUTION_FAILED, str(e))

        if not known:
            logger.warning("checkUserInfo: user '%s' does not exist", username)
            return OperationResult.failure(
                StoreStatus.NOT_FOUND, f"user '{username}' does not exist"
            )

        if match is None:
            return OperationResult.failure(
                StoreStatus.INVALID_CREDENTIALS, "username and password do not match"
            )
        return OperationResult.success()

    async def _has_user(self, username: str) -> bool:
        result = await self.db.execute(select(User.username).where(User.username == username))
        return result.first() is not None
