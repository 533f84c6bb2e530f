import logging
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from chatstore.models.chat import Chat, ChatUser
from chatstore.models.user import User
from chatstore.schemas.result import OperationResult, StoreStatus

logger = logging.getLogger(__name__)


class ChatRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, chat_id: int) -> Optional[Chat]:
        """Chat with its owner and members loaded."""
        try:
            result = await self.db.execute(
                select(Chat).options(
                    selectinload(Chat.owner_user),
                    selectinload(Chat.members)
                ).where(Chat.chat_id == chat_id)
                .execution_options(populate_existing=True)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Chat %s could not be retrieved: %s", chat_id, e)
            return None

    async def chat_exists(self, chat_id: int) -> bool:
        try:
            return await self._has_chat(chat_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("chatExists query failed for %s: %s", chat_id, e)
            return False

    async def get_chat_owner(self, chat_id: int) -> Optional[str]:
        """Owner's username, or None if the chat is missing."""
        try:
            return await self._owner_of(chat_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Chat owner could not be retrieved for %s: %s", chat_id, e)
            return None

    async def add_chat(self, chat_id: int, owner: str, members: Sequence[str]) -> OperationResult:
        """Create a chat and one membership row per entry of ``members``.

        The owner is only a member if listed. Member names are inserted
        as given, so duplicates and unknown users are not rejected. The chat
        and its memberships are committed together or not at all.
        """
        try:
            chat_taken = await self._has_chat(chat_id)
            owner_known = await self._has_user(owner)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("addChat lookup failed for chat %s: %s", chat_id, e)
            return OperationResult.failure(StoreStatus.EXECUTION_FAILED, str(e))

        if chat_taken:
            logger.warning("addChat: a chat with id %s already exists", chat_id)
            return OperationResult.failure(
                StoreStatus.ALREADY_EXISTS, f"chat {chat_id} already exists"
            )

        if not owner_known:
            logger.warning("addChat: owner '%s' does not exist", owner)
            return OperationResult.failure(
                StoreStatus.NOT_FOUND, f"owner '{owner}' does not exist"
            )

        self.db.add(Chat(chat_id=chat_id, owner=owner))
        self.db.add_all([ChatUser(chat_id=chat_id, username=member) for member in members])
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("addChat query error for chat %s: %s", chat_id, e)
            return OperationResult.failure(StoreStatus.EXECUTION_FAILED, str(e))

        logger.info("Added chat %s owned by '%s' with %d member(s)", chat_id, owner, len(members))
        return OperationResult.success()

    async def remove_chat(self, chat_id: int, username: str) -> OperationResult:
        """Delete a chat and its memberships; only the owner may do this."""
        try:
            # owner is NOT NULL, so None means no such chat
            owner = await self._owner_of(chat_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Remove chat %s failed: %s", chat_id, e)
            return OperationResult.failure(StoreStatus.EXECUTION_FAILED, str(e))

        if owner is None:
            logger.warning("Remove chat failed: chat %s does not exist", chat_id)
            return OperationResult.failure(
                StoreStatus.NOT_FOUND, f"chat {chat_id} does not exist"
            )

        if owner != username:
            logger.warning(
                "Remove chat failed: '%s' is not the owner of chat %s", username, chat_id
            )
            return OperationResult.failure(
                StoreStatus.PERMISSION_DENIED, f"'{username}' does not own chat {chat_id}"
            )

        try:
            await self.db.execute(delete(ChatUser).where(ChatUser.chat_id == chat_id))
            await self.db.execute(delete(Chat).where(Chat.chat_id == chat_id))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Remove chat %s failed: %s", chat_id, e)
            return OperationResult.failure(StoreStatus.EXECUTION_FAILED, str(e))

        logger.info("Removed chat %s", chat_id)
        return OperationResult.success()

    async def _has_chat(self, chat_id: int) -> bool:
        result = await self.db.execute(select(Chat.chat_id).where(Chat.chat_id == chat_id))
        return result.first() is not None

    async def _has_user(self, username: str) -> bool:
        result = await self.db.execute(select(User.username).where(User.username == username))
        return result.first() is not None

    async def _owner_of(self, chat_id: int) -> Optional[str]:
        result = await self.db.execute(select(Chat.owner).where(Chat.chat_id == chat_id))
        return result.scalar_one_or_none()
