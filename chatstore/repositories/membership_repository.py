import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from sqlalchemy.exc import SQLAlchemyError

from chatstore.models.chat import ChatUser
from chatstore.repositories.chat_repository import ChatRepository
from chatstore.repositories.user_repository import UserRepository
from chatstore.schemas.chat_info import ChatPeer, format_chat_info

logger = logging.getLogger(__name__)


class MembershipRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_chat_users(self, chat_id: int) -> List[str]:
        """Usernames in a chat, in the order they were added."""
        if not await ChatRepository(self.db).chat_exists(chat_id):
            return []

        try:
            result = await self.db.execute(
                select(ChatUser.username)
                .where(ChatUser.chat_id == chat_id)
                .order_by(ChatUser.row_id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Chat's users could not be retrieved for %s: %s", chat_id, e)
            return []

    async def get_chats_user_is_in(self, username: str) -> List[int]:
        """Ids of the chats a registered user belongs to, in the order joined."""
        if not await UserRepository(self.db).user_exists(username):
            return []

        try:
            result = await self.db.execute(
                select(ChatUser.chat_id)
                .where(ChatUser.username == username)
                .order_by(ChatUser.row_id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("User's chats could not be retrieved for '%s': %s", username, e)
            return []

    async def do_users_chat(self, username1: str, username2: str) -> bool:
        """True when the two users share at least one chat."""
        user2_chats = select(ChatUser.chat_id).where(ChatUser.username == username2)

        try:
            result = await self.db.execute(
                select(ChatUser.chat_id).where(
                    and_(
                        ChatUser.username == username1,
                        ChatUser.chat_id.in_(user2_chats)
                    )
                ).limit(1)
            )
            return result.first() is not None
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("doUsersChat query failed for '%s'/'%s': %s", username1, username2, e)
            return False

    async def get_user_chat_peers(self, username: str) -> List[ChatPeer]:
        """Every (chat, other member) pair for the chats ``username`` is in.

        Chats follow get_chats_user_is_in order and members follow
        get_chat_users order; the user's own rows are skipped.
        """
        peers = []
        for chat_id in await self.get_chats_user_is_in(username):
            for member in await self.get_chat_users(chat_id):
                if member != username:
                    peers.append(ChatPeer(chat_id=chat_id, username=member))
        return peers

    async def get_user_chat_info(self, username: str) -> str:
        """Peers flattened to ``chatId,username,...`` for callers that want a string."""
        return format_chat_info(await self.get_user_chat_peers(username))
