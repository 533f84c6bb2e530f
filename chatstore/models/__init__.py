from .base import Base
from .user import User
from .chat import Chat, ChatUser

__all__ = [
    "Base",
    "User",
    "Chat",
    "ChatUser",
]
