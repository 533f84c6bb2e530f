from .schema_manager import SchemaManager
from .user_repository import UserRepository
from .chat_repository import ChatRepository
from .membership_repository import MembershipRepository

__all__ = [
    "SchemaManager",
    "UserRepository",
    "ChatRepository",
    "MembershipRepository",
]
