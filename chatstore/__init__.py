from chatstore.database import Database
from chatstore.repositories import (
    SchemaManager,
    UserRepository,
    ChatRepository,
    MembershipRepository,
)
from chatstore.schemas import OperationResult, StoreStatus, ChatPeer

__all__ = [
    "Database",
    "SchemaManager",
    "UserRepository",
    "ChatRepository",
    "MembershipRepository",
    "OperationResult",
    "StoreStatus",
    "ChatPeer",
]
