from .result import OperationResult, StoreStatus
from .chat_info import ChatPeer, format_chat_info, parse_chat_info

__all__ = [
    "OperationResult",
    "StoreStatus",
    "ChatPeer",
    "format_chat_info",
    "parse_chat_info",
]
