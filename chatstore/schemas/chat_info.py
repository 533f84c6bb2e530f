from typing import Iterable, List
from pydantic import BaseModel

SEPARATOR = ","

class ChatPeer(BaseModel):
    chat_id: int
    username: str

def format_chat_info(peers: Iterable[ChatPeer]) -> str:
    """Flatten peers into ``chatId,username,chatId,username,...``."""
    tokens = []
    for peer in peers:
        tokens.append(str(peer.chat_id))
        tokens.append(peer.username)
    return SEPARATOR.join(tokens)

def parse_chat_info(text: str) -> List[ChatPeer]:
    if not text:
        return []
    tokens = text.split(SEPARATOR)
    if len(tokens) % 2:
        raise ValueError(f"Odd number of tokens in chat info: {len(tokens)}")
    return [
        ChatPeer(chat_id=int(chat_id), username=username)
        for chat_id, username in zip(tokens[::2], tokens[1::2])
    ]
