from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base

class Chat(Base):
    __tablename__ = "chats"

    # Caller supplied, never generated
    chat_id = Column("chatid", Integer, primary_key=True, autoincrement=False)
    owner = Column(String(20), ForeignKey("userinfo.username"), nullable=False)

    owner_user = relationship("User", viewonly=True)
    members = relationship("ChatUser", order_by="ChatUser.row_id", viewonly=True)


class ChatUser(Base):
    __tablename__ = "chatusers"

    row_id = Column("rowid", Integer, primary_key=True)
    chat_id = Column("chatid", Integer, ForeignKey("chats.chatid"))
    username = Column(String(20), ForeignKey("userinfo.username"), nullable=False)
