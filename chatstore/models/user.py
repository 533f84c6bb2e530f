from sqlalchemy import Column, String
from .base import Base

class User(Base):
    __tablename__ = "userinfo"

    username = Column(String(20), primary_key=True)
    # Stored verbatim, no hashing
    password = Column(String(20))
