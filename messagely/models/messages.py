from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from messagely.db.database import Base

class Messages(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # 发送方 & 接收方
    from_username = Column(String(32), ForeignKey("users.username"), nullable=False, index=True)
    to_username   = Column(String(32), ForeignKey("users.username"), nullable=False, index=True)

    body = Column(Text, nullable=False)

    sent_at = Column(DateTime, nullable=False, server_default=func.now())
    # 对方标记已读之前一直为空
    read_at = Column(DateTime, nullable=True)
