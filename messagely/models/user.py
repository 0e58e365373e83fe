from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from messagely.db.database import Base

class User(Base):
    __tablename__ = "users"

    username      = Column(String(32), primary_key=True)
    password      = Column(String(128), nullable=False)   # 只存 bcrypt 哈希，不存明文
    first_name    = Column(String(64), nullable=False)
    last_name     = Column(String(64), nullable=False)
    phone         = Column(String(20), nullable=False)
    join_at       = Column(DateTime, nullable=False, server_default=func.now())  # 注册时间，只写一次
    last_login_at = Column(DateTime, nullable=True)       # 最后登录时间
