from datetime import datetime
from pydantic import BaseModel, ConfigDict


# 注册成功后返回（password 是哈希）
class UserRegistered(BaseModel):
    username: str
    password: str
    first_name: str
    last_name: str
    phone: str

    model_config = ConfigDict(from_attributes=True)

# 用户列表
class UserSummary(BaseModel):
    username: str
    first_name: str
    last_name: str

    model_config = ConfigDict(from_attributes=True)

# 单个用户详情
class UserDetail(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str
    join_at: datetime
    last_login_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

# 嵌在消息里的对方资料
class UserProfile(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    model_config = ConfigDict(from_attributes=True)
