from pydantic import BaseModel
from datetime import datetime
from messagely.schemas.user import UserProfile

# 我发出去的消息，附带收件人资料
class SentMessage(BaseModel):
    id: int
    to_user: UserProfile
    body: str
    sent_at: datetime
    read_at: datetime | None = None

# 我收到的消息，附带发件人资料
class ReceivedMessage(BaseModel):
    id: int
    from_user: UserProfile
    body: str
    sent_at: datetime
    read_at: datetime | None = None
