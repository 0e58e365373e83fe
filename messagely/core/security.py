from passlib.context import CryptContext
from messagely.core.config import settings

# -------- 哈希 --------
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_WORK_FACTOR,
)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

# -------- 校验 --------
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    比较明文和库里的哈希，bcrypt 内部是常数时间比较
    """
    return pwd_context.verify(plain_password, hashed_password)
