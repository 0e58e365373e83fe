from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # ---------- MySQL ----------
    # 没给 DATABASE_URL 时这四项必填
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_DATABASE: Optional[str] = None

    # 本地调试可以直接给完整连接串，例如 sqlite:///./messagely.db
    DATABASE_URL: Optional[str] = None
    DB_ECHO: bool = False

    # ---------- 密码哈希 ----------
    # bcrypt 的 cost，越大越慢越安全（4 ~ 31）
    BCRYPT_WORK_FACTOR: int = 12

    @model_validator(mode="after")
    def check_mysql_fields(self):
        if self.DATABASE_URL:
            return self
        missing = [
            name for name in ("DB_HOST", "DB_USER", "DB_PASSWORD", "DB_DATABASE")
            if getattr(self, name) is None
        ]
        if missing:
            raise ValueError(f"未设置 DATABASE_URL 时必须提供: {', '.join(missing)}")
        return self

    @property
    def DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_DATABASE}?charset=utf8mb4"
        )

settings = Settings()
