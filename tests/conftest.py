import os

# 必须在导入 messagely 之前设置，Settings() 在导入时实例化
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from messagely.db import database
from messagely.db.database import Base
from messagely.models import user, messages  # noqa: F401
from messagely.services.user_service import UserDirectory


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine, monkeypatch):
    # 和业务代码一样走 get_db，只把 SessionLocal 换成测试库
    monkeypatch.setattr(
        database,
        "SessionLocal",
        sessionmaker(autocommit=False, autoflush=False, bind=engine),
    )
    gen = database.get_db()
    session = next(gen)
    yield session
    gen.close()


@pytest.fixture
def directory(db):
    return UserDirectory(db)


@pytest.fixture
def alice(directory):
    return directory.register("alice", "pw123", "Alice", "A", "555-1234")


@pytest.fixture
def bob(directory):
    return directory.register("bob", "secret", "Bob", "B", "555-5678")
