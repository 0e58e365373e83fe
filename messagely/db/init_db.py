# 把模型先引进来，Base 才知道要建哪些表
from messagely.db.database import Base, engine
from messagely.models import user, messages
import time
import logging

logger = logging.getLogger(__name__)

MAX_RETRIES = 5
RETRY_DELAY = 2  # 秒


def _is_concurrent_ddl_error(error_msg: str) -> bool:
    return "1684" in error_msg or "concurrent DDL" in error_msg


def init(bind=None):
    """
    初始化数据库表（users / messages）
    只建表不做迁移；遇到并发DDL冲突按递增间隔重试
    """
    bind = bind if bind is not None else engine

    for attempt in range(MAX_RETRIES):
        try:
            # 如果表已存在则跳过
            Base.metadata.create_all(bind=bind, checkfirst=True)
            logger.info("数据库表已创建/更新完成")
            return
        except Exception as e:
            error_msg = str(e)
            if _is_concurrent_ddl_error(error_msg) and attempt < MAX_RETRIES - 1:
                wait_time = RETRY_DELAY * (attempt + 1)
                logger.warning(f"检测到并发DDL操作，{wait_time}秒后重试... (尝试 {attempt + 1}/{MAX_RETRIES})")
                time.sleep(wait_time)
                continue
            logger.error(f"数据库初始化失败: {error_msg}")
            raise

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init()
