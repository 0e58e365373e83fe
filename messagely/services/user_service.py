# services/user_service.py
import logging

from sqlalchemy import select, update, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from messagely.core.exceptions import NotFoundError, UserAlreadyExistsError
from messagely.core.security import get_password_hash, verify_password
from messagely.models.messages import Messages
from messagely.models.user import User
from messagely.schemas.messages import ReceivedMessage, SentMessage
from messagely.schemas.user import UserDetail, UserProfile, UserRegistered, UserSummary

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    用户数据访问层：注册、校验密码、刷新登录时间、查用户、查收发消息

    每个方法都在传入的 Session 上按顺序执行 SQL，不做缓存也不加锁。
    数据库本身的异常（SQLAlchemyError）原样抛给调用者。
    """

    def __init__(self, db: Session):
        self.db = db

    # --------------------------------------------------
    # 注册
    # --------------------------------------------------
    def register(
        self,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        phone: str
    ) -> UserRegistered:
        if self._user_exists(username):
            logger.warning(f"注册失败，用户名已存在: {username}")
            raise UserAlreadyExistsError(username)

        user = User(
            username=username,
            password=get_password_hash(password),
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            join_at=func.now(),
            last_login_at=func.now()
        )
        self.db.add(user)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            # 检查和插入之间被别人抢注了
            if isinstance(e, IntegrityError) and self._user_exists(username):
                logger.warning(f"注册失败，用户名已存在: {username}")
                raise UserAlreadyExistsError(username) from e
            raise
        self.db.refresh(user)

        logger.info(f"新用户注册: {username}")
        return UserRegistered.model_validate(user)

    # --------------------------------------------------
    # 登录校验
    # --------------------------------------------------
    def authenticate(self, username: str, password: str) -> bool:
        """
        用户名 + 密码是否正确

        注意副作用：校验成功时会顺带刷新 last_login_at，调用方无法跳过。
        用户不存在时直接返回 False，不抛 NotFoundError。
        """
        row = self.db.execute(
            select(User.password).where(User.username == username)
        ).first()
        if row is None:
            return False

        if not verify_password(password, row.password):
            return False

        self.update_login_timestamp(username)
        return True

    def update_login_timestamp(self, username: str) -> None:
        result = self.db.execute(
            update(User)
            .where(User.username == username)
            .values(last_login_at=func.now())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            logger.warning(f"刷新登录时间失败，用户不存在: {username}")
            raise NotFoundError(username)
        self.db.commit()
        logger.info(f"用户 {username} 登录时间已刷新")

    # --------------------------------------------------
    # 查询用户
    # --------------------------------------------------
    def all(self) -> list[UserSummary]:
        # 不排序，顺序由数据库决定
        rows = self.db.execute(
            select(User.username, User.first_name, User.last_name)
        ).all()
        return [UserSummary(**r._mapping) for r in rows]

    def get(self, username: str) -> UserDetail:
        row = self.db.execute(
            select(
                User.username,
                User.first_name,
                User.last_name,
                User.phone,
                User.join_at,
                User.last_login_at
            ).where(User.username == username)
        ).first()
        if row is None:
            raise NotFoundError(username)
        return UserDetail(**row._mapping)

    # --------------------------------------------------
    # 收发消息
    # --------------------------------------------------
    def messages_from(self, username: str) -> list[SentMessage]:
        """我发出的消息，to_user 为收件人资料"""
        self._ensure_user_exists(username)
        rows = self._message_rows(
            peer_column=Messages.to_username,
            owner_column=Messages.from_username,
            username=username
        )
        return [
            SentMessage(
                id=r.id,
                to_user=_profile(r),
                body=r.body,
                sent_at=r.sent_at,
                read_at=r.read_at
            )
            for r in rows
        ]

    def messages_to(self, username: str) -> list[ReceivedMessage]:
        """我收到的消息，from_user 为发件人资料"""
        self._ensure_user_exists(username)
        rows = self._message_rows(
            peer_column=Messages.from_username,
            owner_column=Messages.to_username,
            username=username
        )
        return [
            ReceivedMessage(
                id=r.id,
                from_user=_profile(r),
                body=r.body,
                sent_at=r.sent_at,
                read_at=r.read_at
            )
            for r in rows
        ]

    # --------------------------------------------------
    # 内部工具
    # --------------------------------------------------
    def _user_exists(self, username: str) -> bool:
        return self.db.execute(
            select(User.username).where(User.username == username)
        ).first() is not None

    def _ensure_user_exists(self, username: str) -> None:
        # 单独一次查询；和后面的联表查询之间不保证原子性
        if not self._user_exists(username):
            raise NotFoundError(username)

    def _message_rows(self, peer_column, owner_column, username: str):
        stmt = (
            select(
                Messages.id,
                User.username,
                User.first_name,
                User.last_name,
                User.phone,
                Messages.body,
                Messages.sent_at,
                Messages.read_at
            )
            .select_from(Messages)
            .join(User, peer_column == User.username)
            .where(owner_column == username)
        )
        return self.db.execute(stmt).all()


def _profile(row) -> UserProfile:
    return UserProfile(
        username=row.username,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone
    )
