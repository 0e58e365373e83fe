class NotFoundError(Exception):
    """按用户名查找/更新时目标用户不存在"""

    def __init__(self, username: str, message: str = "用户不存在"):
        super().__init__(message)
        self.username = username


class UserAlreadyExistsError(ValueError):
    """注册时用户名已被占用"""

    def __init__(self, username: str, message: str = "用户名已存在"):
        super().__init__(message)
        self.username = username
