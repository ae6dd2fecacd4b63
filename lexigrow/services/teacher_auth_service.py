import hmac
import logging
from typing import Optional

from lexigrow.config.settings import settings
from lexigrow.utils.exceptions import AuthenticationError, ConfigurationError

logger = logging.getLogger(__name__)

TEACHER_FLAG_VALUE = "1"


class TeacherAuthService:
    """老师端口令校验：一个共享密码，通过后在 cookie 中写入老师标记"""

    def __init__(self, password: Optional[str] = None):
        self.password = password if password is not None else settings.TEACHER_PASSWORD

    def login(self, password: str) -> str:
        """
        校验老师密码

        Returns:
            str: 写入 cookie 的老师标记

        Raises:
            ConfigurationError: 服务器未配置老师密码
            AuthenticationError: 密码错误
        """
        if not self.password:
            logger.error("服务器未正确配置老师密码")
            raise ConfigurationError("服务器未正确配置老师密码")
        if not hmac.compare_digest(password.encode("utf-8"), self.password.encode("utf-8")):
            logger.warning("老师密码错误")
            raise AuthenticationError("密码错误")
        logger.info("老师登录成功")
        return TEACHER_FLAG_VALUE

    @staticmethod
    def is_teacher(flag: Optional[str]) -> bool:
        return flag == TEACHER_FLAG_VALUE
