import logging
from fastapi import Request

from lexigrow.config.settings import settings
from lexigrow.services.teacher_auth_service import TeacherAuthService
from lexigrow.utils.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def require_teacher(request: Request) -> None:
    """老师端接口依赖：cookie 中必须有老师标记"""
    flag = request.cookies.get(settings.TEACHER_COOKIE_NAME)
    if not TeacherAuthService.is_teacher(flag):
        logger.warning(f"未登录的老师端请求: {request.url.path}")
        raise AuthenticationError("请先以老师身份登录")
