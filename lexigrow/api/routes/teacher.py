import logging
from fastapi import APIRouter, Response

from lexigrow.config.settings import settings
from lexigrow.services.teacher_auth_service import TeacherAuthService
from lexigrow.api.schemas.teacher_schemas import TeacherLoginRequest, MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/login", response_model=MessageResponse)
def teacher_login(login_data: TeacherLoginRequest, response: Response):
    """
    老师登录，成功后写入老师标记 cookie
    """
    flag = TeacherAuthService().login(login_data.password)
    response.set_cookie(
        key=settings.TEACHER_COOKIE_NAME,
        value=flag,
        httponly=True,
        path="/",
        max_age=settings.TEACHER_COOKIE_MAX_AGE,
    )
    return {"message": "登录成功"}

@router.post("/logout", response_model=MessageResponse)
def teacher_logout(response: Response):
    """
    老师退出登录
    """
    response.delete_cookie(key=settings.TEACHER_COOKIE_NAME, path="/")
    return {"message": "已退出登录"}
