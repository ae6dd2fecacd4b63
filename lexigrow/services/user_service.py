#!/usr/bin/env python3
"""
用户服务模块
学生身份的获取与创建。学习引擎的所有操作都显式接收 student_id，
"当前学生" 的解析只在这里做。
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from lexigrow.models.user import User, UserRole
from lexigrow.repositories.user_repository import UserRepository
from lexigrow.utils.database import unit_of_work
from lexigrow.utils.exceptions import NotFoundError, ValidationError
from lexigrow.utils.helpers import clean_text

logger = logging.getLogger(__name__)

DEFAULT_STUDENT_NAME = "Default Student"
DEFAULT_TEACHER_NAME = "Default Teacher"


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def resolve_current_student(self) -> User:
        """
        获取当前学生
        - 找到最早创建的学生
        - 如果没有，就创建一个默认学生
        重复调用返回同一个学生
        """
        student = self.user_repo.get_first_by_role(UserRole.STUDENT)
        if student:
            return student

        with unit_of_work(self.db, "创建默认学生"):
            student = self.user_repo.create(name=DEFAULT_STUDENT_NAME, role=UserRole.STUDENT.value)
        logger.info(f"创建默认学生: {student.id}")
        return student

    def resolve_default_teacher(self) -> User:
        """获取最早创建的老师，没有时创建占位老师（在调用方的事务中）"""
        teacher = self.user_repo.get_first_by_role(UserRole.TEACHER)
        if teacher:
            return teacher
        teacher = self.user_repo.create(name=DEFAULT_TEACHER_NAME, role=UserRole.TEACHER.value)
        logger.info(f"创建占位老师: {teacher.id}")
        return teacher

    def create_student(self, name: Optional[str]) -> User:
        """创建学生"""
        name = clean_text(name)
        if not name:
            raise ValidationError("学生名字不能为空")
        with unit_of_work(self.db, "创建学生"):
            student = self.user_repo.create(name=name, role=UserRole.STUDENT.value)
        logger.info(f"新学生创建成功: {student.id} - {student.name}")
        return student

    def get_student(self, student_id: int) -> User:
        """
        根据ID获取学生

        Raises:
            NotFoundError: 学生不存在
        """
        student = self.user_repo.get_student(student_id)
        if not student:
            raise NotFoundError(f"学生不存在: {student_id}")
        return student

    def list_students(self) -> List[User]:
        """按创建时间升序列出所有学生"""
        return self.user_repo.list_students()
