from enum import Enum

from sqlalchemy import Column, String
from .base import BaseModel

"""
用户模型  
学生和老师共用一张表，通过 role 区分。学习引擎只关心学生。
"""


class UserRole(str, Enum):
    STUDENT = "STUDENT"
    TEACHER = "TEACHER"


class User(BaseModel):
    __tablename__ = "users"

    name = Column(String(100))
    role = Column(String(20), nullable=False, default=UserRole.STUDENT.value, index=True)
    
    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None
        }
