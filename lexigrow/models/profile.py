from sqlalchemy import Column, Integer, ForeignKey

from .base import BaseModel

"""
学生成长档案模型  
等级、经验值和累计掌握单词数。level 始终由 xp 推导：level = xp // 100 + 1。
"""

class StudentProfile(BaseModel):
    __tablename__ = "student_profiles"

    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    level = Column(Integer, nullable=False, default=1)
    xp = Column(Integer, nullable=False, default=0)
    total_words_learned = Column(Integer, nullable=False, default=0)
    
    def to_dict(self):
        return {
            "student_id": self.student_id,
            "level": self.level,
            "xp": self.xp,
            "total_words_learned": self.total_words_learned,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None
        }
