from typing import Optional
from sqlalchemy.orm import Session

from lexigrow.models.profile import StudentProfile
from lexigrow.repositories.base import BaseRepository


class ProfileRepository(BaseRepository[StudentProfile]):
    def __init__(self, db: Session):
        super().__init__(db, StudentProfile)
    
    def get_by_student(self, student_id: int) -> Optional[StudentProfile]:
        """根据学生ID获取成长档案"""
        return self.db.query(StudentProfile).filter(
            StudentProfile.student_id == student_id
        ).first()
    
    def add_xp(self, student_id: int, points: int, xp_per_level: int) -> int:
        """
        原子地增加经验值并重新计算等级
        
        一条 UPDATE 语句完成读-改-写，SET 子句中的 xp 都是更新前的值，
        并发的加分不会互相覆盖。
        
        Returns:
            int: 受影响的行数
        """
        new_xp = StudentProfile.xp + points
        return self.db.query(StudentProfile).filter(
            StudentProfile.student_id == student_id
        ).update(
            {
                StudentProfile.xp: new_xp,
                StudentProfile.level: new_xp // xp_per_level + 1,
            },
            synchronize_session=False
        )
    
    def increment_words_learned(self, student_id: int, amount: int = 1) -> int:
        """原子地增加累计掌握单词数"""
        return self.db.query(StudentProfile).filter(
            StudentProfile.student_id == student_id
        ).update(
            {StudentProfile.total_words_learned: StudentProfile.total_words_learned + amount},
            synchronize_session=False
        )
