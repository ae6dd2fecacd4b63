from typing import Optional, List
from sqlalchemy.orm import Session
from lexigrow.models.user import User, UserRole
from lexigrow.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, db: Session):
        super().__init__(db, User)
    
    def get_student(self, student_id: int) -> Optional[User]:
        """根据ID获取学生"""
        return self.db.query(User).filter(
            User.id == student_id,
            User.role == UserRole.STUDENT.value
        ).first()
    
    def get_first_by_role(self, role: UserRole) -> Optional[User]:
        """获取某个角色最早创建的用户"""
        return self.db.query(User).filter(
            User.role == role.value
        ).order_by(User.created_at.asc(), User.id.asc()).first()
    
    def list_students(self) -> List[User]:
        """按创建时间升序获取所有学生"""
        return self.db.query(User).filter(
            User.role == UserRole.STUDENT.value
        ).order_by(User.created_at.asc(), User.id.asc()).all()
