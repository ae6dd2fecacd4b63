import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lexigrow.config.settings import settings
from lexigrow.models.profile import StudentProfile
from lexigrow.models.xp_event import XPEvent
from lexigrow.repositories.profile_repository import ProfileRepository
from lexigrow.repositories.user_repository import UserRepository
from lexigrow.repositories.xp_event_repository import XPEventRepository
from lexigrow.utils.database import unit_of_work
from lexigrow.utils.exceptions import NotFoundError, ValidationError
from lexigrow.utils.helpers import utc_now

logger = logging.getLogger(__name__)


def level_for_xp(xp: int) -> int:
    """每 XP_PER_LEVEL 经验升一级：level = xp // 100 + 1"""
    return xp // settings.XP_PER_LEVEL + 1


class XPService:
    """
    经验值账本
    累加经验值、推导等级，并为每次发放追加一条不可变的 XPEvent
    """
    
    def __init__(self, db: Session, clock: Callable[[], datetime] = utc_now):
        self.db = db
        self.clock = clock
        self.user_repo = UserRepository(db)
        self.profile_repo = ProfileRepository(db)
        self.event_repo = XPEventRepository(db)
    
    def _ensure_student(self, student_id: int):
        if self.user_repo.get_student(student_id) is None:
            raise NotFoundError(f"学生不存在: {student_id}")
    
    def get_or_create_profile(self, student_id: int) -> StudentProfile:
        """
        获取学生成长档案，不存在时创建默认档案（level=1, xp=0）
        只 flush，不提交；由调用方的工作单元提交
        """
        profile = self.profile_repo.get_by_student(student_id)
        if profile:
            return profile
        
        try:
            with self.db.begin_nested():
                profile = self.profile_repo.create(
                    student_id=student_id,
                    level=1,
                    xp=0,
                    total_words_learned=0
                )
            logger.info(f"为学生 {student_id} 创建成长档案")
        except IntegrityError:
            # 并发请求已经创建了档案
            logger.debug(f"学生 {student_id} 的成长档案已被并发创建，重新读取")
            profile = self.profile_repo.get_by_student(student_id)
        return profile
    
    def get_profile(self, student_id: int) -> StudentProfile:
        """
        获取或创建学生成长档案
        
        Raises:
            NotFoundError: 学生不存在
        """
        self._ensure_student(student_id)
        with unit_of_work(self.db, "获取成长档案"):
            profile = self.get_or_create_profile(student_id)
        return profile
    
    def add_word_learned(self, student_id: int):
        """累计掌握单词数 +1（在当前事务中），必要时先创建档案"""
        self.get_or_create_profile(student_id)
        self.profile_repo.increment_words_learned(student_id)
        logger.info(f"学生 {student_id} 首次掌握一个新单词")
    
    def apply_award(self, student_id: int, points: int, reason: str) -> Optional[XPEvent]:
        """
        在当前事务中发放经验值
        
        points <= 0 时不做任何修改，也不记录事件。
        等级总是由总经验值重新计算，不单独递增。
        
        Returns:
            XPEvent: 新增的经验值事件；未发放时返回None
        """
        if points <= 0:
            logger.debug(f"学生 {student_id} 的经验值 {points} 不大于0，跳过")
            return None
        
        profile = self.get_or_create_profile(student_id)
        self.profile_repo.add_xp(student_id, points, settings.XP_PER_LEVEL)
        self.db.refresh(profile)
        
        event = self.event_repo.create(
            student_id=student_id,
            points=points,
            reason=reason,
            created_at=self.clock()
        )
        logger.info(
            f"学生 {student_id} 获得 {points} XP ({reason})，"
            f"当前 XP={profile.xp}, 等级={profile.level}"
        )
        return event
    
    def award(self, student_id: int, points: int, reason: str) -> Optional[XPEvent]:
        """
        发放经验值（独立事务）
        
        Args:
            student_id: 学生ID
            points: 经验值
            reason: 发放原因
            
        Returns:
            XPEvent: 新增的经验值事件；points <= 0 时返回None
        """
        if not reason:
            raise ValidationError("经验值发放原因不能为空")
        self._ensure_student(student_id)
        with unit_of_work(self.db, "发放经验值"):
            event = self.apply_award(student_id, points, reason)
        return event
    
    def recent_events(self, student_id: int, limit: int = None) -> List[XPEvent]:
        """获取最近的经验值事件，最新的在前"""
        if limit is None:
            limit = settings.RECENT_XP_EVENTS_LIMIT
        if limit <= 0:
            raise ValidationError("limit 必须大于0")
        self._ensure_student(student_id)
        return self.event_repo.get_recent_events(student_id, limit)
