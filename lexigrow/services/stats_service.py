import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from lexigrow.models.study_log import StudyAction
from lexigrow.models.user import User
from lexigrow.repositories.profile_repository import ProfileRepository
from lexigrow.repositories.progress_repository import ProgressRepository
from lexigrow.repositories.study_log_repository import StudyLogRepository
from lexigrow.repositories.user_repository import UserRepository
from lexigrow.services.user_service import UserService
from lexigrow.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)

UNNAMED_STUDENT = "Unnamed student"


class StatsService:
    """
    学习统计
    每次请求实时汇总进度、经验值和学习日志，只读，不加锁
    """

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)
        self.user_service = UserService(db)
        self.progress_repo = ProgressRepository(db)
        self.profile_repo = ProfileRepository(db)
        self.log_repo = StudyLogRepository(db)

    def get_student_stats(self, student_id: int) -> Dict[str, Any]:
        """
        获取单个学生的统计

        没有成长档案时 level/xp 为None，没有日志时计数为0、last_activity 为None

        Raises:
            NotFoundError: 学生不存在
        """
        student = self.user_repo.get_student(student_id)
        if not student:
            raise NotFoundError(f"学生不存在: {student_id}")
        return self._build_stats(student)

    def list_all_student_stats(self) -> List[Dict[str, Any]]:
        """所有学生的统计，按学生创建时间升序"""
        students = self.user_service.list_students()
        rows = [self._build_stats(student) for student in students]
        logger.debug(f"汇总 {len(rows)} 个学生的学习统计")
        return rows

    def _build_stats(self, student: User) -> Dict[str, Any]:
        action_counts = self.log_repo.count_by_action(student.id)
        latest_log = self.log_repo.get_latest_log(student.id)
        profile = self.profile_repo.get_by_student(student.id)

        return {
            "student_id": student.id,
            "name": student.name or UNNAMED_STUDENT,
            "created_at": student.created_at,
            "total_logs": sum(action_counts.values()),
            "known_logs": action_counts.get(StudyAction.MARK_KNOWN.value, 0),
            "unknown_logs": action_counts.get(StudyAction.MARK_UNKNOWN.value, 0),
            "action_counts": action_counts,
            "mastered_words": self.progress_repo.count_mastered_words(student.id),
            "stranger_words": self.progress_repo.count_stranger_words(student.id),
            "last_activity": latest_log.created_at if latest_log else None,
            "level": profile.level if profile else None,
            "xp": profile.xp if profile else None,
        }
