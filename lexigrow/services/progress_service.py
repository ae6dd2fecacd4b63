#!/usr/bin/env python3
"""
单词掌握进度服务
记录学生对每个单词的掌握情况，安排下次复习时间，并在同一个事务中
触发经验值发放和学习日志。
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lexigrow.config.settings import settings
from lexigrow.models.progress import StudentWordProgress, ProgressStatus
from lexigrow.models.study_log import StudyAction
from lexigrow.repositories.progress_repository import ProgressRepository
from lexigrow.repositories.user_repository import UserRepository
from lexigrow.repositories.word_repository import WordRepository
from lexigrow.services.study_log_service import StudyLogService
from lexigrow.services.xp_service import XPService
from lexigrow.utils.database import unit_of_work
from lexigrow.utils.exceptions import NotFoundError, ValidationError
from lexigrow.utils.helpers import utc_now, days_from

logger = logging.getLogger(__name__)


class ReviewOutcome(str, Enum):
    KNOWN = "KNOWN"
    UNKNOWN = "UNKNOWN"


# 首次复习时的初始熟悉度
KNOWN_INITIAL_FAMILIARITY = 80
UNKNOWN_INITIAL_FAMILIARITY = 20
FAMILIARITY_STEP = 10
MAX_FAMILIARITY = 100
MIN_FAMILIARITY = 0

OUTCOME_ACTIONS = {
    ReviewOutcome.KNOWN: StudyAction.MARK_KNOWN,
    ReviewOutcome.UNKNOWN: StudyAction.MARK_UNKNOWN,
}


def parse_outcome(outcome: Union[ReviewOutcome, str, None]) -> ReviewOutcome:
    """把字符串（不区分大小写）转换为 ReviewOutcome"""
    if isinstance(outcome, ReviewOutcome):
        return outcome
    if isinstance(outcome, str):
        try:
            return ReviewOutcome(outcome.strip().upper())
        except ValueError:
            pass
    raise ValidationError(f"未知的复习结果: {outcome}")


class ProgressService:
    """
    掌握进度跟踪
    
    状态机：无记录 -> LEARNING <-> MASTERED
    - KNOWN 把任何状态变为 MASTERED，is_stranger=False
    - UNKNOWN 把任何状态（包括 MASTERED）变为 LEARNING，is_stranger=True
    """
    
    def __init__(self, db: Session, clock: Callable[[], datetime] = utc_now):
        self.db = db
        self.clock = clock
        self.progress_repo = ProgressRepository(db)
        self.user_repo = UserRepository(db)
        self.word_repo = WordRepository(db)
        self.xp_service = XPService(db, clock)
        self.log_service = StudyLogService(db)
    
    def review_word(self, student_id: int, word_id: Optional[int],
                    outcome: Union[ReviewOutcome, str],
                    request_id: Optional[str] = None) -> StudentWordProgress:
        """
        学生复习一个单词（我会 / 我不会）
        
        进度更新、成长档案更新、经验值事件和学习日志在同一个事务中提交，
        任何一步失败都会整体回滚。
        
        Args:
            student_id: 学生ID
            word_id: 单词ID
            outcome: KNOWN 或 UNKNOWN
            request_id: 可选的幂等键，重复提交时不会再次生效
            
        Returns:
            StudentWordProgress: 更新后的掌握进度
            
        Raises:
            ValidationError: 缺少单词ID或复习结果不合法
            NotFoundError: 学生或单词不存在
            StorageError: 数据库写入失败，所有修改已回滚
        """
        if word_id is None:
            raise ValidationError("缺少单词ID")
        outcome = parse_outcome(outcome)
        
        if self.user_repo.get_student(student_id) is None:
            raise NotFoundError(f"学生不存在: {student_id}")
        if self.word_repo.get_by_id(word_id) is None:
            raise NotFoundError(f"单词不存在: {word_id}")
        
        with unit_of_work(self.db, "复习单词"):
            if request_id:
                duplicate = self.log_service.find_by_request_id(student_id, request_id)
                if duplicate:
                    if duplicate.word_id != word_id or duplicate.action != OUTCOME_ACTIONS[outcome].value:
                        raise ValidationError(f"幂等键 {request_id} 已用于另一条复习请求")
                    logger.info(f"重复的复习请求 {request_id}，学生{student_id}，不再重复记录")
                    return self.progress_repo.get_progress(student_id, word_id)
            
            now = self.clock()
            progress, created = self._upsert_progress(student_id, word_id, outcome, now)
            
            if outcome == ReviewOutcome.KNOWN:
                if created:
                    # 第一次掌握这个词，累计掌握单词数 +1
                    self.xp_service.add_word_learned(student_id)
                self.xp_service.apply_award(student_id, settings.KNOWN_XP, "mark_known_word")
                self.log_service.record(
                    student_id, word_id, StudyAction.MARK_KNOWN,
                    is_familiar=True, is_stranger=False,
                    created_at=now, request_id=request_id
                )
            else:
                self.xp_service.apply_award(student_id, settings.UNKNOWN_XP, "mark_unknown_word")
                self.log_service.record(
                    student_id, word_id, StudyAction.MARK_UNKNOWN,
                    is_familiar=False, is_stranger=True,
                    created_at=now, request_id=request_id
                )
        
        logger.info(
            f"学生 {student_id} 复习单词 {word_id}: {outcome.value} -> "
            f"{progress.status}, 熟悉度 {progress.familiarity_score}"
        )
        return progress
    
    def _upsert_progress(self, student_id: int, word_id: int, outcome: ReviewOutcome,
                         now: datetime) -> Tuple[StudentWordProgress, bool]:
        """
        创建或更新掌握进度
        
        Returns:
            (进度记录, 是否为新建)
        """
        progress = self.progress_repo.get_progress(student_id, word_id, for_update=True)
        
        if progress is None:
            try:
                with self.db.begin_nested():
                    progress = self.progress_repo.create(
                        student_id=student_id,
                        word_id=word_id,
                        **self._initial_state(outcome, now)
                    )
                return progress, True
            except IntegrityError:
                logger.debug(f"学生 {student_id} 单词 {word_id} 的进度已被并发创建，改为更新")
                progress = self.progress_repo.get_progress(student_id, word_id, for_update=True)
        
        self._apply_outcome(progress, outcome, now)
        self.db.flush()
        return progress, False
    
    @staticmethod
    def _initial_state(outcome: ReviewOutcome, now: datetime) -> dict:
        if outcome == ReviewOutcome.KNOWN:
            return {
                "status": ProgressStatus.MASTERED.value,
                "is_stranger": False,
                "familiarity_score": KNOWN_INITIAL_FAMILIARITY,
                "correct_count": 1,
                "wrong_count": 0,
                "dont_know_count": 0,
                "last_reviewed_at": now,
                "next_review_at": days_from(now, settings.KNOWN_REVIEW_DAYS),
                "updated_at": now,
            }
        return {
            "status": ProgressStatus.LEARNING.value,
            "is_stranger": True,
            "familiarity_score": UNKNOWN_INITIAL_FAMILIARITY,
            "correct_count": 0,
            "wrong_count": 1,
            "dont_know_count": 1,
            "last_reviewed_at": now,
            "next_review_at": days_from(now, settings.UNKNOWN_REVIEW_DAYS),
            "updated_at": now,
        }
    
    @staticmethod
    def _apply_outcome(progress: StudentWordProgress, outcome: ReviewOutcome, now: datetime):
        if outcome == ReviewOutcome.KNOWN:
            progress.status = ProgressStatus.MASTERED.value
            progress.is_stranger = False
            progress.familiarity_score = min(MAX_FAMILIARITY, progress.familiarity_score + FAMILIARITY_STEP)
            progress.correct_count += 1
            progress.next_review_at = days_from(now, settings.KNOWN_REVIEW_DAYS)
        else:
            progress.status = ProgressStatus.LEARNING.value
            progress.is_stranger = True
            progress.familiarity_score = max(MIN_FAMILIARITY, progress.familiarity_score - FAMILIARITY_STEP)
            progress.wrong_count += 1
            progress.dont_know_count += 1
            progress.next_review_at = days_from(now, settings.UNKNOWN_REVIEW_DAYS)
        progress.last_reviewed_at = now
        progress.touch(now)
    
    def get_progress(self, student_id: int, word_id: int) -> Optional[StudentWordProgress]:
        """获取掌握进度，没有学习记录时返回None（不是错误）"""
        return self.progress_repo.get_progress(student_id, word_id)
    
    def list_stranger_words(self, student_id: int) -> List[StudentWordProgress]:
        """获取学生的陌生单词复习队列，最近更新的在前"""
        if self.user_repo.get_student(student_id) is None:
            raise NotFoundError(f"学生不存在: {student_id}")
        return self.progress_repo.get_stranger_words(student_id)
    
    def count_stranger_words(self, student_id: int) -> int:
        return self.progress_repo.count_stranger_words(student_id)
    
    def count_mastered_words(self, student_id: int) -> int:
        return self.progress_repo.count_mastered_words(student_id)
