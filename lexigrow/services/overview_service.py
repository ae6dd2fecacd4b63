#!/usr/bin/env python3
"""
学生端页面数据
单词详情页和"我的成长"页需要的组合数据，只读取学习引擎的结果。
"""

import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from lexigrow.config.settings import settings
from lexigrow.services.content_service import ContentService
from lexigrow.services.progress_service import ProgressService
from lexigrow.services.xp_service import XPService
from lexigrow.utils.exceptions import NotFoundError
from lexigrow.utils.helpers import split_syllables

logger = logging.getLogger(__name__)


class OverviewService:
    def __init__(self, db: Session):
        self.db = db
        self.content_service = ContentService(db)
        self.progress_service = ProgressService(db)
        self.xp_service = XPService(db)

    def get_word_detail(self, student_id: int, word_id: int) -> Dict[str, Any]:
        """
        单词详情：单词内容、音节拆分、当前学生的掌握情况、等级和陌生单词数

        Raises:
            NotFoundError: 单词或学生不存在
        """
        word = self.content_service.get_word(word_id)
        if word is None:
            raise NotFoundError(f"单词不存在: {word_id}")
        profile = self.xp_service.get_profile(student_id)

        return {
            "word": word.to_dict(),
            "syllables": split_syllables(word.syllables),
            "progress": self.progress_service.get_progress(student_id, word_id),
            "profile": profile,
            "stranger_count": self.progress_service.count_stranger_words(student_id),
        }

    def get_profile_overview(self, student_id: int) -> Dict[str, Any]:
        """
        我的成长：等级、经验值、累计掌握单词数、陌生单词数和最近经验值记录
        没有成长档案时按 level=1, xp=0 展示，不创建档案
        """
        events = self.xp_service.recent_events(student_id, settings.RECENT_XP_EVENTS_LIMIT)
        profile = self.xp_service.profile_repo.get_by_student(student_id)
        mastered_count = self.progress_service.count_mastered_words(student_id)

        return {
            "student_id": student_id,
            "level": profile.level if profile else 1,
            "xp": profile.xp if profile else 0,
            "xp_per_level": settings.XP_PER_LEVEL,
            "total_words_learned": profile.total_words_learned if profile else mastered_count,
            "mastered_count": mastered_count,
            "stranger_count": self.progress_service.count_stranger_words(student_id),
            "recent_xp_events": events,
        }
