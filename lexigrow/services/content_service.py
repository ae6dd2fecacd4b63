#!/usr/bin/env python3
"""
内容服务模块
老师录入单词和单词包；学习引擎只读取这里的单词。
"""

import logging
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from lexigrow.config.settings import settings
from lexigrow.models.word import Word
from lexigrow.models.word_set import WordSet
from lexigrow.repositories.word_repository import WordRepository
from lexigrow.repositories.word_set_repository import WordSetRepository
from lexigrow.services.user_service import UserService
from lexigrow.utils.database import unit_of_work
from lexigrow.utils.exceptions import NotFoundError, ValidationError
from lexigrow.utils.helpers import clean_text

logger = logging.getLogger(__name__)

WORD_FIELDS = (
    "phonetic", "pos", "meaning_en", "meaning_zh", "example_en",
    "example_zh", "syllables", "word_roots", "mnemonics",
)


class ContentService:
    def __init__(self, db: Session):
        self.db = db
        self.word_repo = WordRepository(db)
        self.word_set_repo = WordSetRepository(db)
        self.user_service = UserService(db)

    def create_word(self, text: Optional[str], **fields: Any) -> Word:
        """
        新增单词

        Args:
            text: 单词（必填）
            fields: 其他可选字段，去掉首尾空白，空字符串保存为空值

        Raises:
            ValidationError: 缺少单词或包含未知字段
        """
        text = clean_text(text)
        if not text:
            raise ValidationError("单词不能为空")
        unknown = set(fields) - set(WORD_FIELDS)
        if unknown:
            raise ValidationError(f"未知的单词字段: {', '.join(sorted(unknown))}")

        word_data = {name: clean_text(fields.get(name)) for name in WORD_FIELDS}
        with unit_of_work(self.db, "新增单词"):
            word = self.word_repo.create(text=text, **word_data)
        logger.info(f"新增单词: {word.id} - {word.text}")
        return word

    def get_word(self, word_id: int) -> Optional[Word]:
        """根据ID获取单词，不存在时返回None"""
        return self.word_repo.get_by_id(word_id)

    def require_word(self, word_id: int) -> Word:
        word = self.get_word(word_id)
        if word is None:
            raise NotFoundError(f"单词不存在: {word_id}")
        return word

    def list_words(self, limit: int = None, order: str = "desc") -> List[Word]:
        """
        获取单词列表

        Args:
            limit: 最大数量，默认 WORD_LIST_LIMIT
            order: "desc" 最新的在前，"asc" 最早的在前
        """
        if limit is None:
            limit = settings.WORD_LIST_LIMIT
        if limit <= 0:
            raise ValidationError("limit 必须大于0")
        if order not in ("asc", "desc"):
            raise ValidationError(f"未知的排序方式: {order}")
        return self.word_repo.list_words(limit, newest_first=(order == "desc"))

    def create_word_set(self, name: Optional[str], description: Optional[str] = None,
                        story_en: Optional[str] = None, story_zh: Optional[str] = None,
                        word_ids: Optional[List[int]] = None) -> WordSet:
        """
        新增单词包，单词按 word_ids 的顺序保存
        创建者是最早的老师账号，没有时创建占位老师
        """
        name = clean_text(name)
        if not name:
            raise ValidationError("单词包名称不能为空")

        word_ids = list(dict.fromkeys(word_ids or []))
        found = {word.id for word in self.word_repo.get_by_ids(word_ids)}
        missing = [word_id for word_id in word_ids if word_id not in found]
        if missing:
            raise NotFoundError(f"单词不存在: {missing}")

        with unit_of_work(self.db, "新增单词包"):
            teacher = self.user_service.resolve_default_teacher()
            word_set = self.word_set_repo.create(
                name=name,
                description=clean_text(description),
                story_en=clean_text(story_en),
                story_zh=clean_text(story_zh),
                created_by_user_id=teacher.id
            )
            self.word_set_repo.add_words(word_set, word_ids)
        logger.info(f"新增单词包: {word_set.id} - {word_set.name}，包含 {len(word_ids)} 个单词")
        return word_set

    def list_word_sets(self) -> List[WordSet]:
        """获取所有单词包，最新的在前"""
        return self.word_set_repo.list_word_sets()
