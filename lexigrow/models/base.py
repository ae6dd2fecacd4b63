from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

from lexigrow.utils.helpers import utc_now

Base = declarative_base()


class BaseModel(Base):
    """
    所有表的公共字段
    updated_at 默认取当前UTC时间；复习等业务操作用 touch() 写入业务时钟的时间，
    这样按 updated_at 排序的队列与复习时间一致
    """
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now)

    def touch(self, at: Optional[datetime] = None):
        """标记记录已修改"""
        self.updated_at = at or utc_now()
