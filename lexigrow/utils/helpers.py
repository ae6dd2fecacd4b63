import re
from datetime import datetime, timedelta
from typing import List, Optional

import pytz


def utc_now() -> datetime:
    """当前UTC时间（带时区）"""
    return datetime.now(pytz.utc)


def days_from(dt: datetime, days: int) -> datetime:
    """计算 dt 之后 days 天的时间点"""
    return dt + timedelta(days=days)


def clean_text(value: Optional[str]) -> Optional[str]:
    """去掉首尾空白，空字符串视为None"""
    if value is None:
        return None
    value = value.strip()
    return value or None


def split_syllables(syllables: Optional[str]) -> List[str]:
    """把音节字符串按 '-' 或空白拆分，例如 're-sil-ient'"""
    if not syllables:
        return []
    return [s for s in re.split(r"[-\s]", syllables) if s.strip()]
