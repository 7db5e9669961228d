# regcode/_ident/datecode.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Union

# 1 月 = 'A' ... 12 月 = 'L'
MONTH_LETTERS = "ABCDEFGHIJKL"


def to_utc(instant: datetime) -> datetime:
    """将时刻转换为 UTC；不带时区信息的 datetime 视为 UTC。"""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def encode_date(instant: Union[datetime, date]) -> str:
    """
    将时刻编码为 5 字符的日期码 `YYMDD`。

    年份取模 100 (2099 -> '99'，2100 -> '00')，月份用 A..L 表示，日期补零到两位。
    datetime 先转换为 UTC 再取日历字段；纯 date 对象按原样使用。
    """
    day = to_utc(instant).date() if isinstance(instant, datetime) else instant
    return f"{day.year % 100:02d}{MONTH_LETTERS[day.month - 1]}{day.day:02d}"
