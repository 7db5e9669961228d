# regcode/_ident/entropy.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import string
from datetime import datetime, timedelta, timezone
from typing import Union

from regcode._ident.datecode import to_utc
from regcode.exceptions import InstantOutOfRangeError

BASE36_DIGITS = string.digits + string.ascii_uppercase
ENTROPY_LENGTH = 3
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def unix_millis(instant: datetime) -> int:
    """返回时刻距 Unix 纪元的毫秒数 (向下取整)。"""
    return (to_utc(instant) - UNIX_EPOCH) // _ONE_MILLISECOND


def to_base36(value: int) -> str:
    """
    将非负整数渲染为大写的 36 进制字符串。

    Raises:
        InstantOutOfRangeError: 如果 value 为负数。
    """
    if value < 0:
        raise InstantOutOfRangeError(
            f"cannot encode negative milliseconds ({value}): instant predates the Unix epoch"
        )
    if value == 0:
        return "0"

    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def encode_entropy(instant: Union[datetime, int]) -> str:
    """
    将时刻的纪元毫秒数编码为 3 字符的 36 进制尾部。

    只保留最低的 3 位 36 进制数字 (约 12.96 小时一个周期)，不足 3 位时左侧补 '0'。
    它只是降低碰撞概率的区分符，不提供唯一性保证。

    Args:
        instant: datetime，或已经算好的纪元毫秒数。
    """
    if isinstance(instant, bool):
        raise TypeError("encode_entropy() expects a datetime or int milliseconds, got bool")
    millis = instant if isinstance(instant, int) else unix_millis(instant)
    return to_base36(millis)[-ENTROPY_LENGTH:].rjust(ENTROPY_LENGTH, "0")
