# regcode/_ident/normalizers.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import unicodedata
from typing import Union

from regcode.exceptions import InvalidInputError

# 非间距组合标记 (重音符、波浪号等)
NONSPACING_MARK = "Mn"


def _upper_single(ch: str) -> str:
    """返回单个码点的大写形式；若大写会展开为多个字符 (如 'ß')，则保持原样。"""
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def _ensure_text(raw_name: Union[str, bytes]) -> str:
    """确保输入是合法的 Unicode 文本，否则抛出 InvalidInputError。"""
    try:
        if isinstance(raw_name, bytes):
            return raw_name.decode("utf-8")
        # 未配对的代理码点无法编码为 UTF-8，视为非法文本
        raw_name.encode("utf-8")
    except UnicodeError as e:
        raise InvalidInputError(f"invalid name: {e}") from e
    return raw_name


def normalize_name(raw_name: Union[str, bytes]) -> str:
    """
    将原始名称折叠为只含大写字母的规范形式。

    处理步骤:
    1. NFD 分解，使带重音的字母拆分为基础字母加组合标记。
    2. 移除所有非间距组合标记。
    3. 将剩余字符逐个映射为大写。
    4. 移除所有非字母码点 (数字、空白、标点、符号)。
    5. NFC 重新组合。

    Args:
        raw_name: 原始名称，可以是 str 或 UTF-8 编码的 bytes。

    Returns:
        只包含大写字母的规范名称；空输入或全符号输入得到空字符串。

    Raises:
        InvalidInputError: 如果输入不是合法的 Unicode 文本。
    """
    text = _ensure_text(raw_name)

    decomposed = unicodedata.normalize("NFD", text)
    letters = (
        _upper_single(ch)
        for ch in decomposed
        if unicodedata.category(ch) != NONSPACING_MARK
    )
    purged = "".join(ch for ch in letters if unicodedata.category(ch).startswith("L"))

    return unicodedata.normalize("NFC", purged)
