# regcode/_ident/prefix.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from regcode.exceptions import InvalidInputError

PREFIX_LENGTH = 4
# 21 个拉丁辅音字母，Y 视为辅音
CONSONANTS = frozenset("BCDFGHJKLMNPQRSTVWXYZ")


def extract_consonants(canonical_name: str) -> str:
    """按原顺序提取规范名称中的全部辅音字母。"""
    return "".join(ch for ch in canonical_name if ch in CONSONANTS)


def complete_consonants(consonants: str, canonical_name: str) -> str:
    """
    将辅音序列与规范名称的尾部组合成 4 个字符。

    辅音不少于 4 个时直接取前 4 个。否则用名称末尾的字符补齐，并在拼接处
    向后回退：只要保留的最后一个辅音等于补齐窗口的第一个字符，就丢弃该辅音
    并将窗口向左扩展一位，避免拼接处出现重复字母。

    调用方需保证 `canonical_name` 至少有 4 个字符。
    """
    kept = len(consonants)
    if kept >= PREFIX_LENGTH:
        return consonants[:PREFIX_LENGTH]

    name_len = len(canonical_name)
    while kept > 0:
        window_start = name_len - (PREFIX_LENGTH - kept)
        if consonants[kept - 1] != canonical_name[window_start]:
            break
        kept -= 1

    window_start = name_len - (PREFIX_LENGTH - kept)
    return consonants[:kept] + canonical_name[window_start:]


def compose_prefix(canonical_name: str) -> str:
    """
    从规范名称推导 4 字符前缀，优先使用辅音。

    Raises:
        InvalidInputError: 规范名称不足 4 个字符，没有足够的素材构造前缀。
    """
    if len(canonical_name) < PREFIX_LENGTH:
        raise InvalidInputError(
            f"invalid name: too few letters to build a prefix "
            f"(length {len(canonical_name)} < {PREFIX_LENGTH})"
        )
    return complete_consonants(extract_consonants(canonical_name), canonical_name)
