# tests/unit/_ident/test_prefix.py
"""测试辅音前缀的提取与补齐规则。"""

from __future__ import annotations

import pytest

from regcode._ident.prefix import (
    complete_consonants,
    compose_prefix,
    extract_consonants,
)
from regcode.exceptions import InvalidInputError, ValidationError


@pytest.mark.parametrize(
    "canonical, expected",
    [
        ("", ""),
        ("AEIOU", ""),
        ("BCDFG", "BCDFG"),
        ("JOHNDOE", "JHND"),
        ("JHANSENASPEERPOINTPEPPERONTINO", "JHNSNSPRPNTPPPRNTN"),
        ("YVONNE", "YVNN"),
    ],
)
def test_extract_consonants(canonical: str, expected: str) -> None:
    """Y 视为辅音，元音 A/E/I/O/U 被跳过。"""
    assert extract_consonants(canonical) == expected


@pytest.mark.parametrize(
    "consonants, canonical, expected",
    [
        ("JHND", "JOHNDOE", "JHND"),
        ("JD", "JEEDEE", "JDEE"),
        ("", "OEIUUAE", "UUAE"),
        ("JD", "JOEEDE", "JEDE"),
        ("JDD", "JOEDDE", "JDDE"),
        ("JDD", "JOEEDD", "JEDD"),
        ("JDD", "OEEJDD", "EJDD"),
        ("JND", "JANEDOE", "JNDE"),
    ],
)
def test_complete_consonants(consonants: str, canonical: str, expected: str) -> None:
    """验证拼接处的回退去重规则。"""
    assert complete_consonants(consonants, canonical) == expected


def test_complete_consonants_uses_first_four_when_enough() -> None:
    assert complete_consonants("XSPTRTNRMN", "XASPTRTONORMAN") == "XSPT"


@pytest.mark.parametrize(
    "canonical, expected",
    [
        ("JOHNDOE", "JHND"),
        ("JANEDOE", "JNDE"),
        ("XASPTRTONORMAN", "XSPT"),
        ("AEIO", "AEIO"),
        ("ABBA", "ABBA"),
        # 没有拉丁辅音的文字退化为取名称尾部
        ("ΕΛΕΝΗ", "ΛΕΝΗ"),
    ],
)
def test_compose_prefix(canonical: str, expected: str) -> None:
    prefix = compose_prefix(canonical)
    assert prefix == expected
    assert len(prefix) == 4


@pytest.mark.parametrize("canonical", ["", "A", "AL", "BOB"])
def test_compose_prefix_rejects_insufficient_material(canonical: str) -> None:
    """规范名称不足 4 个字符时必须失败，且属于校验类错误。"""
    with pytest.raises(InvalidInputError) as excinfo:
        compose_prefix(canonical)
    assert isinstance(excinfo.value, ValidationError)
