# regcode/generator.py
"""
标识符组合器：将名称与注册时刻合成为 `CCCC-YYMD-DNNN` 格式的标识符。

本模块是标识符生成的唯一入口，它按顺序串联名称归一化与前缀组合，
再独立调用日期编码与熵编码，最后用固定分隔符拼接。
"""
from __future__ import annotations

from datetime import datetime
from typing import NamedTuple, Union

import structlog

from regcode._ident.datecode import encode_date
from regcode._ident.entropy import ENTROPY_LENGTH, encode_entropy
from regcode._ident.normalizers import normalize_name
from regcode._ident.prefix import compose_prefix
from regcode.exceptions import InvalidInputError

logger = structlog.get_logger(__name__)


class IdentifierComponents(NamedTuple):
    """
    封装了标识符的所有派生组件。

    Attributes:
        prefix: 从名称推导出的 4 字符前缀。
        date_code: 5 字符的 `YYMDD` 日期码。
        entropy_tail: 3 字符的 36 进制毫秒尾部。
    """
    prefix: str
    date_code: str
    entropy_tail: str

    @property
    def identifier(self) -> str:
        """按 `CCCC-YYMD-DNNN` 格式拼接出的完整标识符。"""
        tail = self.entropy_tail.rjust(ENTROPY_LENGTH, "0")
        return f"{self.prefix}-{self.date_code[:4]}-{self.date_code[4:]}{tail}"


def generate_identifier_components(
    name: Union[str, bytes], instant: datetime
) -> IdentifierComponents:
    """
    从名称和注册时刻生成标识符的所有组件。

    本函数执行以下步骤：
    1. 将名称归一化为只含大写字母的规范形式。
    2. 从规范名称推导 4 字符前缀。
    3. 将时刻的 UTC 日期编码为 `YYMDD`。
    4. 将时刻的纪元毫秒数编码为 3 字符 36 进制尾部。

    Args:
        name: 实体的显示名称。
        instant: 注册时刻，不早于 Unix 纪元。

    Returns:
        一个 `IdentifierComponents` 命名元组。

    Raises:
        InvalidInputError: 如果无法从名称推导出标识符。
        InstantOutOfRangeError: 如果时刻早于 Unix 纪元。
    """
    try:
        prefix = compose_prefix(normalize_name(name))
    except InvalidInputError as e:
        logger.warning("无法从名称推导标识符。", name=name, reason=str(e))
        raise InvalidInputError(
            f"cannot derive identifier from name {name!r}: {e}"
        ) from e

    return IdentifierComponents(
        prefix=prefix,
        date_code=encode_date(instant),
        entropy_tail=encode_entropy(instant),
    )


def generate_identifier(name: Union[str, bytes], instant: datetime) -> str:
    """
    生成 14 字符的标识符。

    相同的 (name, instant) 总是得到相同的结果；标识符不保证全局唯一，
    碰撞需要由调用方的存储层处理。
    """
    identifier = generate_identifier_components(name, instant).identifier
    logger.debug("标识符已生成。", identifier=identifier)
    return identifier
