# regcode/cli/utils.py
"""提供 CLI 命令使用的共享工具函数。"""

from datetime import datetime, timezone
from typing import Optional

import typer


def parse_instant(value: Optional[str]) -> datetime:
    """
    将 ISO 8601 字符串解析为带时区的 datetime；为空时返回当前 UTC 时刻。

    不带时区的时间按 UTC 处理，末尾的 'Z' 等同于 '+00:00'。

    Raises:
        typer.BadParameter: 如果字符串不是合法的 ISO 8601 时间。
    """
    if not value:
        return datetime.now(timezone.utc)

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        instant = datetime.fromisoformat(text)
    except ValueError as e:
        raise typer.BadParameter(f"无法解析时间 '{value}': {e}", param_hint="--at") from e

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant
