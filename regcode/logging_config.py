# regcode/logging_config.py
"""
本模块负责集中配置项目的日志系统，并与 Rich 库集成以提供单行配色的控制台输出。
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Literal

import structlog
from rich.console import Console
from rich.text import Text
from structlog.typing import Processor


class RichLineRenderer:
    """
    一个 structlog 处理器，它将每条日志渲染为一行带配色的文本：
    时间戳、等宽级别标签、事件、记录器名称，以及按键排序的 `key=value` 上下文。
    """

    # 每个级别的文本长度一致，以实现对齐。
    LEVEL_STYLES = {
        "debug": ("blue", "DEBUG   "),
        "info": ("green", "INFO    "),
        "warning": ("yellow", "WARNING "),
        "error": ("bold red", "ERROR   "),
        "critical": ("bold magenta", "CRITICAL"),
    }

    def __init__(
        self,
        kv_truncate_at: int = 80,
        show_timestamp: bool = True,
        show_logger_name: bool = True,
    ):
        """
        Args:
            kv_truncate_at: 上下文值的最大显示长度，超长部分以 '…' 截断。
            show_timestamp: 是否在行首显示时间戳。
            show_logger_name: 是否在事件后显示日志记录器的名称。
        """
        self._console = Console(stderr=True, soft_wrap=True)
        self._kv_truncate_at = kv_truncate_at
        self._show_timestamp = show_timestamp
        self._show_logger_name = show_logger_name

    def __call__(
        self, logger: Any, name: str, event_dict: MutableMapping[str, Any]
    ) -> str:
        event = str(event_dict.pop("event", "")).strip()
        if not event:
            return ""

        timestamp = event_dict.pop("timestamp", "")
        level = str(event_dict.pop("level", name)).lower()
        logger_name = event_dict.pop("logger", "unknown")
        style, level_text = self.LEVEL_STYLES.get(level, ("default", level.upper()))

        line = Text()
        if self._show_timestamp and timestamp:
            line.append(f"{timestamp} ", style="dim")
        line.append(level_text, style=style)
        line.append(f" {event}")
        if self._show_logger_name:
            line.append(f" ({logger_name})", style="cyan dim")
        for key, value in sorted(event_dict.items()):
            line.append(f" {key}=", style="dim")
            line.append(self._truncate(repr(value)), style="bright_white")

        with self._console.capture() as capture:
            self._console.print(line)
        return capture.get().rstrip()

    def _truncate(self, value_repr: str) -> str:
        if len(value_repr) <= self._kv_truncate_at:
            return value_repr
        return value_repr[: self._kv_truncate_at - 1] + "…"


APP_LOGGER_NAME = "regcode"


class _PreRenderedFormatter(logging.Formatter):
    """structlog 已经把事件渲染成字符串，这里原样输出。"""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def _build_renderer(
    log_format: Literal["json", "console"],
    show_timestamp: bool,
    show_logger_name: bool,
    kv_truncate_at: int,
) -> tuple[Processor, Processor]:
    """返回与输出格式匹配的 (时间戳处理器, 渲染器)。"""
    if log_format == "json":
        return (
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        )
    return (
        structlog.processors.TimeStamper(fmt="%H:%M:%S.%f", utc=True),
        RichLineRenderer(
            kv_truncate_at=kv_truncate_at,
            show_timestamp=show_timestamp,
            show_logger_name=show_logger_name,
        ),
    )


def setup_logging(
    log_level: str = "INFO",
    log_format: Literal["json", "console"] = "console",
    show_timestamp: bool = True,
    show_logger_name: bool = True,
    kv_truncate_at: int = 80,
) -> None:
    """
    配置 regcode 的日志输出。

    日志经由标准库的 `regcode` 记录器写到 stderr，不修改根记录器，
    因此嵌入到其他应用中时不会干扰宿主的日志配置。重复调用会替换
    之前安装的处理器。

    Args:
        log_level: 要显示的最低日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)。
        log_format: 'console' 输出单行配色文本，'json' 输出每行一个 JSON 对象。
        show_timestamp: console 模式下是否显示时间戳。
        show_logger_name: console 模式下是否显示记录器名称。
        kv_truncate_at: console 模式下上下文值的截断长度。
    """
    timestamper, renderer = _build_renderer(
        log_format, show_timestamp, show_logger_name, kv_truncate_at
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(_PreRenderedFormatter())

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.handlers[:] = [handler]
    app_logger.setLevel(log_level.upper())
    app_logger.propagate = False

    structlog.get_logger("regcode.logging_config").debug(
        "日志系统已配置完成。",
        log_format=log_format,
        app_log_level=log_level.upper(),
    )
