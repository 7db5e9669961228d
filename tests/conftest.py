# tests/conftest.py
"""项目全局共享的测试 Fixtures。"""

import logging
from collections.abc import Generator
from datetime import datetime, timezone
from typing import Any

import pytest
import structlog
from pytest_mock import MockerFixture
from rich.console import Console


@pytest.fixture(scope="session", autouse=True)
def disable_rich_colors_for_tests(
    session_mocker: MockerFixture,
) -> Generator[None, None, None]:
    """全局禁用 rich 库的颜色输出，以确保测试结果的确定性。"""
    original_init = Console.__init__

    def new_init(self: Console, *args: Any, **kwargs: Any) -> None:
        kwargs["force_terminal"] = False
        kwargs["color_system"] = None
        original_init(self, *args, **kwargs)

    session_mocker.patch("rich.console.Console.__init__", new=new_init)
    yield


@pytest.fixture(autouse=True)
def restore_logging_state() -> Generator[None, None, None]:
    """每个测试结束后撤销 setup_logging 对 structlog 与标准 logging 的全局修改。"""
    app_logger = logging.getLogger("regcode")
    saved_handlers = app_logger.handlers[:]
    yield
    structlog.reset_defaults()
    app_logger.handlers[:] = saved_handlers
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


@pytest.fixture
def john_doe_instant() -> datetime:
    """提供 2006-01-02T00:00:00.010Z 这一参考时刻。"""
    return datetime(2006, 1, 2, 0, 0, 0, 10_000, tzinfo=timezone.utc)
