# tests/unit/test_config.py
"""针对 `regcode.config` 模块的单元测试。"""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from regcode.config import RegCodeConfig, load_config
from regcode.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """在没有 .env 文件、没有 RC_ 环境变量的目录中运行。"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RC_LOGGING__LEVEL", raising=False)
    monkeypatch.delenv("RC_LOGGING__FORMAT", raising=False)


def test_defaults() -> None:
    config = RegCodeConfig()
    assert config.logging.level == "INFO"
    assert config.logging.format == "console"


def test_nested_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RC_LOGGING__LEVEL", "debug")
    monkeypatch.setenv("RC_LOGGING__FORMAT", "json")

    config = RegCodeConfig()

    assert config.logging.level == "DEBUG"
    assert config.logging.format == "json"


def test_env_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("RC_LOGGING__LEVEL=WARNING\n", encoding="utf-8")
    assert RegCodeConfig().logging.level == "WARNING"


@pytest.mark.parametrize(
    "name, value",
    [("RC_LOGGING__LEVEL", "LOUD"), ("RC_LOGGING__FORMAT", "xml")],
)
def test_invalid_values_are_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(PydanticValidationError):
        RegCodeConfig()


def test_load_config_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RC_LOGGING__LEVEL", "LOUD")
    with pytest.raises(ConfigurationError, match="配置无效") as exc_info:
        load_config()
    assert isinstance(exc_info.value.__cause__, PydanticValidationError)


def test_load_config_returns_settings() -> None:
    assert load_config().logging.format == "console"
