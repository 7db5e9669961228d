# regcode/config.py

from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from regcode.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "console"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"日志级别必须是 {', '.join(LOG_LEVELS)} 之一，收到 '{v}'")
        return level


class RegCodeConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RC_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config() -> RegCodeConfig:
    """
    从环境变量与 .env 文件加载配置。

    Raises:
        ConfigurationError: 如果任何配置值无法通过校验。
    """
    try:
        return RegCodeConfig()
    except ValidationError as e:
        raise ConfigurationError(f"配置无效: {e}") from e
