# regcode/__init__.py
"""RegCode: 从实体显示名称与注册时刻合成紧凑、可读、事实上唯一的标识符。

标识符格式为 `CCCC-YYMD-DNNN`，整个合成过程是无状态的纯函数，不依赖计数器或外部协调。
"""

__version__ = "1.0.0"

from ._ident.datecode import encode_date
from ._ident.entropy import encode_entropy, to_base36, unix_millis
from ._ident.normalizers import normalize_name
from ._ident.prefix import compose_prefix
from .exceptions import (
    ConfigurationError,
    DuplicationError,
    InstantOutOfRangeError,
    InvalidInputError,
    RegCodeError,
    RegistryStateError,
    ValidationError,
)
from .generator import (
    IdentifierComponents,
    generate_identifier,
    generate_identifier_components,
)

__all__ = [
    "__version__",
    "generate_identifier",
    "generate_identifier_components",
    "IdentifierComponents",
    "normalize_name",
    "compose_prefix",
    "encode_date",
    "encode_entropy",
    "to_base36",
    "unix_millis",
    "RegCodeError",
    "ValidationError",
    "InvalidInputError",
    "InstantOutOfRangeError",
    "DuplicationError",
    "RegistryStateError",
    "ConfigurationError",
]
