# regcode/types.py
"""
本模块定义了 RegCode 注册流程的核心数据类型。
这些类型是标识符合成核心与其调用方 (注册表、CLI) 之间的数据契约。
"""

from pydantic import BaseModel, ConfigDict


class RegisterRequest(BaseModel):
    """携带注册一个新客户所需的全部数据。"""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    phone: str


class Customer(BaseModel):
    """代表一个已注册的客户。`id` 由 `generate_identifier` 生成。"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    phone: str

