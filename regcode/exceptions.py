# regcode/exceptions.py
"""
本模块定义了 RegCode 项目中所有自定义的、语义化的异常类型。

标识符合成核心只会抛出 `InvalidInputError`（名称无法归约为前缀）和
`InstantOutOfRangeError`（注册时刻早于 Unix 纪元）。其余异常属于
注册流程的外围协作者（字段校验、内存注册表、配置加载）。
"""


class RegCodeError(Exception):
    """
    所有 RegCode 自定义异常的通用基类。
    捕获此异常可以处理所有源自本项目的预期错误。
    """
    pass


class ValidationError(RegCodeError, ValueError):
    """
    表示注册请求或其中某个字段无法被接受。
    继承自 ValueError 是为了让只关心“值错误”的调用者也能捕获它。
    """
    pass


class InvalidInputError(ValidationError):
    """
    表示无法从给定名称推导出标识符。
    例如名称为空、不含任何字母、字母不足 4 个，或输入不是合法的 Unicode 文本。
    """
    pass


class InstantOutOfRangeError(RegCodeError, ValueError):
    """表示注册时刻早于 Unix 纪元，毫秒数为负，违反了熵编码的前置条件。"""
    pass


class DuplicationError(RegCodeError):
    """表示注册表中已存在相同的 ID、名称、邮箱或电话。"""
    pass


class RegistryStateError(RegCodeError):
    """
    表示注册表内部状态不可用。
    对外只暴露通用的系统错误信息，不泄露内部细节。
    """

    def __init__(self, message: str = "system error: contact support") -> None:
        super().__init__(message)


class ConfigurationError(RegCodeError):
    """
    表示在加载、解析或验证配置时发生的错误。
    例如，.env 文件中的字段格式不正确。
    """
    pass
