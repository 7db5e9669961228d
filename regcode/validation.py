# regcode/validation.py
"""
注册请求的字段校验。

这些规则位于标识符合成之前：名称、邮箱和电话先在这里被校验，
通过之后才会交给 `generate_identifier`。每个校验函数在失败时抛出
带有简短原因的 `ValidationError`。
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from regcode.exceptions import ValidationError

if TYPE_CHECKING:
    from regcode.types import RegisterRequest

# --- 名称 ---
MIN_NAME_PARTS = 2
MIN_FIRST_AND_LAST_NAME_LENGTH = 3
MIN_NAME_LENGTH = MIN_NAME_PARTS * MIN_FIRST_AND_LAST_NAME_LENGTH + 1
MAX_NAME_LENGTH = 60

RE_NAME_ALLOWED = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9'\-\. ]{5,58}[a-zA-Z0-9\.]$")
RE_NAME_INVALID_SEQUENCE = re.compile(r"(['\-\.]{2,})|([ ]{2,})")

# --- 邮箱 ---
MIN_EMAIL_USERNAME_LENGTH = 3
MIN_EMAIL_SERVICE_LENGTH = 3
MIN_EMAIL_EXTENSION_LENGTH = 2
MIN_EMAIL_LENGTH = (
    MIN_EMAIL_USERNAME_LENGTH + MIN_EMAIL_SERVICE_LENGTH + MIN_EMAIL_EXTENSION_LENGTH + 2
)
MAX_EMAIL_LENGTH = 60

RE_EMAIL_INVALID_SEQUENCE = re.compile(r"([@_\-\.]{2,})")
RE_EMAIL_USERNAME = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9\-\._]{1,51}[a-zA-Z0-9]$")
RE_EMAIL_SERVICE = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9\-\.]{1,51}[a-zA-Z0-9]$")
RE_EMAIL_EXTENSION = re.compile(r"^[a-zA-Z]{2,52}$")

# --- 电话 ---
MIN_PHONE_COUNTRY_LENGTH = 1
MAX_PHONE_COUNTRY_LENGTH = 3
MIN_PHONE_NUMBER_LENGTH = 3
MAX_PHONE_NUMBER_LENGTH = 17
MIN_PHONE_LENGTH = MIN_PHONE_COUNTRY_LENGTH + MIN_PHONE_NUMBER_LENGTH + 2
MAX_PHONE_LENGTH = 20

RE_PHONE_COUNTRY = re.compile(r"^\+[0-9]{1,3}$")
RE_PHONE_NUMBER = re.compile(r"^[0-9][0-9 ]{1,15}[0-9]$")
RE_PHONE_INVALID_SEQUENCE = re.compile(r"([ ]{2,})")


def _check_length(value: str, minimum: int, maximum: int | None = None) -> None:
    if len(value) < minimum:
        raise ValidationError(f"too short (length < {minimum})")
    if maximum is not None and len(value) > maximum:
        raise ValidationError(f"too long (length > {maximum})")


def validate_name(name: str) -> None:
    """
    校验客户名称。

    名称必须：
    - 长度在 MIN_NAME_LENGTH 与 MAX_NAME_LENGTH 之间；
    - 以字母数字开头，以字母数字或点号结尾；
    - 不包含连续的特殊字符 (', -, .) 或连续空格；
    - 至少由两部分组成，且首尾两部分各至少 3 个字符。
    """
    _check_length(name, MIN_NAME_LENGTH, MAX_NAME_LENGTH)

    if not RE_NAME_ALLOWED.match(name):
        raise ValidationError("invalid characters")
    if RE_NAME_INVALID_SEQUENCE.search(name):
        raise ValidationError("invalid character sequence")

    parts = name.split(" ")
    if len(parts) < MIN_NAME_PARTS:
        raise ValidationError(f"not a full name (parts < {MIN_NAME_PARTS})")
    if (
        len(parts[0]) < MIN_FIRST_AND_LAST_NAME_LENGTH
        or len(parts[-1]) < MIN_FIRST_AND_LAST_NAME_LENGTH
    ):
        raise ValidationError(
            f"first or last name too short (length < {MIN_FIRST_AND_LAST_NAME_LENGTH})"
        )


def _decompose_email(email: str) -> tuple[str, str, str]:
    """将邮箱拆分为 (用户名, 服务域名, 扩展名)。"""
    user_and_domain = email.split("@")
    if len(user_and_domain) != 2:
        raise ValidationError("invalid email format")

    username, domain = user_and_domain
    domain_parts = domain.split(".")
    if len(domain_parts) < 2:
        raise ValidationError("invalid email format")

    return username, ".".join(domain_parts[:-1]), domain_parts[-1]


def validate_email(email: str) -> None:
    """校验邮箱地址的长度、字符序列以及用户名、服务域名和扩展名三个部分。"""
    _check_length(email, MIN_EMAIL_LENGTH, MAX_EMAIL_LENGTH)

    if RE_EMAIL_INVALID_SEQUENCE.search(email):
        raise ValidationError("invalid character sequence")

    username, service, extension = _decompose_email(email)

    checks = (
        ("username", username, MIN_EMAIL_USERNAME_LENGTH, RE_EMAIL_USERNAME),
        ("service", service, MIN_EMAIL_SERVICE_LENGTH, RE_EMAIL_SERVICE),
        ("extension", extension, MIN_EMAIL_EXTENSION_LENGTH, RE_EMAIL_EXTENSION),
    )
    for part_name, value, minimum, pattern in checks:
        try:
            _check_length(value, minimum)
            if not pattern.match(value):
                raise ValidationError("invalid characters")
        except ValidationError as e:
            raise ValidationError(f"invalid {part_name}: {e}") from e


def validate_phone(phone: str) -> None:
    """
    校验电话号码。

    格式为 `+<国家码> <号码>`：国家码 1-3 位数字，号码以数字开头和结尾，
    中间只允许数字和单个空格。
    """
    _check_length(phone, MIN_PHONE_LENGTH, MAX_PHONE_LENGTH)

    if RE_PHONE_INVALID_SEQUENCE.search(phone):
        raise ValidationError("invalid character sequence")

    country, sep, number = phone.partition(" ")
    if not sep:
        raise ValidationError("invalid phone format")

    try:
        if country and not country.startswith("+"):
            raise ValidationError("missing the leading plus symbol")
        _check_length(country, MIN_PHONE_COUNTRY_LENGTH + 1)
        if len(country) > MAX_PHONE_COUNTRY_LENGTH + 1:
            raise ValidationError(f"too long (length > {MAX_PHONE_COUNTRY_LENGTH})")
        if not RE_PHONE_COUNTRY.match(country):
            raise ValidationError("invalid characters")
    except ValidationError as e:
        raise ValidationError(f"invalid country code: {e}") from e

    try:
        _check_length(number, MIN_PHONE_NUMBER_LENGTH, MAX_PHONE_NUMBER_LENGTH)
        if not RE_PHONE_NUMBER.match(number):
            raise ValidationError("invalid characters")
    except ValidationError as e:
        raise ValidationError(f"invalid phone number: {e}") from e


def validate_register_request(request: "RegisterRequest") -> None:
    """
    校验注册请求中的所有必填字段。

    所有字段都会被检查，失败原因合并到同一个 `ValidationError` 中。
    """
    errors: list[str] = []
    fields = (
        ("name", request.name, validate_name),
        ("email", request.email, validate_email),
        ("phone", request.phone, validate_phone),
    )
    for field_name, value, validator in fields:
        try:
            validator(value)
        except ValidationError as e:
            errors.append(f"invalid {field_name}: '{value}': {e}")

    if errors:
        raise ValidationError("\n".join(errors))
