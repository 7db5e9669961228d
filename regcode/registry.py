# regcode/registry.py
"""
一个内存中的客户注册表，是标识符合成核心的参考调用方。

标识符本身不保证唯一：碰撞会在这里以 `duplicated id` 的形式暴露出来，
与名称、邮箱、电话的重复一起报告。本实现不是线程安全的。
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Optional

import structlog

from regcode.exceptions import DuplicationError, RegistryStateError, ValidationError
from regcode.generator import generate_identifier
from regcode.types import Customer, RegisterRequest
from regcode.validation import validate_register_request

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """返回当前的 UTC 时刻。"""
    return datetime.now(timezone.utc)


class CustomerRegistry:
    """
    管理客户注册。

    维护一个客户列表以及按 ID、名称、邮箱、电话建立的四个索引。
    注册时刻由可注入的 `clock` 提供，便于测试得到确定的标识符。
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._customers: list[Customer] = []
        self._id_index: dict[str, Customer] = {}
        self._name_index: dict[str, Customer] = {}
        self._email_index: dict[str, Customer] = {}
        self._phone_index: dict[str, Customer] = {}

    @property
    def customers(self) -> list[Customer]:
        """按注册顺序返回所有客户的副本。"""
        return list(self._customers)

    def register(self, request: RegisterRequest) -> str:
        """
        校验请求、检查重复，并添加一个新客户。

        Returns:
            新客户的标识符。

        Raises:
            RegistryStateError: 注册表内部状态不可用。
            ValidationError: 请求字段校验失败，或无法从名称推导标识符。
            DuplicationError: ID、名称、邮箱或电话已存在。
        """
        if not self._is_usable():
            logger.error("注册表状态不可用，拒绝注册。")
            raise RegistryStateError()

        try:
            validate_register_request(request)
        except ValidationError as e:
            raise ValidationError(f"validation error: {e}") from e

        customer_id = generate_identifier(request.name, self._clock())
        customer = Customer(
            id=customer_id,
            name=request.name,
            email=request.email,
            phone=request.phone,
        )

        self._check_duplication(customer)
        self._store(customer)

        logger.info("客户已注册。", customer_id=customer_id)
        return customer_id

    def get(self, customer_id: str) -> Optional[Customer]:
        """按 ID 查找客户，不存在时返回 None。"""
        return self._id_index.get(customer_id)

    def _is_usable(self) -> bool:
        return all(
            index is not None
            for index in (
                self._customers,
                self._id_index,
                self._name_index,
                self._email_index,
                self._phone_index,
            )
        )

    def _check_duplication(self, customer: Customer) -> None:
        """检查 ID、名称、邮箱或电话是否已存在，所有冲突合并到一个异常中。"""
        conflicts = [
            f"duplicated {field}: '{value}'"
            for field, value, index in (
                ("id", customer.id, self._id_index),
                ("name", customer.name, self._name_index),
                ("email", customer.email, self._email_index),
                ("phone", customer.phone, self._phone_index),
            )
            if value in index
        ]
        if conflicts:
            logger.warning("注册请求与已有客户冲突。", conflicts=conflicts)
            raise DuplicationError("duplication error: " + "\n".join(conflicts))

    def _store(self, customer: Customer) -> None:
        self._customers.append(customer)
        self._id_index[customer.id] = customer
        self._name_index[customer.name] = customer
        self._email_index[customer.email] = customer
        self._phone_index[customer.phone] = customer

    def __len__(self) -> int:
        return len(self._customers)

    def __contains__(self, customer_id: object) -> bool:
        return isinstance(customer_id, str) and customer_id in self._id_index
