from __future__ import annotations

from typing import TypedDict

from bus_trip.employee.domain.value_object import EmployeeId, EmployeeName
from bus_trip.shared.domain import AggregateRoot, CommissionPercent, EmailAddress
from bus_trip.shared.domain.exception import BusinessRuleViolationException

DEFAULT_ROLE = "agent"


class EmployeeChanges(TypedDict, total=False):
    """従業員の部分更新（存在するキーだけ上書きする）"""

    name: EmployeeName
    email: EmailAddress | None
    phone: str | None
    role: str
    commission_percent: CommissionPercent
    active: bool


class Employee(AggregateRoot[EmployeeId]):
    """従業員（販売担当者）

    手数料率は座席への割り当て時にコピーされるため、
    ここで変更しても割り当て済みの座席には影響しない。
    """

    def __init__(
        self,
        id: EmployeeId,
        name: EmployeeName,
        email: EmailAddress | None = None,
        phone: str | None = None,
        role: str = DEFAULT_ROLE,
        commission_percent: CommissionPercent | None = None,
        active: bool = True,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._email = email
        self._phone = phone
        self._role = role
        self._commission_percent = commission_percent or CommissionPercent.default()
        self._active = active

    @property
    def name(self) -> EmployeeName:
        return self._name

    @property
    def email(self) -> EmailAddress | None:
        return self._email

    @property
    def phone(self) -> str | None:
        return self._phone

    @property
    def role(self) -> str:
        return self._role

    @property
    def commission_percent(self) -> CommissionPercent:
        return self._commission_percent

    @property
    def active(self) -> bool:
        return self._active

    def apply(self, changes: EmployeeChanges) -> None:
        """部分更新を適用する"""
        for field in ("name", "role", "commission_percent", "active"):
            if field in changes and changes[field] is None:
                raise BusinessRuleViolationException(f"{field} cannot be cleared")

        if "name" in changes:
            self._name = changes["name"]
        if "email" in changes:
            self._email = changes["email"]
        if "phone" in changes:
            self._phone = changes["phone"]
        if "role" in changes:
            self._role = changes["role"]
        if "commission_percent" in changes:
            self._commission_percent = changes["commission_percent"]
        if "active" in changes:
            self._active = changes["active"]
