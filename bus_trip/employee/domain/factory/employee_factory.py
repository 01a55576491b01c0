from decimal import Decimal
from typing import NotRequired, TypedDict

from bus_trip.employee.domain.entity import DEFAULT_ROLE, Employee
from bus_trip.employee.domain.value_object import EmployeeId, EmployeeName
from bus_trip.shared.domain import CommissionPercent, EmailAddress


class EmployeeDetails(TypedDict):
    """従業員登録の入力データ"""

    name: str
    email: NotRequired[str | None]
    phone: NotRequired[str | None]
    role: NotRequired[str | None]
    commission_percent: NotRequired[Decimal | None]
    active: NotRequired[bool | None]


class EmployeeFactory:
    """従業員を生成するFactory

    - プリミティブ型から Value Object への変換
    - 省略された任意項目への既定値の適用
    """

    def __init__(self, commission_percent: CommissionPercent | None = None) -> None:
        self._default_commission_percent = (
            commission_percent or CommissionPercent.default()
        )

    def create(self, employee_id: EmployeeId, details: EmployeeDetails) -> Employee:
        """新規従業員のエンティティを作成する"""
        return Employee(id=employee_id, **self._to_fields(details))

    def validate(self, details: EmployeeDetails) -> None:
        """採番前に入力だけを検証する

        Raises:
            KeyError: name が無い場合
            ValueError: いずれかの値が不正な場合
        """
        self._to_fields(details)

    def _to_fields(self, details: EmployeeDetails) -> dict:
        email = details.get("email")
        commission_percent = details.get("commission_percent")
        active = details.get("active")

        return {
            "name": EmployeeName(details["name"]),
            "email": EmailAddress(email) if email is not None else None,
            "phone": details.get("phone"),
            "role": details.get("role") or DEFAULT_ROLE,
            "commission_percent": (
                CommissionPercent(commission_percent)
                if commission_percent is not None
                else self._default_commission_percent
            ),
            "active": True if active is None else active,
        }
