from decimal import Decimal
from typing import TypedDict

from bus_trip.employee.domain.entity import Employee, EmployeeChanges
from bus_trip.employee.domain.repository import EmployeeRepository
from bus_trip.employee.domain.value_object import EmployeeId, EmployeeName
from bus_trip.shared.domain import CommissionPercent, EmailAddress
from bus_trip.shared.domain.exception import InvalidInputException


class EmployeeUpdate(TypedDict, total=False):
    """従業員更新の入力データ（プリミティブ型）"""

    name: str
    email: str | None
    phone: str | None
    role: str
    commission_percent: Decimal
    active: bool


class UpdateEmployeeService:
    """従業員更新ユースケース"""

    def __init__(self, repository: EmployeeRepository) -> None:
        self._repository = repository

    def update(self, employee_id: EmployeeId, update: EmployeeUpdate) -> Employee:
        """指定された項目だけを更新する

        Raises:
            InvalidInputException: 値が不正な場合（何も変更しない）
            ResourceNotFoundException: 従業員が存在しない場合
            OptimisticLockException: 同時更新の競合が解消しなかった場合
        """
        changes = _to_changes(update)
        return self._repository.update(employee_id, changes)


def _to_changes(update: EmployeeUpdate) -> EmployeeChanges:
    """プリミティブ型の入力を検証し、Value Object に変換する"""
    changes: EmployeeChanges = {}
    try:
        if "name" in update:
            changes["name"] = EmployeeName(update["name"])
        if "email" in update:
            email = update["email"]
            changes["email"] = EmailAddress(email) if email is not None else None
        if "phone" in update:
            changes["phone"] = update["phone"]
        if "role" in update:
            changes["role"] = update["role"]
        if "commission_percent" in update:
            changes["commission_percent"] = CommissionPercent(
                update["commission_percent"]
            )
        if "active" in update:
            changes["active"] = update["active"]
    except (TypeError, ValueError) as e:
        raise InvalidInputException(str(e)) from e

    for field in ("role", "active"):
        if field in changes and changes[field] is None:
            raise InvalidInputException(f"{field} cannot be cleared")
    return changes
